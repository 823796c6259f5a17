# File: lienzo/core/session.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-06
# Purpose: Sesión de editor: crea el workspace, arma ambos motores y gestiona su ciclo de vida.
# Notes: start()/close() son idempotentes. Tras close() los recálculos/evaluaciones son no-ops.
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from lienzo.core.geometry import Bounds, ViewportTransform
from lienzo.core.settings import EditorSettings
from lienzo.core.shapes import build_shape_spec
from lienzo.core.spatial_state import ObjectState, SpatialStateEngine
from lienzo.core.surface import RenderSurface
from lienzo.core.version import DEFAULT_WORKSPACE_HEIGHT
from lienzo.core.viewport_fit import ViewportFitEngine
from lienzo.core.workspace import WorkspaceHandle
from lienzo.utils.errors import LienzoSessionError

log = logging.getLogger(__name__)


class EditorSession:
    """Punto de entrada del host (UI) al núcleo."""

    def __init__(
        self,
        surface: RenderSurface,
        settings: Optional[EditorSettings] = None,
        *,
        on_viewport_applied: Optional[Callable[[ViewportTransform], None]] = None,
    ) -> None:
        self._surface = surface
        self._settings = settings or EditorSettings()
        self._on_viewport_applied = on_viewport_applied
        self._workspace: Optional[WorkspaceHandle] = None
        self._fit: Optional[ViewportFitEngine] = None
        self._spatial: Optional[SpatialStateEngine] = None
        self._started = False
        self._closed = False

    @property
    def settings(self) -> EditorSettings:
        return self._settings

    @property
    def workspace(self) -> Optional[WorkspaceHandle]:
        return self._workspace

    @property
    def fit_engine(self) -> Optional[ViewportFitEngine]:
        return self._fit

    @property
    def spatial_engine(self) -> Optional[SpatialStateEngine]:
        return self._spatial

    @property
    def active(self) -> bool:
        return self._started and not self._closed

    # ------------------------------ Ciclo de vida

    def _initial_workspace_bounds(self) -> Bounds:
        cw, ch = self._surface.container_size()
        cw = max(0.0, float(cw))
        ch = max(0.0, float(ch))
        w = float(self._settings.workspace_width)
        if self._settings.workspace_height is not None:
            h = float(self._settings.workspace_height)
        else:
            h = ch if ch > 0.0 else DEFAULT_WORKSPACE_HEIGHT
        # Centrado en el contenedor inicial (coordenadas de documento == px antes del ajuste).
        return Bounds((cw - w) / 2.0, (ch - h) / 2.0, w, h)

    def start(self) -> None:
        if self._closed:
            raise LienzoSessionError("La sesión ya fue cerrada")
        if self._started:
            return
        self._started = True

        ws_bounds = self._initial_workspace_bounds()
        ws_obj = self._surface.add_workspace(ws_bounds)
        self._workspace = WorkspaceHandle(self._surface, ws_obj)

        self._fit = ViewportFitEngine(
            self._surface,
            self._workspace,
            self._settings,
            on_applied=self._on_viewport_applied,
        )
        self._spatial = SpatialStateEngine(self._surface, self._workspace, self._settings)
        self._spatial.attach()
        self._fit.attach()
        self._fit.recompute_viewport()
        log.info(
            "Sesión iniciada: workspace=%.0fx%.0f margin_ratio=%s debounce=%sms",
            ws_bounds.width,
            ws_bounds.height,
            self._settings.margin_ratio,
            self._settings.debounce_window_ms,
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._fit is not None:
            self._fit.teardown()
        if self._spatial is not None:
            self._spatial.detach()
        if self._workspace is not None:
            self._workspace.invalidate()
        log.info("Sesión cerrada")

    # ------------------------------ API del host

    def recompute_viewport(self) -> Optional[ViewportTransform]:
        if not self.active or self._fit is None:
            return None
        return self._fit.recompute_viewport()

    def evaluate_object_state(self, obj: Any, is_dragging: bool = False) -> Optional[ObjectState]:
        if not self.active or self._spatial is None:
            return None
        return self._spatial.evaluate_object_state(obj, is_dragging)

    def add_shape(self, kind: object, **options: Any) -> Any:
        """Crea una forma (ver build_shape_spec) y la agrega a la superficie."""
        if not self.active:
            raise LienzoSessionError("La sesión no está activa")
        ws_bounds = self._workspace.bounds() if self._workspace is not None else None
        cw, ch = self._surface.container_size()
        spec = build_shape_spec(
            kind,
            options,
            workspace=ws_bounds,
            canvas_center=(float(cw) / 2.0, float(ch) / 2.0),
        )
        obj = self._surface.add_shape(spec)
        log.debug("Forma agregada: %s en (%.1f, %.1f)", spec.kind.value, spec.left, spec.top)
        return obj
