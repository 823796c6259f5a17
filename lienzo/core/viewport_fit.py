# File: lienzo/core/viewport_fit.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-04
# Purpose: Motor de ajuste del viewport: escala el workspace al contenedor (con margen) y lo centra.
# Notes: El transform se reemplaza entero en cada recálculo (nunca se compone): sin deriva entre resizes.
from __future__ import annotations

import logging
from typing import Callable, Optional

from lienzo.core.debounce import DebouncedCall
from lienzo.core.geometry import ViewportTransform, compute_fit_transform
from lienzo.core.settings import EditorSettings
from lienzo.core.surface import RenderSurface, Unsubscribe
from lienzo.core.workspace import WorkspaceHandle

log = logging.getLogger(__name__)


class ViewportFitEngine:
    """Mantiene el workspace visible y centrado ante cualquier resize del contenedor.

    Flujo:
      - attach(): se suscribe al observador de tamaño de la superficie.
      - cada notificación -> notify_resize() -> DebouncedCall (gana la última).
      - al vencer la ventana de quietud -> recompute_viewport().
      - teardown(): cancela el timer pendiente y corta la observación.

    Las condiciones degeneradas (sin workspace, contenedor sin área) son no-ops:
    pasan de forma normal durante el montaje/desmontaje del widget.
    """

    def __init__(
        self,
        surface: RenderSurface,
        workspace: Optional[WorkspaceHandle],
        settings: EditorSettings,
        *,
        on_applied: Optional[Callable[[ViewportTransform], None]] = None,
    ) -> None:
        self._surface = surface
        self._workspace = workspace
        self._settings = settings
        self._on_applied = on_applied
        self._task = DebouncedCall(self.recompute_viewport, settings.debounce_window_ms)
        self._unobserve: Optional[Unsubscribe] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def resize_pending(self) -> bool:
        return self._task.pending

    def attach(self) -> None:
        if self._closed or self._unobserve is not None:
            return
        self._unobserve = self._surface.observe_resize(self.notify_resize)

    def notify_resize(self, *_args: object) -> None:
        """Notificación del observador de tamaño (los argumentos se ignoran: se relee el contenedor)."""
        if self._closed:
            return
        self._task.schedule()

    def recompute_viewport(self) -> Optional[ViewportTransform]:
        """Recalcula y aplica el transform de ajuste.

        Devuelve el transform aplicado, o None si fue un no-op.
        Idempotente: con entradas iguales escribe exactamente el mismo transform.
        """
        if self._closed:
            return None

        ws_bounds = self._workspace.bounds() if self._workspace is not None else None
        if ws_bounds is None:
            log.debug("[fit] sin workspace: se omite")
            return None

        width, height = self._surface.container_size()
        width = float(width)
        height = float(height)
        if width <= 0.0 or height <= 0.0:
            log.debug("[fit] contenedor %sx%s sin área: se omite", width, height)
            return None

        matrix = compute_fit_transform(width, height, ws_bounds, self._settings.margin_ratio)
        if matrix is None:
            return None

        self._surface.set_surface_size(width, height)
        self._surface.set_viewport_transform(matrix)
        self._surface.request_redraw()
        log.debug("[fit] contenedor=%sx%s escala=%.4f tx=%.2f ty=%.2f", width, height, matrix.a, matrix.e, matrix.f)

        if self._on_applied is not None:
            self._on_applied(matrix)
        return matrix

    def teardown(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._task.close()
        if self._unobserve is not None:
            self._unobserve()
            self._unobserve = None
