# File: lienzo/core/spatial_state.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-05
# Purpose: Feedback espacial por objeto: contención en el workspace + colisión durante el drag.
# Notes: La opacidad es solo cosmética; ningún otro módulo debe leerla como validez.
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from lienzo.core.geometry import contains, overlaps
from lienzo.core.settings import EditorSettings
from lienzo.core.surface import DRAG_EVENTS, EventKind, RenderSurface, Unsubscribe
from lienzo.core.workspace import WorkspaceHandle

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObjectState:
    contained: bool
    colliding: bool
    opacity: float

    @property
    def valid(self) -> bool:
        return self.contained and not self.colliding


class SpatialStateEngine:
    """Evalúa cada objeto en los eventos de interacción y ajusta su opacidad.

    - added / modified: solo contención. El commit no marca colisión, así dos
      objetos que quedan tocándose tras el drag no quedan "inválidos".
    - moving / scaling / rotating: contención + colisión contra todos los hermanos,
      con sus posiciones actuales (pueden estar desfasadas en gestos múltiples).
    """

    def __init__(self, surface: RenderSurface, workspace: Optional[WorkspaceHandle], settings: EditorSettings) -> None:
        self._surface = surface
        self._workspace = workspace
        self._settings = settings
        self._unsubscribers: list[Unsubscribe] = []
        self._closed = False

    # ------------------------------ Suscripción

    def attach(self) -> None:
        if self._closed or self._unsubscribers:
            return
        self._unsubscribers.append(self._surface.subscribe(EventKind.ADDED, self._on_settled))
        self._unsubscribers.append(self._surface.subscribe(EventKind.MODIFIED, self._on_settled))
        for kind in DRAG_EVENTS:
            self._unsubscribers.append(self._surface.subscribe(kind, self._on_dragging))

    def detach(self) -> None:
        self._closed = True
        while self._unsubscribers:
            self._unsubscribers.pop()()

    def _on_settled(self, obj: Any) -> None:
        self.evaluate_object_state(obj, False)

    def _on_dragging(self, obj: Any) -> None:
        self.evaluate_object_state(obj, True)

    # ------------------------------ Evaluación

    def evaluate_object_state(self, obj: Any, is_dragging: bool = False) -> Optional[ObjectState]:
        """Contención (+ colisión si is_dragging) y feedback de opacidad.

        Devuelve None (sin tocar nada) para el propio workspace o sin workspace.
        """
        if self._closed or self._workspace is None:
            return None
        if self._workspace.is_workspace(obj):
            return None
        ws_bounds = self._workspace.bounds()
        if ws_bounds is None:
            return None

        bounds = self._surface.absolute_bounds(obj)
        contained = contains(ws_bounds, bounds)

        colliding = False
        if is_dragging:
            for other in self._surface.list_objects():
                if other is obj or self._workspace.is_workspace(other):
                    continue
                if overlaps(bounds, self._surface.absolute_bounds(other)):
                    colliding = True
                    break

        if contained and not colliding:
            opacity = float(self._settings.full_opacity)
        else:
            opacity = float(self._settings.dimmed_opacity)
        self._surface.set_object_opacity(obj, opacity)
        return ObjectState(contained=contained, colliding=colliding, opacity=opacity)
