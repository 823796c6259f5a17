# File: lienzo/core/surface.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-03
# Purpose: Contrato mínimo de la superficie de dibujo que consumen los motores.
# Notes: La implementación Qt vive en lienzo/ui/scene_surface.py. Los tests usan un fake en memoria.
from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Protocol, Sequence, Tuple

from lienzo.core.geometry import Bounds, ViewportTransform


class EventKind(str, Enum):
    """Eventos de interacción sobre un objeto de escena.

    - added: recién agregado a la superficie.
    - moving / scaling / rotating: gesto en curso (se dispara por frame).
    - modified: gesto terminado (commit).
    """

    ADDED = "added"
    MOVING = "moving"
    SCALING = "scaling"
    ROTATING = "rotating"
    MODIFIED = "modified"


# Eventos de gesto en curso: evalúan colisión además de contención.
DRAG_EVENTS = (EventKind.MOVING, EventKind.SCALING, EventKind.ROTATING)

ObjectHandler = Callable[[Any], None]
ResizeHandler = Callable[[float, float], None]
Unsubscribe = Callable[[], None]


class RenderSurface(Protocol):
    """Superficie externa: dimensiones, transform del viewport y conjunto de objetos.

    El núcleo asume acceso exclusivo durante cada callback (un solo hilo, event loop Qt).
    """

    def container_size(self) -> Tuple[float, float]:
        ...

    def set_surface_size(self, width: float, height: float) -> None:
        ...

    def viewport_transform(self) -> ViewportTransform:
        ...

    def set_viewport_transform(self, matrix: ViewportTransform) -> None:
        """Reemplaza el transform completo (nunca compone)."""
        ...

    def list_objects(self) -> Sequence[Any]:
        ...

    def absolute_bounds(self, obj: Any) -> Bounds:
        """Bounding box en coordenadas de documento, con todos los transforms del objeto."""
        ...

    def set_object_opacity(self, obj: Any, opacity: float) -> None:
        ...

    def request_redraw(self) -> None:
        ...

    def subscribe(self, kind: EventKind, handler: ObjectHandler) -> Unsubscribe:
        ...

    def observe_resize(self, handler: ResizeHandler) -> Unsubscribe:
        ...

    def add_workspace(self, bounds: Bounds) -> Any:
        ...

    def add_shape(self, spec: Any) -> Any:
        ...
