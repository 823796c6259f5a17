# File: lienzo/core/workspace.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-03
# Purpose: Handle explícito al workspace (área de documento) de la sesión.
# Notes: Se crea una vez al iniciar la sesión y solo se invalida en el teardown.
from __future__ import annotations

from typing import Any, Optional

from lienzo.core.geometry import Bounds
from lienzo.core.surface import RenderSurface


class WorkspaceHandle:
    """Referencia al objeto workspace dentro de la superficie.

    Los motores no buscan el workspace por nombre en la lista de objetos:
    reciben este handle. Si está invalidado (o el workspace tiene tamaño 0),
    `bounds()` devuelve None y los motores se vuelven no-ops.
    """

    def __init__(self, surface: RenderSurface, obj: Any) -> None:
        self._surface = surface
        self._obj: Any = obj

    @property
    def obj(self) -> Any:
        return self._obj

    @property
    def valid(self) -> bool:
        return self._obj is not None

    def is_workspace(self, obj: Any) -> bool:
        return self._obj is not None and obj is self._obj

    def bounds(self) -> Optional[Bounds]:
        if self._obj is None:
            return None
        b = self._surface.absolute_bounds(self._obj)
        if b.is_empty:
            return None
        return b

    def invalidate(self) -> None:
        self._obj = None
