# File: lienzo/core/tool_mode.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-02
# Purpose: Modos de herramienta del lienzo (selección/rotación/escala).
# Notes: El zoom/pan manual no existe: el viewport lo controla el ajuste automático.

from __future__ import annotations

from enum import Enum


class ToolMode(str, Enum):
    """Modo activo del lienzo.

    - select: seleccionar + mover (drag).
    - rotate: rueda = rotar objeto bajo cursor / seleccionado
    - scale: rueda = escalar objeto bajo cursor / seleccionado
    """

    SELECT = "select"
    ROTATE = "rotate"
    SCALE = "scale"


def coerce_tool_mode(v: object, default: ToolMode = ToolMode.SELECT) -> ToolMode:
    if isinstance(v, ToolMode):
        return v
    s = str(v or "").strip().lower()
    for m in ToolMode:
        if m.value == s:
            return m
    return default
