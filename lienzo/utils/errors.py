# File: lienzo/utils/errors.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-02
# Purpose: Errores tipados del proyecto.
# Notes: Las condiciones geométricas degeneradas (sin workspace, contenedor 0x0) NO son errores.
from __future__ import annotations


class LienzoError(Exception):
    """Error base del proyecto."""


class LienzoConfigError(LienzoError):
    """Configuración inválida (margin_ratio, debounce, opacidades...).

    Se lanza al construir la configuración, nunca durante un recálculo.
    """


class LienzoUnsupportedShapeError(LienzoError):
    """Tipo de forma desconocido para la fábrica de formas."""


class LienzoSessionError(LienzoError):
    """Operación sobre una sesión de editor no iniciada o ya cerrada."""


class LienzoShapeOptionsError(LienzoError):
    """Opciones de forma inválidas (puntos mal formados o insuficientes)."""
