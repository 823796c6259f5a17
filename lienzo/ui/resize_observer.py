# File: lienzo/ui/resize_observer.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-07
# Purpose: Observador de tamaño de widgets (event filter sobre QEvent.Resize).
# Notes: unobserve() quita el filtro de todos los widgets; después no llega ninguna notificación.
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QEvent, QObject
from PySide6.QtWidgets import QWidget


class ResizeObserver(QObject):
    """Llama a `callback(width, height)` cada vez que un widget observado cambia de tamaño."""

    def __init__(self, callback: Callable[[float, float], None], parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._callback = callback
        self._targets: list[QWidget] = []

    def observe(self, widget: QWidget) -> None:
        if widget in self._targets:
            return
        widget.installEventFilter(self)
        self._targets.append(widget)

    def unobserve(self) -> None:
        for w in self._targets:
            w.removeEventFilter(self)
        self._targets.clear()

    def eventFilter(self, obj, event) -> bool:
        if event.type() == QEvent.Type.Resize and obj in self._targets:
            size = event.size()
            self._callback(float(size.width()), float(size.height()))
        # Nunca consumir el evento: el widget tiene que procesar su propio resize.
        return False
