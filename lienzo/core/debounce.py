# File: lienzo/core/debounce.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-04
# Purpose: Tarea diferida cancelable (QTimer single-shot) para coalescer eventos.
# Notes: Un timer por instancia. schedule() reinicia el pendiente; close() lo libera.
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer

log = logging.getLogger(__name__)


class DebouncedCall:
    """Llama a `callback` una sola vez tras `interval_ms` sin nuevas notificaciones.

    - interval_ms == 0: sin coalescing, schedule() llama en el acto.
    - Cada schedule() mientras hay uno pendiente lo reprograma (gana el último).
    - close(): cancela el pendiente y deja el objeto inerte (teardown).

    Requiere un QCoreApplication vivo para que el timer dispare.
    """

    def __init__(self, callback: Callable[[], object], interval_ms: int, parent: Optional[QObject] = None) -> None:
        self._callback = callback
        self._interval_ms = max(0, int(interval_ms))
        self._closed = False
        self._timer: Optional[QTimer] = None
        if self._interval_ms > 0:
            self._timer = QTimer(parent)
            self._timer.setSingleShot(True)
            self._timer.setInterval(self._interval_ms)
            self._timer.timeout.connect(self._fire)

    @property
    def pending(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    @property
    def closed(self) -> bool:
        return self._closed

    def schedule(self) -> None:
        if self._closed:
            return
        if self._timer is None:
            self._callback()
            return
        # start() sobre un timer activo lo reinicia.
        self._timer.start()

    def cancel(self) -> None:
        if self._timer is not None and self._timer.isActive():
            self._timer.stop()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._timer is not None:
            self._timer.stop()
            self._timer.timeout.disconnect(self._fire)
            self._timer.deleteLater()
            self._timer = None

    def _fire(self) -> None:
        if self._closed:
            return
        self._callback()
