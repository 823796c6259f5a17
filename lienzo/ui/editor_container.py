# File: lienzo/ui/editor_container.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-09
# Purpose: Contenedor del editor: EditorView + barra inferior con la escala de ajuste.
# Notes: La barra solo informa; la escala la decide el motor de ajuste.

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from lienzo.ui.editor_view import EditorView
from lienzo.ui.scene_surface import SceneSurface


class EditorContainer(QWidget):
    """Widget central: lienzo + indicador de escala inferior."""

    def __init__(self, view: EditorView, surface: SceneSurface, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.view = view

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(2)
        root.addWidget(self.view, 1)

        bar = QWidget(self)
        bl = QHBoxLayout(bar)
        bl.setContentsMargins(6, 0, 6, 0)
        bl.setSpacing(8)

        self._lbl = QLabel("Escala", bar)
        self._lbl.setAlignment(Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignLeft)
        bl.addWidget(self._lbl, 0)
        bl.addStretch(1)

        self._pct = QLabel("-", bar)
        self._pct.setAlignment(Qt.AlignmentFlag.AlignVCenter | Qt.AlignmentFlag.AlignRight)
        self._pct.setMinimumWidth(60)
        bl.addWidget(self._pct, 0)

        root.addWidget(bar, 0)

        surface.viewport_changed.connect(self._on_viewport_changed)

    def scale_text(self) -> str:
        return self._pct.text()

    def _on_viewport_changed(self, scale: float) -> None:
        self._pct.setText(f"{int(round(float(scale) * 100.0))}%")
