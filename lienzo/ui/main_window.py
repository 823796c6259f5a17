# File: lienzo/ui/main_window.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-09
# Purpose: Ventana principal: toolbar de formas + herramientas, sesión de editor.
# Notes: La sesión se inicia cuando el layout ya tiene tamaño (start_editor) y se cierra en closeEvent.
from __future__ import annotations

from PySide6.QtGui import QAction, QActionGroup, QCloseEvent
from PySide6.QtWidgets import QMainWindow, QMessageBox, QToolBar

from lienzo.core.session import EditorSession
from lienzo.core.settings import EditorSettings
from lienzo.core.shapes import ShapeKind
from lienzo.core.tool_mode import ToolMode
from lienzo.core.version import APP_NAME, APP_VERSION
from lienzo.ui.editor_container import EditorContainer
from lienzo.ui.editor_view import EditorView
from lienzo.ui.scene_surface import SceneSurface
from lienzo.utils.errors import LienzoError
from lienzo.utils.log import get_logger

log = get_logger(__name__)

SHAPE_LABELS = {
    ShapeKind.RECT: "Rectángulo",
    ShapeKind.CIRCLE: "Círculo",
    ShapeKind.TRIANGLE: "Triángulo",
    ShapeKind.ELLIPSE: "Elipse",
    ShapeKind.POLYGON: "Polígono",
    ShapeKind.LINE: "Línea",
    ShapeKind.POLYLINE: "Polilínea",
}

TOOL_LABELS = {
    ToolMode.SELECT: "Seleccionar",
    ToolMode.ROTATE: "Rotar",
    ToolMode.SCALE: "Escalar",
}


class MainWindow(QMainWindow):
    def __init__(self, settings: EditorSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))
        self.resize(1200, 800)

        self.view = EditorView(self)
        self.surface = SceneSurface(self.view, self)
        self.session = EditorSession(self.surface, settings)
        self.view.set_clip_to_workspace(self.session.settings.clip_to_workspace)

        self.container = EditorContainer(self.view, self.surface, self)
        self.setCentralWidget(self.container)
        self._build_toolbar()

    def _build_toolbar(self) -> None:
        tb = QToolBar("Formas", self)
        tb.setObjectName("toolbar_shapes")
        self.addToolBar(tb)
        for kind in ShapeKind:
            act = QAction(SHAPE_LABELS[kind], self)
            act.triggered.connect(lambda _checked=False, k=kind: self._add_shape(k))
            tb.addAction(act)

        tools = QToolBar("Herramientas", self)
        tools.setObjectName("toolbar_tools")
        self.addToolBar(tools)
        group = QActionGroup(self)
        group.setExclusive(True)
        for mode in ToolMode:
            act = QAction(TOOL_LABELS[mode], self)
            act.setCheckable(True)
            act.setChecked(mode == self.view.tool_mode())
            act.triggered.connect(lambda _checked=False, m=mode: self.view.set_tool_mode(m))
            group.addAction(act)
            tools.addAction(act)

    def start_editor(self) -> None:
        self.session.start()

    def _add_shape(self, kind: ShapeKind) -> None:
        try:
            self.session.add_shape(kind)
        except LienzoError as e:
            log.warning("No se pudo agregar %s: %s", kind.value, e)
            QMessageBox.warning(self, APP_NAME, str(e))

    def closeEvent(self, event: QCloseEvent) -> None:
        self.session.close()
        self.surface.teardown()
        super().closeEvent(event)
