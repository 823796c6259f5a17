# File: lienzo/ui/editor_view.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-08
# Purpose: Vista del editor (QGraphicsView): transform de viewport exacto, herramientas y máscara del workspace.
# Notes: Sin scrollbars ni zoom manual: el transform lo escribe el motor de ajuste (SceneSurface).
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QRectF, Qt, QTimer
from PySide6.QtGui import QColor, QPainter, QPainterPath, QTransform
from PySide6.QtWidgets import QGraphicsItem, QGraphicsScene, QGraphicsView

from lienzo.core.geometry import ViewportTransform
from lienzo.core.tool_mode import ToolMode, coerce_tool_mode
from lienzo.ui.shape_items import ShapeItemMixin, ShapeItemOwner
from lienzo.utils.log import get_logger

log = get_logger(__name__)

# Pasos de rueda (120 = un "click").
ROTATE_STEP_DEG = 5.0
ROTATE_STEP_FINE_DEG = 0.5
SCALE_STEP = 1.05
SCALE_STEP_FINE = 1.01
SCALE_MIN = 0.05
SCALE_MAX = 50.0

# Quietud tras el último paso de rueda para dar el gesto por terminado (modified).
WHEEL_COMMIT_MS = 150


class EditorView(QGraphicsView):
    BG_COLOR = QColor(30, 30, 30)

    def __init__(self, parent=None):
        super().__init__(parent)

        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)

        self._owner: Optional[ShapeItemOwner] = None
        self._workspace_item: Optional[QGraphicsItem] = None
        self._clip_to_workspace = True
        self._tool_mode: ToolMode = ToolMode.SELECT

        # El mapeo escena -> viewport tiene que ser exactamente el transform aplicado:
        # sin scroll, sin anclas, alineado arriba-izquierda.
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setTransformationAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setResizeAnchor(QGraphicsView.ViewportAnchor.NoAnchor)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)

        self.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setViewportUpdateMode(QGraphicsView.ViewportUpdateMode.FullViewportUpdate)

        # Gestos de rueda: un commit por ráfaga.
        self._wheel_items: list[QGraphicsItem] = []
        self._wheel_commit_timer = QTimer(self)
        self._wheel_commit_timer.setSingleShot(True)
        self._wheel_commit_timer.setInterval(WHEEL_COMMIT_MS)
        self._wheel_commit_timer.timeout.connect(self._commit_wheel_gesture)

    # ------------------------------ Wiring

    def editor_scene(self) -> QGraphicsScene:
        return self._scene

    def set_item_owner(self, owner: Optional[ShapeItemOwner]) -> None:
        self._owner = owner

    def set_workspace_item(self, item: Optional[QGraphicsItem]) -> None:
        self._workspace_item = item
        self.viewport().update()

    def set_clip_to_workspace(self, on: bool) -> None:
        self._clip_to_workspace = bool(on)
        self.viewport().update()

    # ------------------------------ Transform de viewport

    def apply_viewport_transform(self, matrix: ViewportTransform, surface_size: tuple[float, float]) -> None:
        """Reemplaza el transform del view por `matrix` (sin componer).

        El sceneRect se fija al viewport mapeado inverso: así el rect mapeado cubre
        exactamente el viewport y Qt no agrega desplazamiento de scroll/alineación.
        """
        t = QTransform(matrix.a, matrix.b, matrix.c, matrix.d, matrix.e, matrix.f)
        self.setTransform(t, False)
        inv, ok = t.inverted()
        if ok:
            w, h = surface_size
            self.setSceneRect(inv.mapRect(QRectF(0.0, 0.0, float(w), float(h))))

    def current_viewport_transform(self) -> ViewportTransform:
        t = self.transform()
        return ViewportTransform(t.m11(), t.m12(), t.m21(), t.m22(), t.dx(), t.dy())

    # ------------------------------ Herramientas

    def tool_mode(self) -> ToolMode:
        return self._tool_mode

    def set_tool_mode(self, mode: ToolMode | str | None) -> None:
        m = coerce_tool_mode(mode)
        if m == self._tool_mode:
            return
        self._commit_wheel_gesture()
        self._tool_mode = m
        if m == ToolMode.ROTATE:
            self.setCursor(Qt.CursorShape.CrossCursor)
        elif m == ToolMode.SCALE:
            self.setCursor(Qt.CursorShape.SizeFDiagCursor)
        else:
            self.unsetCursor()
        log.debug("Tool mode: %s", m.value)

    def _pick_target_item(self, event) -> Optional[QGraphicsItem]:
        """Item bajo cursor (o el seleccionado si no hay ninguno debajo)."""
        try:
            vp = event.position().toPoint()
        except AttributeError:
            vp = event.pos()
        for it in self.items(vp):
            if isinstance(it, ShapeItemMixin):
                return it
        for it in self._scene.selectedItems():
            if isinstance(it, ShapeItemMixin):
                return it
        return None

    def rotate_item(self, it: QGraphicsItem, dy: int, *, fine: bool = False) -> None:
        step = ROTATE_STEP_FINE_DEG if fine else ROTATE_STEP_DEG
        it.setRotation(float(it.rotation()) + (dy / 120.0) * step)
        self._track_wheel_item(it)
        if self._owner is not None:
            self._owner.notify_item_rotating(it)

    def scale_item(self, it: QGraphicsItem, dy: int, *, fine: bool = False) -> None:
        base = SCALE_STEP_FINE if fine else SCALE_STEP
        factor = float(base ** (dy / 120.0))
        it.setScale(max(SCALE_MIN, min(SCALE_MAX, float(it.scale()) * factor)))
        self._track_wheel_item(it)
        if self._owner is not None:
            self._owner.notify_item_scaling(it)

    def _track_wheel_item(self, it: QGraphicsItem) -> None:
        if not any(x is it for x in self._wheel_items):
            self._wheel_items.append(it)
        self._wheel_commit_timer.start()

    def _commit_wheel_gesture(self) -> None:
        self._wheel_commit_timer.stop()
        items, self._wheel_items = self._wheel_items, []
        if self._owner is None:
            return
        for it in items:
            if it.scene() is self._scene:
                self._owner.notify_item_committed(it)

    def wheelEvent(self, event) -> None:
        dy = int(event.angleDelta().y())
        if not dy or self._tool_mode not in (ToolMode.ROTATE, ToolMode.SCALE):
            # Sin zoom/scroll manual: el viewport lo gobierna el ajuste automático.
            event.ignore()
            return
        target = self._pick_target_item(event)
        if target is None:
            event.ignore()
            return
        fine = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
        if self._tool_mode == ToolMode.ROTATE:
            self.rotate_item(target, dy, fine=fine)
        else:
            self.scale_item(target, dy, fine=fine)
        event.accept()

    # ------------------------------ Dibujo

    def drawBackground(self, painter: QPainter, rect: QRectF) -> None:
        painter.fillRect(rect, self.BG_COLOR)

    def drawForeground(self, painter: QPainter, rect: QRectF) -> None:
        """Tapa lo que queda fuera del workspace (equivalente a recortar al workspace)."""
        if not self._clip_to_workspace or self._workspace_item is None:
            return
        ws = self._workspace_item.sceneBoundingRect()
        outside = QPainterPath()
        outside.addRect(rect)
        inner = QPainterPath()
        inner.addRect(ws)
        painter.save()
        painter.fillPath(outside.subtracted(inner), self.BG_COLOR)
        painter.restore()

    def teardown(self) -> None:
        self._wheel_commit_timer.stop()
        self._wheel_items.clear()
        self._owner = None
