# File: lienzo/ui/shape_items.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-07
# Purpose: Items Qt de formas (movibles/seleccionables) + constructores por tipo + estilo uniforme.
# Notes: Un constructor geométrico por ShapeKind; el estilo se aplica con una única función data-driven.

from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from PySide6.QtCore import QLineF, QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainterPath, QPen, QPolygonF
from PySide6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsLineItem,
    QGraphicsPathItem,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QStyle,
    QStyleOptionGraphicsItem,
)

from lienzo.core.geometry import Bounds
from lienzo.core.shapes import ShapeKind, ShapeSpec
from lienzo.utils.errors import LienzoUnsupportedShapeError

WORKSPACE_Z = -1000.0


class ShapeItemOwner:
    """Contrato mínimo que un item le notifica a su dueño (la superficie).

    Se usa para que el item no conozca a los motores ni a las señales.
    """

    def notify_item_moving(self, item: QGraphicsItem) -> None:  # pragma: no cover (UI)
        _ = item

    def notify_item_scaling(self, item: QGraphicsItem) -> None:  # pragma: no cover (UI)
        _ = item

    def notify_item_rotating(self, item: QGraphicsItem) -> None:  # pragma: no cover (UI)
        _ = item

    def notify_item_committed(self, item: QGraphicsItem) -> None:  # pragma: no cover (UI)
        _ = item


class ShapeItemMixin:
    """Comportamiento común: flags de interacción, notificaciones y pintado de selección."""

    # Defaults de clase: Qt puede llamar a itemChange antes de init_shape_item.
    _shape_kind: ShapeKind = ShapeKind.RECT
    _owner: Optional[ShapeItemOwner] = None
    _style: Dict[str, Any] = {}

    def init_shape_item(self, kind: ShapeKind, owner: Optional[ShapeItemOwner], style: Mapping[str, Any]) -> None:
        self._shape_kind = kind
        self._owner = owner
        self._style = dict(style)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, True)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable, True)
        # Necesario para ItemPositionHasChanged.
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemSendsGeometryChanges, True)

    @property
    def shape_kind(self) -> ShapeKind:
        return self._shape_kind

    @property
    def style(self) -> Dict[str, Any]:
        return dict(self._style)

    def is_being_dragged(self) -> bool:
        sc = self.scene()
        return sc is not None and sc.mouseGrabberItem() is self

    def itemChange(self, change, value):
        if change == QGraphicsItem.GraphicsItemChange.ItemPositionHasChanged and self._owner is not None:
            # Solo el drag del usuario es "moving"; un setPos programático no.
            if self.is_being_dragged():
                self._owner.notify_item_moving(self)
        return super().itemChange(change, value)

    def mouseReleaseEvent(self, event) -> None:
        super().mouseReleaseEvent(event)
        if self._owner is not None:
            self._owner.notify_item_committed(self)

    def paint(self, painter, option, widget=None) -> None:  # pragma: no cover (UI)
        selected = bool(option.state & QStyle.StateFlag.State_Selected)
        opt = QStyleOptionGraphicsItem(option)
        # El recuadro punteado de Qt se reemplaza por el estilo propio.
        opt.state = opt.state & ~QStyle.StateFlag.State_Selected
        super().paint(painter, opt, widget)
        if selected:
            self._paint_selection(painter)

    def _paint_selection(self, painter) -> None:  # pragma: no cover (UI)
        st = self._style
        r = self.boundingRect()
        painter.save()
        if self.is_being_dragged():
            painter.setOpacity(painter.opacity() * float(st.get("border_opacity_when_moving", 1.0)))

        pen = QPen(QColor(str(st.get("border_color", "#3b82f6"))))
        pen.setCosmetic(True)
        pen.setWidthF(float(st.get("border_scale_factor", 1.0)))
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRect(r)

        corner_pen = QPen(QColor(str(st.get("corner_stroke_color", "#3b82f6"))))
        corner_pen.setCosmetic(True)
        painter.setPen(corner_pen)
        if st.get("transparent_corners", False):
            painter.setBrush(Qt.BrushStyle.NoBrush)
        else:
            painter.setBrush(QBrush(QColor(str(st.get("corner_color", "#ffffff")))))
        # Tamaño fijo en pantalla: se compensa la escala del painter.
        scale = max(1e-6, abs(painter.worldTransform().m11()))
        half = 4.0 / scale
        for c in (r.topLeft(), r.topRight(), r.bottomLeft(), r.bottomRight()):
            box = QRectF(c.x() - half, c.y() - half, 2.0 * half, 2.0 * half)
            if st.get("corner_style") == "circle":
                painter.drawEllipse(box)
            else:
                painter.drawRect(box)
        painter.restore()


class RectShapeItem(ShapeItemMixin, QGraphicsRectItem):
    pass


class EllipseShapeItem(ShapeItemMixin, QGraphicsEllipseItem):
    pass


class PolygonShapeItem(ShapeItemMixin, QGraphicsPolygonItem):
    pass


class LineShapeItem(ShapeItemMixin, QGraphicsLineItem):
    pass


class PathShapeItem(ShapeItemMixin, QGraphicsPathItem):
    pass


class WorkspaceItem(QGraphicsRectItem):
    """Área de documento: fija, no seleccionable, debajo de todo."""

    def __init__(self, bounds: Bounds) -> None:
        super().__init__(QRectF(0.0, 0.0, float(bounds.width), float(bounds.height)))
        self.setPos(float(bounds.left), float(bounds.top))
        # Sin pen: el bbox de escena tiene que ser exactamente el rect.
        self.setPen(QPen(Qt.PenStyle.NoPen))
        self.setBrush(QBrush(QColor(255, 255, 255)))
        self.setZValue(WORKSPACE_Z)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsSelectable, False)
        self.setFlag(QGraphicsItem.GraphicsItemFlag.ItemIsMovable, False)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)


# ------------------------------ Constructores por tipo
# Geometría local centrada en (0, 0): la posición del item es el centro de la forma.


def _centered_points(spec: ShapeSpec) -> list[QPointF]:
    xs = [p[0] for p in spec.points]
    ys = [p[1] for p in spec.points]
    cx = (min(xs) + max(xs)) / 2.0
    cy = (min(ys) + max(ys)) / 2.0
    return [QPointF(x - cx, y - cy) for x, y in spec.points]


def _build_rect(spec: ShapeSpec) -> QGraphicsItem:
    w, h = spec.width, spec.height
    return RectShapeItem(QRectF(-w / 2.0, -h / 2.0, w, h))


def _build_ellipse(spec: ShapeSpec) -> QGraphicsItem:
    w, h = spec.width, spec.height
    return EllipseShapeItem(QRectF(-w / 2.0, -h / 2.0, w, h))


def _build_triangle(spec: ShapeSpec) -> QGraphicsItem:
    w, h = spec.width, spec.height
    poly = QPolygonF([QPointF(-w / 2.0, h / 2.0), QPointF(0.0, -h / 2.0), QPointF(w / 2.0, h / 2.0)])
    return PolygonShapeItem(poly)


def _build_polygon(spec: ShapeSpec) -> QGraphicsItem:
    return PolygonShapeItem(QPolygonF(_centered_points(spec)))


def _build_line(spec: ShapeSpec) -> QGraphicsItem:
    p0, p1 = _centered_points(spec)[:2]
    return LineShapeItem(QLineF(p0, p1))


def _build_polyline(spec: ShapeSpec) -> QGraphicsItem:
    pts = _centered_points(spec)
    path = QPainterPath(pts[0])
    for p in pts[1:]:
        path.lineTo(p)
    return PathShapeItem(path)


SHAPE_BUILDERS: Dict[ShapeKind, Callable[[ShapeSpec], QGraphicsItem]] = {
    ShapeKind.RECT: _build_rect,
    ShapeKind.CIRCLE: _build_ellipse,
    ShapeKind.ELLIPSE: _build_ellipse,
    ShapeKind.TRIANGLE: _build_triangle,
    ShapeKind.POLYGON: _build_polygon,
    ShapeKind.LINE: _build_line,
    ShapeKind.POLYLINE: _build_polyline,
}


def apply_shape_style(item: QGraphicsItem, spec: ShapeSpec, owner: Optional[ShapeItemOwner]) -> None:
    """Estilo común a todas las formas (pen/brush/rotación + estilo de selección)."""
    if spec.stroke:
        pen = QPen(QColor(spec.stroke))
        pen.setWidthF(float(spec.stroke_width))
    else:
        pen = QPen(Qt.PenStyle.NoPen)
    item.setPen(pen)
    if hasattr(item, "setBrush"):
        item.setBrush(QBrush(QColor(spec.fill)) if spec.fill else QBrush(Qt.BrushStyle.NoBrush))
    item.setPos(float(spec.left), float(spec.top))
    item.setTransformOriginPoint(0.0, 0.0)
    item.setRotation(float(spec.angle))
    item.init_shape_item(spec.kind, owner, spec.style)


def create_shape_item(spec: ShapeSpec, owner: Optional[ShapeItemOwner] = None) -> QGraphicsItem:
    builder = SHAPE_BUILDERS.get(spec.kind)
    if builder is None:
        raise LienzoUnsupportedShapeError(f"Tipo de forma no soportado: {spec.kind!r}")
    item = builder(spec)
    apply_shape_style(item, spec, owner)
    return item
