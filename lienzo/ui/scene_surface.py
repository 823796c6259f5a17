# File: lienzo/ui/scene_surface.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-08
# Purpose: Adaptador RenderSurface sobre EditorView/QGraphicsScene (señales Qt como eventos).
# Notes: Los motores no conocen Qt: todo pasa por este adaptador.
from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Tuple

from PySide6.QtCore import QObject, Qt, Signal
from PySide6.QtWidgets import QGraphicsItem

from lienzo.core.geometry import Bounds, ViewportTransform
from lienzo.core.shapes import ShapeSpec
from lienzo.core.surface import EventKind, ObjectHandler, ResizeHandler, Unsubscribe
from lienzo.ui.editor_view import EditorView
from lienzo.ui.resize_observer import ResizeObserver
from lienzo.ui.shape_items import ShapeItemMixin, ShapeItemOwner, WorkspaceItem, create_shape_item


class SceneSurface(QObject, ShapeItemOwner):
    """RenderSurface real.

    - Contenedor: el viewport del EditorView.
    - Objetos: WorkspaceItem + items de forma de la escena.
    - Eventos: una señal Qt por EventKind; subscribe() devuelve el "unsubscribe".
    """

    object_added = Signal(object)
    object_moving = Signal(object)
    object_scaling = Signal(object)
    object_rotating = Signal(object)
    object_modified = Signal(object)
    viewport_changed = Signal(float)  # escala aplicada

    def __init__(self, view: EditorView, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._view = view
        self._scene = view.editor_scene()
        self._surface_size: Tuple[float, float] = (0.0, 0.0)
        self._workspace_item: Optional[WorkspaceItem] = None
        self._observers: list[ResizeObserver] = []
        view.set_item_owner(self)

    @property
    def view(self) -> EditorView:
        return self._view

    def _signal_for(self, kind: EventKind):
        return {
            EventKind.ADDED: self.object_added,
            EventKind.MOVING: self.object_moving,
            EventKind.SCALING: self.object_scaling,
            EventKind.ROTATING: self.object_rotating,
            EventKind.MODIFIED: self.object_modified,
        }[EventKind(kind)]

    # ------------------------------ Dimensiones / transform

    def container_size(self) -> Tuple[float, float]:
        vp = self._view.viewport()
        return float(vp.width()), float(vp.height())

    def set_surface_size(self, width: float, height: float) -> None:
        self._surface_size = (float(width), float(height))

    def viewport_transform(self) -> ViewportTransform:
        return self._view.current_viewport_transform()

    def set_viewport_transform(self, matrix: ViewportTransform) -> None:
        size = self._surface_size
        if size[0] <= 0.0 or size[1] <= 0.0:
            size = self.container_size()
        self._view.apply_viewport_transform(matrix, size)
        self.viewport_changed.emit(float(matrix.a))

    def request_redraw(self) -> None:
        self._view.viewport().update()

    # ------------------------------ Objetos

    def list_objects(self) -> Sequence[Any]:
        return [
            it
            for it in self._scene.items(Qt.SortOrder.AscendingOrder)
            if it is self._workspace_item or isinstance(it, ShapeItemMixin)
        ]

    def absolute_bounds(self, obj: Any) -> Bounds:
        r = obj.sceneBoundingRect()
        return Bounds(float(r.x()), float(r.y()), float(r.width()), float(r.height()))

    def set_object_opacity(self, obj: Any, opacity: float) -> None:
        if abs(float(obj.opacity()) - float(opacity)) > 1e-9:
            obj.setOpacity(float(opacity))

    def add_workspace(self, bounds: Bounds) -> WorkspaceItem:
        item = WorkspaceItem(bounds)
        self._scene.addItem(item)
        self._workspace_item = item
        self._view.set_workspace_item(item)
        return item

    def add_shape(self, spec: ShapeSpec) -> QGraphicsItem:
        item = create_shape_item(spec, owner=self)
        self._scene.addItem(item)
        self.object_added.emit(item)
        self.request_redraw()
        return item

    # ------------------------------ Eventos

    def subscribe(self, kind: EventKind, handler: ObjectHandler) -> Unsubscribe:
        sig = self._signal_for(kind)
        sig.connect(handler)

        def _unsubscribe() -> None:
            sig.disconnect(handler)

        return _unsubscribe

    def observe_resize(self, handler: ResizeHandler) -> Unsubscribe:
        observer = ResizeObserver(handler, self)
        observer.observe(self._view.viewport())
        self._observers.append(observer)

        def _unobserve() -> None:
            observer.unobserve()
            if observer in self._observers:
                self._observers.remove(observer)
            observer.deleteLater()

        return _unobserve

    # ------------------------------ ShapeItemOwner (notificaciones de items)

    def notify_item_moving(self, item: QGraphicsItem) -> None:
        self.object_moving.emit(item)

    def notify_item_scaling(self, item: QGraphicsItem) -> None:
        self.object_scaling.emit(item)

    def notify_item_rotating(self, item: QGraphicsItem) -> None:
        self.object_rotating.emit(item)

    def notify_item_committed(self, item: QGraphicsItem) -> None:
        self.object_modified.emit(item)

    def teardown(self) -> None:
        for observer in list(self._observers):
            observer.unobserve()
        self._observers.clear()
        self._view.teardown()
