"""
Shared fixtures for Lienzo tests.

Provides an in-memory RenderSurface (FakeSurface) so both engines can be
exercised without a window, plus settings fixtures. Qt tests use pytest-qt's
`qtbot` on the offscreen platform.
"""
import os
from collections import defaultdict

import pytest

# Antes de cualquier import de Qt.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from lienzo.core.geometry import IDENTITY, Bounds
from lienzo.core.settings import EditorSettings
from lienzo.core.surface import EventKind


class FakeObject:
    def __init__(self, left, top, width, height, name=""):
        self.bounds = Bounds(float(left), float(top), float(width), float(height))
        self.opacity = 1.0
        self.name = name

    def move_to(self, left, top):
        self.bounds = Bounds(float(left), float(top), self.bounds.width, self.bounds.height)

    def __repr__(self):
        return f"FakeObject({self.name!r}, {self.bounds})"


class FakeSurface:
    """RenderSurface en memoria: registra escrituras y despacha eventos a mano."""

    def __init__(self, width=1000.0, height=800.0):
        self.container = (float(width), float(height))
        self.surface_size = None
        self.matrix = IDENTITY
        self.transform_writes = 0
        self.redraws = 0
        self.objects = []
        self.handlers = defaultdict(list)
        self.resize_handlers = []

    # RenderSurface
    def container_size(self):
        return self.container

    def set_surface_size(self, width, height):
        self.surface_size = (width, height)

    def viewport_transform(self):
        return self.matrix

    def set_viewport_transform(self, matrix):
        self.matrix = matrix
        self.transform_writes += 1

    def list_objects(self):
        return list(self.objects)

    def absolute_bounds(self, obj):
        return obj.bounds

    def set_object_opacity(self, obj, opacity):
        obj.opacity = opacity

    def request_redraw(self):
        self.redraws += 1

    def subscribe(self, kind, handler):
        kind = EventKind(kind)
        self.handlers[kind].append(handler)
        return lambda: self.handlers[kind].remove(handler)

    def observe_resize(self, handler):
        self.resize_handlers.append(handler)
        return lambda: self.resize_handlers.remove(handler)

    def add_workspace(self, bounds):
        obj = FakeObject(bounds.left, bounds.top, bounds.width, bounds.height, name="workspace")
        self.objects.insert(0, obj)
        return obj

    def add_shape(self, spec):
        if spec.points:
            xs = [p[0] for p in spec.points]
            ys = [p[1] for p in spec.points]
            w, h = max(xs) - min(xs), max(ys) - min(ys)
        else:
            w, h = spec.width, spec.height
        obj = FakeObject(spec.left - w / 2.0, spec.top - h / 2.0, w, h, name=spec.kind.value)
        obj.spec = spec
        self.objects.append(obj)
        self.emit(EventKind.ADDED, obj)
        return obj

    # Helpers de test
    def add(self, left, top, width, height, name=""):
        obj = FakeObject(left, top, width, height, name=name)
        self.objects.append(obj)
        return obj

    def emit(self, kind, obj):
        for handler in list(self.handlers[EventKind(kind)]):
            handler(obj)

    def resize(self, width, height):
        self.container = (float(width), float(height))
        for handler in list(self.resize_handlers):
            handler(float(width), float(height))


@pytest.fixture
def surface():
    return FakeSurface(1000.0, 800.0)


@pytest.fixture
def make_surface():
    return FakeSurface


@pytest.fixture
def settings():
    # Sin coalescing: los recálculos son síncronos y no hace falta event loop.
    return EditorSettings(margin_ratio=0.9, debounce_window_ms=0, dimmed_opacity=0.5)


@pytest.fixture(autouse=True)
def _clean_lienzo_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("LIENZO_"):
            monkeypatch.delenv(key, raising=False)
