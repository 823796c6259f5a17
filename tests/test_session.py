"""
Tests for EditorSession lifecycle on the FakeSurface.
"""
import pytest

from lienzo.core.session import EditorSession
from lienzo.core.settings import EditorSettings
from lienzo.core.shapes import ShapeKind
from lienzo.core.surface import EventKind
from lienzo.utils.errors import LienzoError, LienzoSessionError, LienzoUnsupportedShapeError


class TestStart:

    def test_creates_centered_workspace_from_container(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        ws = session.workspace.obj
        assert ws is surface.objects[0]
        # 900 de ancho, alto del contenedor, centrado en 1000x800.
        assert (ws.bounds.left, ws.bounds.top, ws.bounds.width, ws.bounds.height) == (50.0, 0.0, 900.0, 800.0)

    def test_initial_fit_is_applied(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        assert surface.transform_writes == 1
        x, y = surface.matrix.map_point(500.0, 400.0)
        assert x == pytest.approx(500.0)
        assert y == pytest.approx(400.0)

    def test_explicit_workspace_height(self, surface):
        settings = EditorSettings(debounce_window_ms=0, workspace_height=400)
        session = EditorSession(surface, settings)
        assert session.settings is settings
        session.start()
        assert session.workspace.bounds().height == 400.0

    def test_container_without_height_uses_default(self, make_surface, settings):
        surface = make_surface(0, 0)
        session = EditorSession(surface, settings)
        session.start()
        assert session.workspace.bounds().height == 800.0
        # Sin área todavía: no hay transform, pero tampoco error.
        assert surface.transform_writes == 0

    def test_start_twice_does_not_duplicate_workspace(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        session.start()
        assert len(surface.objects) == 1

    def test_resize_after_start_refits(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        surface.resize(450, 400)
        assert surface.transform_writes == 2
        assert surface.matrix.a == pytest.approx(0.45)


class TestShapes:

    def test_add_shape_is_evaluated_on_add(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        obj = session.add_shape(ShapeKind.RECT, left=-100, top=10)
        assert obj.opacity == 0.5
        inside = session.add_shape("circle")
        assert inside.opacity == 1.0

    def test_unsupported_shape(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        with pytest.raises(LienzoUnsupportedShapeError):
            session.add_shape("star")

    def test_bad_points_raise_project_error(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        with pytest.raises(LienzoError):
            session.add_shape("polygon", points=[(0, 0)])
        assert len(surface.objects) == 1

    def test_add_shape_requires_active_session(self, surface, settings):
        session = EditorSession(surface, settings)
        with pytest.raises(LienzoSessionError):
            session.add_shape("rect")
        session.start()
        session.close()
        with pytest.raises(LienzoSessionError):
            session.add_shape("rect")


class TestClose:

    def test_close_makes_engines_unreachable(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        fit = session.fit_engine
        spatial = session.spatial_engine
        obj = surface.add(-100, 0, 50, 50)
        session.close()
        assert fit.closed
        assert not fit.resize_pending
        assert spatial.evaluate_object_state(obj, True) is None
        assert session.recompute_viewport() is None
        assert session.evaluate_object_state(obj, True) is None
        assert not session.workspace.valid
        assert surface.resize_handlers == []
        surface.emit(EventKind.MOVING, obj)
        assert obj.opacity == 1.0

    def test_close_is_idempotent_and_final(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        session.close()
        session.close()
        with pytest.raises(LienzoSessionError):
            session.start()
        assert not session.active
        assert len(surface.objects) == 1

    def test_start_after_close_without_start_raises(self, surface, settings):
        session = EditorSession(surface, settings)
        session.close()
        with pytest.raises(LienzoSessionError):
            session.start()
        assert surface.objects == []

    def test_host_api_delegates(self, surface, settings):
        session = EditorSession(surface, settings)
        session.start()
        assert session.recompute_viewport() == surface.matrix
        # El workspace arranca en left=50 (centrado en 1000 px).
        obj = surface.add(60, 10, 10, 10)
        assert session.evaluate_object_state(obj).contained
        outside = surface.add(10, 10, 10, 10)
        assert not session.evaluate_object_state(outside).contained
