"""
Tests for the shape factory description (no Qt involved).
"""
import pytest

from lienzo.core.geometry import Bounds
from lienzo.core.shapes import FOUNDATION_STYLE, ShapeKind, build_shape_spec, coerce_shape_kind
from lienzo.utils.errors import LienzoError, LienzoShapeOptionsError, LienzoUnsupportedShapeError

WS = Bounds(50, 0, 900, 800)


def test_defaults_to_workspace_center():
    spec = build_shape_spec("rect", workspace=WS)
    assert (spec.left, spec.top) == (500.0, 400.0)
    assert (spec.width, spec.height) == (100.0, 100.0)


def test_falls_back_to_canvas_center_without_workspace():
    spec = build_shape_spec(ShapeKind.CIRCLE, canvas_center=(320, 240))
    assert (spec.left, spec.top) == (320.0, 240.0)


def test_left_top_are_relative_to_workspace():
    spec = build_shape_spec("rect", {"left": 10, "top": 20}, workspace=WS)
    assert (spec.left, spec.top) == (60.0, 20.0)


def test_absolute_coordinates_are_kept():
    spec = build_shape_spec("rect", {"left": 10, "top": 20, "absolute": True}, workspace=WS)
    assert (spec.left, spec.top) == (10.0, 20.0)


def test_only_left_given_keeps_center_top():
    spec = build_shape_spec("rect", {"left": 10}, workspace=WS)
    assert (spec.left, spec.top) == (60.0, 400.0)


def test_circle_radius_and_ellipse_radii():
    assert build_shape_spec("circle", {"radius": 30}).width == 60.0
    e = build_shape_spec("ellipse", {"rx": 10, "ry": 5})
    assert (e.width, e.height) == (20.0, 10.0)


@pytest.mark.parametrize(
    "kind,expected",
    [
        ("polygon", ((0.0, 0.0), (100.0, 0.0), (50.0, 100.0))),
        ("line", ((0.0, 0.0), (100.0, 100.0))),
        ("polyline", ((0.0, 0.0), (50.0, 50.0), (100.0, 0.0))),
    ],
)
def test_default_points(kind, expected):
    assert build_shape_spec(kind).points == expected


def test_points_accept_dicts_and_flat_lists():
    poly = build_shape_spec("polygon", {"points": [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 5, "y": 5}]})
    assert poly.points[2] == (5.0, 5.0)
    line = build_shape_spec("line", {"points": [0, 0, 30, 40]})
    assert line.points == ((0.0, 0.0), (30.0, 40.0))


def test_too_few_points_is_rejected():
    with pytest.raises(LienzoShapeOptionsError, match="al menos 3"):
        build_shape_spec("polygon", {"points": [(0, 0), (1, 1)]})


@pytest.mark.parametrize("points", [[0, 0, 30], [{"x": 1}], [(1, 2, 3)], ["a", "b"]])
def test_malformed_points_raise_typed_error(points):
    with pytest.raises(LienzoShapeOptionsError) as exc:
        build_shape_spec("polyline", {"points": points})
    assert isinstance(exc.value, LienzoError)


def test_open_shapes_have_stroke_and_no_fill():
    line = build_shape_spec("line")
    assert line.fill is None
    assert line.stroke


def test_uniform_style_is_applied_to_every_kind():
    for kind in ShapeKind:
        assert dict(build_shape_spec(kind).style) == FOUNDATION_STYLE


def test_unsupported_kind_is_descriptive():
    with pytest.raises(LienzoUnsupportedShapeError, match="hexagon"):
        build_shape_spec("hexagon")


def test_coerce_accepts_enum_and_text():
    assert coerce_shape_kind(ShapeKind.LINE) is ShapeKind.LINE
    assert coerce_shape_kind(" Triangle ") is ShapeKind.TRIANGLE
