# File: lienzo/core/shapes.py
# Project: Lienzo (LZ)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-06
# Purpose: Fábrica de formas: tipos cerrados (tag) + estilo uniforme + posición relativa al workspace.
# Notes: Produce una descripción (ShapeSpec) sin Qt. La materialización vive en lienzo/ui/shape_items.py.
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from lienzo.core.geometry import Bounds
from lienzo.utils.errors import LienzoShapeOptionsError, LienzoUnsupportedShapeError


class ShapeKind(str, Enum):
    RECT = "rect"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    ELLIPSE = "ellipse"
    POLYGON = "polygon"
    LINE = "line"
    POLYLINE = "polyline"


# Apariencia común de selección para todas las formas.
FOUNDATION_STYLE: Dict[str, Any] = {
    "corner_color": "#ffffff",
    "corner_style": "circle",
    "border_color": "#3b82f6",
    "border_scale_factor": 1.5,
    "transparent_corners": False,
    "border_opacity_when_moving": 1.0,
    "corner_stroke_color": "#3b82f6",
}

DEFAULT_FILL = "#3b82f6"
DEFAULT_STROKE = "#1e3a8a"

Point = Tuple[float, float]

_DEFAULT_POINTS: Dict[ShapeKind, Tuple[Point, ...]] = {
    ShapeKind.POLYGON: ((0.0, 0.0), (100.0, 0.0), (50.0, 100.0)),
    ShapeKind.LINE: ((0.0, 0.0), (100.0, 100.0)),
    ShapeKind.POLYLINE: ((0.0, 0.0), (50.0, 50.0), (100.0, 0.0)),
}

_DEFAULT_SIZE: Dict[ShapeKind, Tuple[float, float]] = {
    ShapeKind.RECT: (100.0, 100.0),
    ShapeKind.TRIANGLE: (100.0, 100.0),
    ShapeKind.CIRCLE: (100.0, 100.0),  # diámetro
    ShapeKind.ELLIPSE: (120.0, 80.0),  # 2*rx, 2*ry
}


@dataclass(frozen=True)
class ShapeSpec:
    """Descripción de una forma a crear.

    (left, top) es el CENTRO de la forma en coordenadas de documento.
    Formas de caja usan width/height; formas de puntos usan `points`
    (coordenadas locales, se centran sobre su propio bbox al materializar).
    """

    kind: ShapeKind
    left: float
    top: float
    width: float = 0.0
    height: float = 0.0
    points: Tuple[Point, ...] = ()
    angle: float = 0.0
    fill: Optional[str] = DEFAULT_FILL
    stroke: Optional[str] = None
    stroke_width: float = 1.0
    style: Mapping[str, Any] = field(default_factory=lambda: dict(FOUNDATION_STYLE))


def coerce_shape_kind(kind: object) -> ShapeKind:
    if isinstance(kind, ShapeKind):
        return kind
    s = str(kind or "").strip().lower()
    for k in ShapeKind:
        if k.value == s:
            return k
    raise LienzoUnsupportedShapeError(f"Tipo de forma no soportado: {kind!r}")


def _coerce_points(raw: Any, kind: ShapeKind) -> Tuple[Point, ...]:
    """Acepta [(x, y), ...], [{'x':..,'y':..}, ...] o, para line, [x1, y1, x2, y2]."""
    if raw is None:
        return _DEFAULT_POINTS[kind]
    pts: list[Point] = []
    try:
        items = list(raw)
        if items and all(isinstance(v, (int, float)) for v in items):
            if len(items) % 2:
                raise LienzoShapeOptionsError(f"{kind.value}: lista plana de coordenadas impar")
            pts = [(float(items[i]), float(items[i + 1])) for i in range(0, len(items), 2)]
        else:
            for p in items:
                if isinstance(p, Mapping):
                    pts.append((float(p["x"]), float(p["y"])))
                else:
                    x, y = p
                    pts.append((float(x), float(y)))
    except (KeyError, TypeError, ValueError) as e:
        raise LienzoShapeOptionsError(f"{kind.value}: puntos inválidos ({e})") from e
    min_pts = 2 if kind in (ShapeKind.LINE, ShapeKind.POLYLINE) else 3
    if len(pts) < min_pts:
        raise LienzoShapeOptionsError(f"{kind.value}: se necesitan al menos {min_pts} puntos")
    return tuple(pts)


def _box_size(kind: ShapeKind, opts: Mapping[str, Any]) -> Tuple[float, float]:
    w, h = _DEFAULT_SIZE[kind]
    if kind == ShapeKind.CIRCLE and "radius" in opts:
        w = h = 2.0 * float(opts["radius"])
    elif kind == ShapeKind.ELLIPSE and ("rx" in opts or "ry" in opts):
        w = 2.0 * float(opts.get("rx", w / 2.0))
        h = 2.0 * float(opts.get("ry", h / 2.0))
    w = float(opts.get("width", w))
    h = float(opts.get("height", h))
    return w, h


def build_shape_spec(
    kind: object,
    options: Optional[Mapping[str, Any]] = None,
    *,
    workspace: Optional[Bounds] = None,
    canvas_center: Tuple[float, float] = (0.0, 0.0),
) -> ShapeSpec:
    """Arma la descripción de una forma.

    Posición:
      - Por defecto: centro del workspace (o centro del canvas si no hay workspace).
      - left/top del caller: relativos al top-left del workspace, salvo absolute=True.
    """
    k = coerce_shape_kind(kind)
    opts = dict(options or {})
    absolute = opts.pop("absolute", False) is True

    if workspace is not None:
        left, top = workspace.center
    else:
        left, top = float(canvas_center[0]), float(canvas_center[1])

    offset_x = offset_y = 0.0
    if not absolute and workspace is not None:
        offset_x, offset_y = float(workspace.left), float(workspace.top)
    if isinstance(opts.get("left"), (int, float)):
        left = offset_x + float(opts["left"])
    if isinstance(opts.get("top"), (int, float)):
        top = offset_y + float(opts["top"])

    width = height = 0.0
    points: Tuple[Point, ...] = ()
    if k in _DEFAULT_POINTS:
        points = _coerce_points(opts.get("points"), k)
    else:
        width, height = _box_size(k, opts)

    # Líneas: sin relleno, con trazo visible.
    is_open = k in (ShapeKind.LINE, ShapeKind.POLYLINE)
    fill = opts.get("fill", None if is_open else DEFAULT_FILL)
    stroke = opts.get("stroke", DEFAULT_STROKE if is_open else None)

    return ShapeSpec(
        kind=k,
        left=float(left),
        top=float(top),
        width=width,
        height=height,
        points=points,
        angle=float(opts.get("angle", 0.0)),
        fill=fill,
        stroke=stroke,
        stroke_width=float(opts.get("stroke_width", 2.0 if is_open else 1.0)),
    )
