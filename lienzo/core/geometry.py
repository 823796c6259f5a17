"""Geometry primitives for the editor core.

Bounds are axis-aligned boxes in document coordinates (left, top, width, height).
The viewport transform is the 6-parameter affine map document -> screen,
laid out like QTransform(m11, m12, m21, m22, dx, dy):

    x' = a*x + c*y + e
    y' = b*x + d*y + f

Everything here is pure and Qt-free so the engines can be tested headless.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple


@dataclass(frozen=True)
class Bounds:
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return float(self.left + self.width)

    @property
    def bottom(self) -> float:
        return float(self.top + self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return (float(self.left + self.width / 2.0), float(self.top + self.height / 2.0))

    @property
    def is_empty(self) -> bool:
        return not (self.width > 0.0 and self.height > 0.0)


class ViewportTransform(NamedTuple):
    a: float  # scale X
    b: float  # skew Y
    c: float  # skew X
    d: float  # scale Y
    e: float  # translate X
    f: float  # translate Y

    def map_point(self, x: float, y: float) -> Tuple[float, float]:
        return (
            float(self.a * x + self.c * y + self.e),
            float(self.b * x + self.d * y + self.f),
        )


IDENTITY = ViewportTransform(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


def compute_fit_transform(
    container_w: float,
    container_h: float,
    workspace: Optional[Bounds],
    margin_ratio: float,
) -> Optional[ViewportTransform]:
    """Uniform scale that fits `workspace` in the container, centred.

    Returns None for any degenerate input (no workspace, empty workspace,
    container without area) so callers can skip the write instead of
    producing inf/NaN.
    """
    if workspace is None or workspace.is_empty:
        return None
    if not (container_w > 0.0 and container_h > 0.0):
        return None

    scale = min(container_w / workspace.width, container_h / workspace.height) * margin_ratio
    cx, cy = workspace.center
    tx = container_w / 2.0 - cx * scale
    ty = container_h / 2.0 - cy * scale
    return ViewportTransform(float(scale), 0.0, 0.0, float(scale), float(tx), float(ty))


def contains(outer: Bounds, inner: Bounds) -> bool:
    """True when `inner` lies entirely inside `outer` (edges inclusive)."""
    return (
        inner.left >= outer.left
        and inner.top >= outer.top
        and inner.right <= outer.right
        and inner.bottom <= outer.bottom
    )


def overlaps(a: Bounds, b: Bounds) -> bool:
    """AABB overlap with positive area.

    Separating-axis short-circuit: no overlap when one box is entirely to the
    left, right, above or below the other. Shared edges do not count.
    """
    if a.right <= b.left or b.right <= a.left:
        return False
    if a.bottom <= b.top or b.bottom <= a.top:
        return False
    return True
