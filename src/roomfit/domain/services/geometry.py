"""Geometry primitives shared by every fit check.

All overlay geometry is anchored at its centre, not its top-left corner:
``bounding_rect`` is the single place that converts a centre point and a
size into edges, and every placement check goes through it.
"""

from __future__ import annotations

import math

from ..exceptions import InvalidScale
from ..value_objects import Dimensions, Point2D, Rect, ScaledSize

__all__ = [
    "bounding_rect",
    "overlaps",
    "scaled_size",
]


def overlaps(a: Rect, b: Rect) -> bool:
    """Check whether two rectangles overlap.

    Two rectangles overlap if their projections intersect on both axes.
    Comparisons are strict, so rectangles that only share an edge do not
    overlap, and a degenerate rectangle (zero width or height) never
    overlaps anything.

    Args:
        a: First rectangle.
        b: Second rectangle.

    Returns:
        True if there is any overlap, False otherwise.
    """
    if a.is_degenerate or b.is_degenerate:
        return False
    return not (
        a.right <= b.left
        or a.left >= b.right
        or a.bottom <= b.top
        or a.top >= b.bottom
    )


def scaled_size(dimensions: Dimensions, scale: float) -> ScaledSize:
    """Apply a scale multiplier to an item's dimensions.

    Args:
        dimensions: Physical item dimensions.
        scale: Unitless multiplier.

    Returns:
        The scaled width, height and depth.

    Raises:
        InvalidScale: If scale is not a positive finite number.
    """
    if not math.isfinite(scale) or scale <= 0:
        raise InvalidScale(scale)
    return ScaledSize(
        width=dimensions.width * scale,
        height=dimensions.height * scale,
        depth=dimensions.depth * scale,
    )


def bounding_rect(center: Point2D, size: ScaledSize) -> Rect:
    """Centre a rectangle of the given size on a point."""
    half_width = size.width / 2
    half_height = size.height / 2
    return Rect(
        left=center.x - half_width,
        top=center.y - half_height,
        right=center.x + half_width,
        bottom=center.y + half_height,
    )
