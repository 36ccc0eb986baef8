"""Core geometry value objects."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


@dataclass(frozen=True)
class Dimensions:
    """Immutable physical dimensions of a furniture item in centimeters."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if not _all_finite(self.width, self.height, self.depth):
            raise ValueError("All dimensions must be finite")
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")

    @property
    def footprint(self) -> float:
        """Floor area (width x depth) in square centimeters."""
        return self.width * self.depth

    @property
    def volume(self) -> float:
        """Volume in cubic centimeters."""
        return self.width * self.height * self.depth


@dataclass(frozen=True)
class Point2D:
    """2D point in screen or room coordinate space.

    Negative values are valid: overlays may be dragged past the viewport.
    """

    x: float
    y: float


@dataclass(frozen=True)
class Point3D:
    """3D point in room space (cm), origin at the floor centre of the room."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class ScaledSize:
    """Footprint of an item after a scale multiplier has been applied.

    Attributes:
        width: Scaled width.
        height: Scaled height.
        depth: Scaled depth.
    """

    width: float
    height: float
    depth: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle.

    Screen-space rectangles grow downward, so ``top`` is numerically smaller
    than ``bottom``. The same type is used for centimeter footprints.

    Attributes:
        left: Left edge.
        top: Top edge.
        right: Right edge.
        bottom: Bottom edge.
    """

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        if self.right < self.left:
            raise ValueError("right must not be less than left")
        if self.bottom < self.top:
            raise ValueError("bottom must not be less than top")

    @classmethod
    def from_origin(cls, x: float, y: float, width: float, height: float) -> Rect:
        """Build a rectangle from its top-left corner and size."""
        return cls(left=x, top=y, right=x + width, bottom=y + height)

    @property
    def width(self) -> float:
        """Width of the rectangle."""
        return self.right - self.left

    @property
    def height(self) -> float:
        """Height of the rectangle."""
        return self.bottom - self.top

    @property
    def center(self) -> Point2D:
        """Centre point of the rectangle."""
        return Point2D(
            x=(self.left + self.right) / 2,
            y=(self.top + self.bottom) / 2,
        )

    @property
    def is_degenerate(self) -> bool:
        """True if the rectangle has zero width or height."""
        return self.width == 0 or self.height == 0

    def contains_point(self, point: Point2D) -> bool:
        """Check whether a point lies inside the rectangle, edges included."""
        return (
            self.left <= point.x <= self.right
            and self.top <= point.y <= self.bottom
        )
