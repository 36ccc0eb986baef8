"""Placement state for a furniture overlay.

Holds the user-controlled position and scale of the overlay and applies
the bounded mutations that drag and scale gestures produce.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..exceptions import InvalidScale
from ..value_objects import Point2D, Point3D

__all__ = [
    "DEFAULT_SCALE_RANGE",
    "Placement",
    "PlacementState",
    "SCALE_DOWN_FACTOR",
    "SCALE_UP_FACTOR",
    "ScaleRange",
]

SCALE_UP_FACTOR = 1.2
SCALE_DOWN_FACTOR = 0.8


@dataclass(frozen=True)
class ScaleRange:
    """Inclusive bounds a placement scale is clamped to.

    Attributes:
        minimum: Smallest allowed scale.
        maximum: Largest allowed scale.
    """

    minimum: float = 0.1
    maximum: float = 3.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.minimum) and math.isfinite(self.maximum)):
            raise ValueError("Scale bounds must be finite")
        if self.minimum <= 0:
            raise ValueError("Minimum scale must be positive")
        if self.maximum < self.minimum:
            raise ValueError("Maximum scale must not be less than minimum scale")

    def clamp(self, value: float) -> float:
        """Saturate a value to the range."""
        return max(self.minimum, min(self.maximum, value))


DEFAULT_SCALE_RANGE = ScaleRange()


@dataclass(frozen=True)
class Placement:
    """Immutable snapshot of an overlay placement.

    Attributes:
        x: Horizontal centre position.
        y: Vertical centre position.
        scale: Multiplier applied to the item's dimensions.
        z: Depth position, only meaningful for room-space placements.
    """

    x: float
    y: float
    scale: float = 1.0
    z: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale) or self.scale <= 0:
            raise InvalidScale(self.scale)
        if not all(math.isfinite(v) for v in (self.x, self.y, self.z)):
            raise ValueError("Position coordinates must be finite")

    @property
    def center(self) -> Point2D:
        return Point2D(self.x, self.y)

    @property
    def position_3d(self) -> Point3D:
        return Point3D(self.x, self.y, self.z)


class PlacementState:
    """Mutable placement of the overlay currently being positioned.

    Position is never clamped: a placement past the viewport edge is a
    legal state and is reported by the fit evaluator instead. Scale is
    always kept inside the configured range.

    Attributes:
        scale_range: Bounds the scale is clamped to.
        default_position: Position restored by reset().
        default_scale: Scale restored by reset().
    """

    def __init__(
        self,
        scale_range: ScaleRange = DEFAULT_SCALE_RANGE,
        default_position: Point2D | Point3D = Point2D(0.0, 0.0),
        default_scale: float = 1.0,
    ) -> None:
        """Initialize the placement at its defaults.

        Args:
            scale_range: Bounds for the scale.
            default_position: Starting and reset position.
            default_scale: Starting and reset scale, clamped to the range.

        Raises:
            InvalidScale: If default_scale is not positive.
        """
        if not math.isfinite(default_scale) or default_scale <= 0:
            raise InvalidScale(default_scale)
        self.scale_range = scale_range
        self.default_position = default_position
        self.default_scale = scale_range.clamp(default_scale)
        self._x = 0.0
        self._y = 0.0
        self._z = 0.0
        self._scale = self.default_scale
        self.reset()

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def scale(self) -> float:
        return self._scale

    def move(self, to_x: float, to_y: float, to_z: float | None = None) -> None:
        """Set the absolute position.

        Drag gestures report absolute pointer coordinates, not deltas.

        Args:
            to_x: New horizontal position.
            to_y: New vertical position.
            to_z: New depth position; unchanged when omitted.

        Raises:
            ValueError: If any coordinate is not finite. State is unchanged.
        """
        new_z = self._z if to_z is None else to_z
        if not all(math.isfinite(v) for v in (to_x, to_y, new_z)):
            raise ValueError("Position coordinates must be finite")
        self._x = to_x
        self._y = to_y
        self._z = new_z

    def adjust_scale(self, factor: float) -> float:
        """Multiply the current scale by a factor and clamp it to the range.

        Clamping saturates silently; a non-positive factor is an error.

        Args:
            factor: Multiplier, e.g. 1.2 to grow or 0.8 to shrink.

        Returns:
            The new scale.

        Raises:
            InvalidScale: If factor is not a positive finite number.
                State is unchanged.
        """
        if not math.isfinite(factor) or factor <= 0:
            raise InvalidScale(factor)
        self._scale = self.scale_range.clamp(self._scale * factor)
        return self._scale

    def set_scale(self, scale: float) -> float:
        """Set an absolute scale, clamped to the range.

        Raises:
            InvalidScale: If scale is not a positive finite number.
        """
        if not math.isfinite(scale) or scale <= 0:
            raise InvalidScale(scale)
        self._scale = self.scale_range.clamp(scale)
        return self._scale

    def scale_up(self) -> float:
        return self.adjust_scale(SCALE_UP_FACTOR)

    def scale_down(self) -> float:
        return self.adjust_scale(SCALE_DOWN_FACTOR)

    def reset(self) -> None:
        """Return to the default position and scale."""
        self._x = self.default_position.x
        self._y = self.default_position.y
        self._z = getattr(self.default_position, "z", 0.0)
        self._scale = self.default_scale

    def snapshot(self) -> Placement:
        """Return an immutable copy of the current placement."""
        return Placement(x=self._x, y=self._y, scale=self._scale, z=self._z)

    def __repr__(self) -> str:
        return (
            f"PlacementState(x={self._x}, y={self._y}, z={self._z}, "
            f"scale={self._scale})"
        )
