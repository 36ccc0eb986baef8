"""Detected region and space bounds value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._core_geometry import Rect


class RegionClassification(str, Enum):
    """Classification a detector assigns to a region of the observed space.

    Attributes:
        OBSTACLE: Something the furniture must not overlap.
        CLEAR: Known free space, typically the visible floor.
    """

    OBSTACLE = "obstacle"
    CLEAR = "clear"


@dataclass(frozen=True)
class Region:
    """A detected rectangle of the observed space.

    Regions are produced by a detector and never mutated by the engine.
    Construction does not validate the geometry: a corrupt detector feed
    is screened by the obstacle registry, which drops malformed regions
    instead of failing.

    Attributes:
        x: Left edge, in the same coordinate space as the placement.
        y: Top edge.
        width: Region width.
        height: Region height.
        classification: Obstacle or clear.
        confidence: Detector confidence in [0, 1].
        label: Optional detector label such as "person" or "floor".
    """

    x: float
    y: float
    width: float
    height: float
    classification: RegionClassification = RegionClassification.OBSTACLE
    confidence: float = 1.0
    label: str | None = None

    @property
    def is_obstacle(self) -> bool:
        return self.classification == RegionClassification.OBSTACLE

    @property
    def display_label(self) -> str:
        """Label used in fit reasons; falls back to the classification."""
        return self.label or self.classification.value

    def to_rect(self) -> Rect:
        """Convert the region to a Rect."""
        return Rect.from_origin(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Viewport:
    """Visible screen rectangle, origin at the top-left corner (0, 0)."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Viewport dimensions must be positive")

    def to_rect(self) -> Rect:
        return Rect(left=0.0, top=0.0, right=self.width, bottom=self.height)


@dataclass(frozen=True)
class RoomDimensions:
    """Physical room footprint and ceiling height in centimeters."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("Room dimensions must be positive")


@dataclass(frozen=True)
class SpaceBounds:
    """Space an item is checked against.

    Either bound may be absent. When both are present, the room check and
    the screen checks are independent and both apply.

    Attributes:
        viewport: Screen rectangle for bounds and size checks.
        room: Physical room for the dimensional check.
    """

    viewport: Viewport | None = None
    room: RoomDimensions | None = None
