"""Domain layer - the spatial fit-evaluation engine."""

from .entities import FurnitureCategory, FurnitureItem
from .exceptions import InvalidScale, MalformedRegion
from .services import (
    EvaluatorConfig,
    FitEvaluator,
    ObstacleRegistry,
    Placement,
    PlacementState,
    ScaleRange,
    bounding_rect,
    overlaps,
    scaled_size,
)
from .value_objects import (
    Dimensions,
    FitReason,
    FitResult,
    Point2D,
    Point3D,
    Rect,
    Region,
    RegionClassification,
    RoomDimensions,
    SpaceBounds,
    Viewport,
)

__all__ = [
    "Dimensions",
    "EvaluatorConfig",
    "FitEvaluator",
    "FitReason",
    "FitResult",
    "FurnitureCategory",
    "FurnitureItem",
    "InvalidScale",
    "MalformedRegion",
    "ObstacleRegistry",
    "Placement",
    "PlacementState",
    "Point2D",
    "Point3D",
    "Rect",
    "Region",
    "RegionClassification",
    "RoomDimensions",
    "ScaleRange",
    "SpaceBounds",
    "Viewport",
    "bounding_rect",
    "overlaps",
    "scaled_size",
]
