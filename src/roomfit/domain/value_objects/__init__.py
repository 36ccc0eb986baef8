"""Value objects for the fit-evaluation domain.

This module provides immutable data types used throughout the engine.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    Dimensions,
    Point2D,
    Point3D,
    Rect,
    ScaledSize,
)

# Detected regions and space bounds
from ._regions import (
    Region,
    RegionClassification,
    RoomDimensions,
    SpaceBounds,
    Viewport,
)

# Fit verdicts
from ._results import (
    BLOCKED_COLOR,
    FITS_COLOR,
    CollisionCheck,
    FitReason,
    FitResult,
)

__all__ = [
    "BLOCKED_COLOR",
    "CollisionCheck",
    "Dimensions",
    "FITS_COLOR",
    "FitReason",
    "FitResult",
    "Point2D",
    "Point3D",
    "Rect",
    "Region",
    "RegionClassification",
    "RoomDimensions",
    "ScaledSize",
    "SpaceBounds",
    "Viewport",
]
