"""Domain services for furniture fit evaluation.

This package provides the engine's services:
- Geometry primitives (overlap test, scaling, centred bounding rects)
- Placement state with clamped scale adjustment
- Obstacle registry with confidence-filtered collision queries
- The fit evaluator that combines them into a verdict
"""

from .fit_evaluator import EvaluatorConfig, FitEvaluator
from .geometry import bounding_rect, overlaps, scaled_size
from .obstacle import OBSTACLE_CONFIDENCE_THRESHOLD, ObstacleRegistry, validate_region
from .placement import (
    DEFAULT_SCALE_RANGE,
    SCALE_DOWN_FACTOR,
    SCALE_UP_FACTOR,
    Placement,
    PlacementState,
    ScaleRange,
)

__all__ = [
    "DEFAULT_SCALE_RANGE",
    "EvaluatorConfig",
    "FitEvaluator",
    "OBSTACLE_CONFIDENCE_THRESHOLD",
    "ObstacleRegistry",
    "Placement",
    "PlacementState",
    "SCALE_DOWN_FACTOR",
    "SCALE_UP_FACTOR",
    "ScaleRange",
    "bounding_rect",
    "overlaps",
    "scaled_size",
    "validate_region",
]
