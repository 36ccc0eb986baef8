"""Infrastructure layer - detectors and output formatters."""

from .detectors import (
    FallbackDetector,
    Frame,
    GridHeuristicDetector,
    HttpObjectDetector,
    SimulatedObjectDetector,
    StaticZoneDetector,
    detector_for_mode,
)
from .formatters import (
    CatalogFormatter,
    FitReportFormatter,
    JsonReportExporter,
    ModeFormatter,
)

__all__ = [
    # Detectors
    "FallbackDetector",
    "Frame",
    "GridHeuristicDetector",
    "HttpObjectDetector",
    "SimulatedObjectDetector",
    "StaticZoneDetector",
    "detector_for_mode",
    # Formatters
    "CatalogFormatter",
    "FitReportFormatter",
    "JsonReportExporter",
    "ModeFormatter",
]
