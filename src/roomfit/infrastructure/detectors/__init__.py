"""Obstacle detectors.

Every detector exposes ``async detect_now() -> list[Region]`` and so
satisfies DetectorProtocol:

- StaticZoneDetector: fixed regions
- GridHeuristicDetector: 4x4 grid heuristic
- SimulatedObjectDetector: labelled person/chair/floor simulation
- HttpObjectDetector: remote DETR-style inference endpoint
- FallbackDetector: primary detector with a fallback on failure
"""

from __future__ import annotations

import random

from roomfit.application.modes import ModeName
from roomfit.contracts import DetectorProtocol
from roomfit.domain.value_objects import Viewport

from .fallback import FallbackDetector
from .remote import (
    DEFAULT_ENDPOINT,
    Frame,
    HttpObjectDetector,
    file_frame_source,
    parse_detections,
)
from .simulated import GridHeuristicDetector, SimulatedObjectDetector, floor_band
from .static import StaticZoneDetector


def detector_for_mode(
    mode: ModeName | str,
    viewport: Viewport,
    rng: random.Random | None = None,
) -> DetectorProtocol | None:
    """Simulated detector matching a viewer mode, or None for modes without one."""
    mode = ModeName(mode)
    if mode == ModeName.SMART:
        return StaticZoneDetector.face_zone(viewport)
    if mode == ModeName.REALTIME:
        return GridHeuristicDetector(viewport, rng)
    if mode in (ModeName.AI, ModeName.CLOUD_VISION):
        return SimulatedObjectDetector(viewport, rng)
    return None


__all__ = [
    "DEFAULT_ENDPOINT",
    "FallbackDetector",
    "Frame",
    "GridHeuristicDetector",
    "HttpObjectDetector",
    "SimulatedObjectDetector",
    "StaticZoneDetector",
    "detector_for_mode",
    "file_frame_source",
    "floor_band",
    "parse_detections",
]
