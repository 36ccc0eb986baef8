"""Randomized detectors that stand in for camera-based detection.

Both detectors draw from an injected ``random.Random`` so a seeded
generator reproduces the same sequence of snapshots.
"""

from __future__ import annotations

import logging
import random

from roomfit.domain.value_objects import Region, RegionClassification, Viewport

logger = logging.getLogger(__name__)

GRID_SIZE = 4
CENTER_OBSTACLE_PROBABILITY = 0.7
FLOOR_BAND_FRACTION = 0.25


class GridHeuristicDetector:
    """Coarse grid heuristic.

    The viewport is split into a 4x4 grid. Each of the four centre cells is
    reported as an obstacle with probability 0.7, at a confidence between
    0.7 and 1.0. Every cell of the bottom row is reported as clear floor
    at confidence 0.8. Other cells are not reported.

    Attributes:
        viewport: Screen the grid covers.
        rng: Random source.
    """

    def __init__(self, viewport: Viewport, rng: random.Random | None = None) -> None:
        self.viewport = viewport
        self.rng = rng or random.Random()

    async def detect_now(self) -> list[Region]:
        cell_w = self.viewport.width / GRID_SIZE
        cell_h = self.viewport.height / GRID_SIZE
        regions: list[Region] = []
        for row in range(GRID_SIZE):
            for col in range(GRID_SIZE):
                x, y = col * cell_w, row * cell_h
                is_center = row in (1, 2) and col in (1, 2)
                if is_center:
                    if self.rng.random() < CENTER_OBSTACLE_PROBABILITY:
                        regions.append(
                            Region(
                                x=x,
                                y=y,
                                width=cell_w,
                                height=cell_h,
                                confidence=0.7 + self.rng.random() * 0.3,
                            )
                        )
                elif row == GRID_SIZE - 1:
                    regions.append(
                        Region(
                            x=x,
                            y=y,
                            width=cell_w,
                            height=cell_h,
                            classification=RegionClassification.CLEAR,
                            confidence=0.8,
                        )
                    )
        logger.debug(f"Grid heuristic produced {len(regions)} regions")
        return regions


class SimulatedObjectDetector:
    """Labelled object detection simulation.

    Reports a "person" in the upper middle of the view 70% of the time and
    a "chair" to the right half of the time, each at a randomized position.
    A clear "floor" band over the bottom quarter is always present.
    """

    def __init__(self, viewport: Viewport, rng: random.Random | None = None) -> None:
        self.viewport = viewport
        self.rng = rng or random.Random()

    async def detect_now(self) -> list[Region]:
        vw, vh = self.viewport.width, self.viewport.height
        rng = self.rng
        regions: list[Region] = []

        if rng.random() > 0.3:
            regions.append(
                Region(
                    x=vw * (0.2 + rng.random() * 0.2),
                    y=vh * (0.15 + rng.random() * 0.1),
                    width=vw * (0.3 + rng.random() * 0.2),
                    height=vh * (0.4 + rng.random() * 0.1),
                    confidence=0.85 + rng.random() * 0.15,
                    label="person",
                )
            )

        if rng.random() > 0.5:
            regions.append(
                Region(
                    x=vw * (0.6 + rng.random() * 0.2),
                    y=vh * (0.4 + rng.random() * 0.1),
                    width=vw * 0.2,
                    height=vh * 0.25,
                    confidence=0.7 + rng.random() * 0.2,
                    label="chair",
                )
            )

        regions.append(floor_band(self.viewport))
        return regions


def floor_band(viewport: Viewport, confidence: float = 0.95) -> Region:
    """Clear floor region covering the bottom quarter of the viewport."""
    return Region(
        x=0.0,
        y=viewport.height * (1 - FLOOR_BAND_FRACTION),
        width=viewport.width,
        height=viewport.height * FLOOR_BAND_FRACTION,
        classification=RegionClassification.CLEAR,
        confidence=confidence,
        label="floor",
    )
