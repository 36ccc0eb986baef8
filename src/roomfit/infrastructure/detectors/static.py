"""Detector returning a fixed set of regions."""

from __future__ import annotations

from collections.abc import Iterable

from roomfit.domain.value_objects import Region, Viewport


class StaticZoneDetector:
    """Detector that always reports the same regions.

    Used for the fixed-zone viewer mode and as the last-resort fallback
    when live detection is unavailable.
    """

    def __init__(self, regions: Iterable[Region]) -> None:
        self._regions = tuple(regions)

    @property
    def regions(self) -> tuple[Region, ...]:
        return self._regions

    async def detect_now(self) -> list[Region]:
        return list(self._regions)

    @classmethod
    def face_zone(cls, viewport: Viewport) -> StaticZoneDetector:
        """Single obstacle in the upper middle, where a face usually is."""
        return cls(
            [
                Region(
                    x=viewport.width * 0.35,
                    y=viewport.height * 0.2,
                    width=viewport.width * 0.3,
                    height=viewport.height * 0.25,
                    label="face zone",
                )
            ]
        )
