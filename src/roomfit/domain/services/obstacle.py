"""Obstacle registry for detected regions.

This module holds the latest snapshot of regions reported by a detector and
answers collision queries against it. Snapshots are replaced wholesale on
every detection cycle; regions are never merged, so stale obstacles cannot
linger after the detector stops reporting them.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from ..exceptions import MalformedRegion
from ..value_objects import CollisionCheck, Point2D, Rect, Region
from .geometry import overlaps

logger = logging.getLogger(__name__)

__all__ = [
    "OBSTACLE_CONFIDENCE_THRESHOLD",
    "ObstacleRegistry",
    "validate_region",
]

# Regions at or below this confidence are treated as detector noise.
OBSTACLE_CONFIDENCE_THRESHOLD = 0.5


def validate_region(region: Region) -> Region:
    """Check that a region can take part in collision queries.

    Args:
        region: Region reported by a detector.

    Returns:
        The same region, unchanged.

    Raises:
        MalformedRegion: If a coordinate or the confidence is not finite,
            if width or height is negative or not finite, or if the
            confidence lies outside [0, 1].
    """
    if not (math.isfinite(region.x) and math.isfinite(region.y)):
        raise MalformedRegion(region, "non-finite position")
    if not (math.isfinite(region.width) and math.isfinite(region.height)):
        raise MalformedRegion(region, "non-finite size")
    if region.width < 0 or region.height < 0:
        raise MalformedRegion(region, "negative size")
    if not math.isfinite(region.confidence) or not 0.0 <= region.confidence <= 1.0:
        raise MalformedRegion(region, "confidence outside [0, 1]")
    return region


class ObstacleRegistry:
    """Latest snapshot of detected regions.

    The registry only reads regions; it never mutates them. Collision
    queries consider obstacles whose confidence is strictly above
    OBSTACLE_CONFIDENCE_THRESHOLD. When several obstacles overlap the
    queried rectangle, the one with the highest confidence is reported,
    and ties go to the region that comes first in the snapshot.

    Attributes:
        dropped_count: Total number of malformed regions discarded since
            the registry was created.
    """

    def __init__(self, regions: Iterable[Region] | None = None) -> None:
        self._regions: tuple[Region, ...] = ()
        self.dropped_count = 0
        if regions is not None:
            self.set_regions(regions)

    @property
    def regions(self) -> tuple[Region, ...]:
        """All regions in the current snapshot."""
        return self._regions

    @property
    def obstacles(self) -> tuple[Region, ...]:
        """Obstacle regions confident enough to block a placement."""
        return tuple(
            r
            for r in self._regions
            if r.is_obstacle and r.confidence > OBSTACLE_CONFIDENCE_THRESHOLD
        )

    @property
    def clear_regions(self) -> tuple[Region, ...]:
        """Clear regions confident enough to count as known-clear space."""
        return tuple(
            r
            for r in self._regions
            if not r.is_obstacle and r.confidence > OBSTACLE_CONFIDENCE_THRESHOLD
        )

    def set_regions(self, regions: Iterable[Region]) -> int:
        """Replace the snapshot with a new set of regions.

        Malformed regions are dropped and logged; the rest become the new
        snapshot in their original order.

        Args:
            regions: Regions from the latest detection cycle.

        Returns:
            Number of regions dropped from this batch.
        """
        accepted: list[Region] = []
        dropped = 0
        for region in regions:
            try:
                accepted.append(validate_region(region))
            except MalformedRegion as e:
                dropped += 1
                logger.warning(f"Dropping region from detector feed: {e.problem}")
        self._regions = tuple(accepted)
        self.dropped_count += dropped
        logger.debug(
            f"Region snapshot replaced: {len(accepted)} accepted, {dropped} dropped"
        )
        return dropped

    def clear(self) -> None:
        """Empty the snapshot."""
        self._regions = ()

    def collides_with(self, rect: Rect) -> CollisionCheck:
        """Check a rectangle against the active obstacles.

        Args:
            rect: Bounding rectangle of the furniture overlay.

        Returns:
            CollisionCheck with the blocking region, or collision=False.
        """
        blocking: Region | None = None
        for region in self.obstacles:
            if not overlaps(rect, region.to_rect()):
                continue
            if blocking is None or region.confidence > blocking.confidence:
                blocking = region
        if blocking is None:
            return CollisionCheck(collision=False)
        return CollisionCheck(collision=True, region=blocking)

    def clear_region_at(self, point: Point2D) -> Region | None:
        """Find the known-clear region containing a point.

        Args:
            point: Usually the overlay centre.

        Returns:
            The highest-confidence clear region containing the point
            (edges included), or None.
        """
        found: Region | None = None
        for region in self.clear_regions:
            if not region.to_rect().contains_point(point):
                continue
            if found is None or region.confidence > found.confidence:
                found = region
        return found

    def __len__(self) -> int:
        return len(self._regions)
