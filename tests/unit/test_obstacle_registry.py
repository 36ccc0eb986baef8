"""Unit tests for ObstacleRegistry.

These tests verify:
- Confidence filtering at the 0.5 threshold
- Malformed regions are dropped and logged, not raised
- Snapshots are replaced wholesale
- The highest-confidence obstacle is reported on collision
"""

import logging
import math

import pytest

from roomfit.domain import MalformedRegion, Point2D, Rect, Region, RegionClassification
from roomfit.domain.services import ObstacleRegistry, validate_region


def obstacle(x, y, w, h, confidence=0.9, label=None) -> Region:
    return Region(x, y, w, h, RegionClassification.OBSTACLE, confidence, label)


def clear(x, y, w, h, confidence=0.9, label=None) -> Region:
    return Region(x, y, w, h, RegionClassification.CLEAR, confidence, label)


class TestValidateRegion:
    """Tests for validate_region."""

    def test_valid_region_returned_unchanged(self) -> None:
        region = obstacle(0, 0, 10, 10)
        assert validate_region(region) is region

    def test_zero_size_is_valid(self) -> None:
        validate_region(obstacle(0, 0, 0, 10))

    @pytest.mark.parametrize(
        "region,problem",
        [
            (obstacle(math.nan, 0, 10, 10), "non-finite position"),
            (obstacle(0, 0, math.inf, 10), "non-finite size"),
            (obstacle(0, 0, -1, 10), "negative size"),
            (obstacle(0, 0, 10, 10, confidence=1.2), "confidence outside [0, 1]"),
            (obstacle(0, 0, 10, 10, confidence=math.nan), "confidence outside [0, 1]"),
        ],
    )
    def test_malformed(self, region: Region, problem: str) -> None:
        with pytest.raises(MalformedRegion) as exc_info:
            validate_region(region)
        assert exc_info.value.problem == problem
        assert exc_info.value.region is region


class TestConfidenceFiltering:
    """Only regions above the 0.5 threshold take part in queries."""

    def test_low_confidence_obstacle_ignored(self) -> None:
        registry = ObstacleRegistry([obstacle(0, 0, 100, 100, confidence=0.4)])
        assert registry.obstacles == ()
        assert not registry.collides_with(Rect(10, 10, 20, 20)).collision

    def test_threshold_is_exclusive(self) -> None:
        registry = ObstacleRegistry([obstacle(0, 0, 100, 100, confidence=0.5)])
        assert not registry.collides_with(Rect(10, 10, 20, 20)).collision

    def test_just_above_threshold_blocks(self) -> None:
        registry = ObstacleRegistry([obstacle(0, 0, 100, 100, confidence=0.51)])
        assert registry.collides_with(Rect(10, 10, 20, 20)).collision

    def test_low_confidence_regions_still_stored(self) -> None:
        registry = ObstacleRegistry([obstacle(0, 0, 10, 10, confidence=0.2)])
        assert len(registry) == 1

    def test_clear_regions_filtered_too(self) -> None:
        registry = ObstacleRegistry(
            [clear(0, 0, 100, 100, confidence=0.3), clear(0, 0, 50, 50, confidence=0.8)]
        )
        assert len(registry.clear_regions) == 1
        assert registry.clear_regions[0].confidence == 0.8


class TestSetRegions:
    """Tests for snapshot replacement."""

    def test_replaces_previous_snapshot(self) -> None:
        registry = ObstacleRegistry([obstacle(0, 0, 10, 10)])
        registry.set_regions([obstacle(50, 50, 10, 10)])
        assert registry.regions == (obstacle(50, 50, 10, 10),)

    def test_drops_malformed_and_keeps_rest(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = ObstacleRegistry()
        with caplog.at_level(logging.WARNING):
            dropped = registry.set_regions(
                [
                    obstacle(0, 0, 10, 10),
                    obstacle(0, 0, -5, 10),
                    obstacle(20, 20, 10, 10, confidence=2.0),
                    clear(0, 0, 10, 10),
                ]
            )
        assert dropped == 2
        assert registry.dropped_count == 2
        assert len(registry) == 2
        assert "negative size" in caplog.text

    def test_clear_empties_snapshot(self) -> None:
        registry = ObstacleRegistry([obstacle(0, 0, 10, 10)])
        registry.clear()
        assert len(registry) == 0


class TestCollidesWith:
    """Tests for collision queries."""

    def test_no_obstacles(self) -> None:
        result = ObstacleRegistry().collides_with(Rect(0, 0, 10, 10))
        assert not result.collision
        assert result.region is None

    def test_highest_confidence_wins(self) -> None:
        low = obstacle(0, 0, 100, 100, confidence=0.6, label="chair")
        high = obstacle(0, 0, 100, 100, confidence=0.95, label="person")
        registry = ObstacleRegistry([low, high])
        assert registry.collides_with(Rect(10, 10, 20, 20)).region is high

    def test_tie_goes_to_first_region(self) -> None:
        first = obstacle(0, 0, 100, 100, confidence=0.8, label="first")
        second = obstacle(0, 0, 100, 100, confidence=0.8, label="second")
        registry = ObstacleRegistry([first, second])
        assert registry.collides_with(Rect(10, 10, 20, 20)).region is first

    def test_non_overlapping_high_confidence_ignored(self) -> None:
        near = obstacle(0, 0, 50, 50, confidence=0.6)
        far = obstacle(500, 500, 50, 50, confidence=0.99)
        registry = ObstacleRegistry([near, far])
        assert registry.collides_with(Rect(10, 10, 20, 20)).region is near

    def test_clear_region_does_not_block(self) -> None:
        registry = ObstacleRegistry([clear(0, 0, 100, 100, confidence=0.99)])
        assert not registry.collides_with(Rect(10, 10, 20, 20)).collision

    def test_touching_obstacle_does_not_block(self) -> None:
        registry = ObstacleRegistry([obstacle(20, 0, 10, 10)])
        assert not registry.collides_with(Rect(10, 0, 20, 10)).collision

    def test_zero_size_obstacle_never_blocks(self) -> None:
        registry = ObstacleRegistry([obstacle(15, 0, 0, 100)])
        assert not registry.collides_with(Rect(10, 10, 20, 20)).collision


class TestClearRegionAt:
    """Tests for clear_region_at."""

    def test_finds_containing_region(self) -> None:
        floor = clear(0, 600, 400, 200, confidence=0.95, label="floor")
        registry = ObstacleRegistry([floor])
        assert registry.clear_region_at(Point2D(200, 700)) is floor

    def test_point_outside(self) -> None:
        registry = ObstacleRegistry([clear(0, 600, 400, 200)])
        assert registry.clear_region_at(Point2D(200, 100)) is None

    def test_obstacle_is_not_clear(self) -> None:
        registry = ObstacleRegistry([obstacle(0, 0, 400, 800)])
        assert registry.clear_region_at(Point2D(10, 10)) is None
