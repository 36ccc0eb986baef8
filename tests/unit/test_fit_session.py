"""Unit tests for FitSession."""

import pytest

from roomfit.application import BLOCKED_HINT, FitSession
from roomfit.domain import (
    FitReason,
    FurnitureItem,
    InvalidScale,
    Rect,
    Region,
    RegionClassification,
    RoomDimensions,
    SpaceBounds,
    Viewport,
)
from roomfit.domain.value_objects import BLOCKED_COLOR, FITS_COLOR


@pytest.fixture
def smart_session(table: FurnitureItem, viewport: Viewport) -> FitSession:
    return FitSession("smart", SpaceBounds(viewport=viewport), item=table)


class TestSelection:
    """Tests for selecting and deselecting items."""

    def test_select_resets_placement(self, table: FurnitureItem, viewport: Viewport) -> None:
        session = FitSession("smart", SpaceBounds(viewport=viewport))
        session.move(10, 10)
        result = session.select(table)
        assert (session.placement.x, session.placement.y) == (200, 560)
        assert session.placement.scale == 0.3
        assert result.reason == "Clear space detected"

    def test_no_item_is_vacuous_fit(self, viewport: Viewport) -> None:
        session = FitSession("smart", SpaceBounds(viewport=viewport))
        assert session.result.code == FitReason.NO_SELECTION
        assert session.overlay() is None
        assert session.release_hint() is None

    def test_deselect(self, smart_session: FitSession) -> None:
        smart_session.deselect()
        assert smart_session.item is None
        assert smart_session.result.fits


class TestGestures:
    """Gestures mutate placement and return the fresh verdict."""

    def test_drag_off_screen(self, smart_session: FitSession) -> None:
        result = smart_session.move(10, 10)
        assert result.code == FitReason.OUT_OF_BOUNDS
        assert smart_session.release_hint() == "Out of bounds"

    def test_scale_up_updates_percent(self, smart_session: FitSession) -> None:
        smart_session.scale_up()
        assert smart_session.overlay().scale_percent == 36

    def test_scale_saturates_at_mode_maximum(self, smart_session: FitSession) -> None:
        for _ in range(20):
            smart_session.scale_up()
        assert smart_session.placement.scale == 1.5

    def test_set_scale(self, smart_session: FitSession) -> None:
        smart_session.set_scale(0.5)
        assert smart_session.placement.scale == 0.5
        with pytest.raises(InvalidScale):
            smart_session.set_scale(-1)

    def test_reset(self, smart_session: FitSession) -> None:
        smart_session.move(0, 0)
        smart_session.scale_down()
        smart_session.reset()
        assert (smart_session.placement.x, smart_session.placement.scale) == (200, 0.3)


class TestObstacles:
    """Tests for the obstacle snapshot owned by a session."""

    def test_update_regions_blocks(self, smart_session: FitSession) -> None:
        wall = Region(150, 500, 100, 100, RegionClassification.OBSTACLE, 0.9, "wall")
        result = smart_session.update_regions([wall])
        assert not result.fits
        assert result.reason == "Blocked by wall"
        assert smart_session.release_hint() == BLOCKED_HINT

    def test_update_replaces_snapshot(self, smart_session: FitSession) -> None:
        wall = Region(150, 500, 100, 100, RegionClassification.OBSTACLE, 0.9)
        smart_session.update_regions([wall])
        assert smart_session.update_regions([]).fits

    def test_verdict_is_not_cached(self, smart_session: FitSession) -> None:
        assert smart_session.result.fits
        smart_session.registry.set_regions(
            [Region(0, 0, 400, 800, RegionClassification.OBSTACLE, 0.9)]
        )
        assert not smart_session.result.fits


class TestOverlay:
    """Tests for the overlay state."""

    def test_overlay_geometry(self, smart_session: FitSession) -> None:
        overlay = smart_session.overlay()
        # 160 x 75 at scale 0.3, centred on (200, 560).
        assert overlay.rect == Rect(176, 548.75, 224, 571.25)
        assert overlay.scale_percent == 30
        assert overlay.border_color == FITS_COLOR
        assert overlay.result == smart_session.result

    def test_overlay_turns_red(self, smart_session: FitSession) -> None:
        smart_session.move(-100, -100)
        assert smart_session.overlay().border_color == BLOCKED_COLOR


class TestRoomSession:
    """Room modes compare centimeters with centimeters."""

    def test_scaled_table_too_wide(self, table: FurnitureItem) -> None:
        room = RoomDimensions(width=160, height=240, depth=100)
        session = FitSession("room", SpaceBounds(room=room), item=table)
        assert session.result.fits
        assert session.result.reason == "Fits!"
        result = session.adjust_scale(1.5)
        assert session.placement.scale == 1.5
        assert not result.fits
        assert result.reason == "Too wide for room (240 cm > 160 cm)"
        assert "deep: 135 cm > 100 cm" in result.detail
        assert session.release_hint() == result.reason

    def test_room_3d_starts_at_origin(self, table: FurnitureItem) -> None:
        room = RoomDimensions(width=300, height=250, depth=300)
        session = FitSession("room_3d", SpaceBounds(room=room), item=table)
        assert (session.placement.x, session.placement.y, session.placement.z) == (0, 0, 0)
        assert session.move(0, 0, 200).code == FitReason.OUTSIDE_ROOM
