"""Unit tests for the viewer mode registry."""

import pytest

from roomfit.application import MODES, ModeName, UnknownModeError, get_mode, list_modes
from roomfit.domain import Point2D, Point3D, Viewport


class TestGetMode:
    """Tests for mode lookup."""

    def test_by_string(self) -> None:
        assert get_mode("smart").name == ModeName.SMART

    def test_by_enum(self) -> None:
        assert get_mode(ModeName.ROOM_3D) is MODES[ModeName.ROOM_3D]

    def test_unknown(self) -> None:
        with pytest.raises(UnknownModeError) as exc_info:
            get_mode("xray")
        assert exc_info.value.name == "xray"
        assert "Unknown mode: xray" in str(exc_info.value)
        assert "cloud_vision" in str(exc_info.value)

    def test_list_modes_covers_every_name(self) -> None:
        assert {m.name for m in list_modes()} == set(ModeName)


class TestModeChecks:
    """Each mode enables the checks it is documented to apply."""

    def test_room_compares_footprint_only(self) -> None:
        config = get_mode("room").evaluator
        assert config.use_room_bounds
        assert not config.compare_room_height
        assert config.is_room_only

    def test_room_3d_compares_height_and_containment(self) -> None:
        config = get_mode("room_3d").evaluator
        assert config.compare_room_height
        assert config.check_room_placement

    def test_image_uses_wider_heuristic(self) -> None:
        config = get_mode("image").evaluator
        assert not config.use_obstacles
        assert (config.max_width_ratio, config.max_height_ratio) == (0.8, 0.5)

    @pytest.mark.parametrize("name", ["smart", "ai", "realtime", "cloud_vision"])
    def test_camera_modes_use_obstacles(self, name: str) -> None:
        mode = get_mode(name)
        assert mode.evaluator.use_obstacles
        assert mode.scale_range.maximum == 1.5

    @pytest.mark.parametrize(
        "name,interval", [("ai", 2.0), ("realtime", 1.0), ("cloud_vision", 4.0)]
    )
    def test_refresh_intervals(self, name: str, interval: float) -> None:
        assert get_mode(name).refresh_interval == interval

    @pytest.mark.parametrize("name", ["room", "room_3d", "image", "smart"])
    def test_no_periodic_refresh(self, name: str) -> None:
        assert get_mode(name).refresh_interval is None


class TestDefaultPosition:
    """Tests for ModeSpec.default_position."""

    def test_floor_biased_screen_position(self) -> None:
        position = get_mode("smart").default_position(Viewport(400, 800))
        assert position == Point2D(200, 560)

    def test_cloud_vision_sits_lower(self) -> None:
        position = get_mode("cloud_vision").default_position(Viewport(400, 800))
        assert position == Point2D(200, 600)

    def test_room_space_starts_at_origin(self) -> None:
        assert get_mode("room_3d").default_position(Viewport(400, 800)) == Point3D(0, 0, 0)

    def test_without_viewport(self) -> None:
        assert get_mode("image").default_position(None) == Point2D(0, 0)
