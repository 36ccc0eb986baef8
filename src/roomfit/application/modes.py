"""Viewer modes: named evaluator configurations.

Each mode bundles which fit checks apply, the scale range and defaults for
the overlay, and how often its obstacle snapshot is refreshed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from roomfit.domain.services import EvaluatorConfig, ScaleRange
from roomfit.domain.value_objects import Point2D, Point3D, Viewport


class ModeName(str, Enum):
    """Available viewer modes."""

    ROOM = "room"
    ROOM_3D = "room_3d"
    IMAGE = "image"
    SMART = "smart"
    AI = "ai"
    REALTIME = "realtime"
    CLOUD_VISION = "cloud_vision"


class UnknownModeError(KeyError):
    """Raised when a mode name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        available = ", ".join(m.value for m in ModeName)
        return f"Unknown mode: {self.name}. Available: {available}"


@dataclass(frozen=True)
class ModeSpec:
    """Configuration of one viewer mode.

    Attributes:
        name: Mode identifier.
        description: One-line summary for listings.
        evaluator: Checks and parameters for the fit evaluator.
        default_scale: Overlay scale on selection and reset.
        floor_bias: Fraction of the viewport height used for the default
            vertical position, emulating placement on the floor.
        refresh_interval: Seconds between obstacle refreshes, or None if
            the mode does not use a periodic detector.
    """

    name: ModeName
    description: str
    evaluator: EvaluatorConfig
    default_scale: float = 1.0
    floor_bias: float = 0.7
    refresh_interval: float | None = None

    @property
    def scale_range(self) -> ScaleRange:
        return self.evaluator.scale_range

    @property
    def uses_room_space(self) -> bool:
        return self.evaluator.check_room_placement

    def default_position(self, viewport: Viewport | None) -> Point2D | Point3D:
        """Position the overlay returns to on reset.

        Screen modes centre the overlay horizontally and bias it toward the
        floor. Room-space modes start at the room origin.
        """
        if self.uses_room_space:
            return Point3D(0.0, 0.0, 0.0)
        if viewport is None:
            return Point2D(0.0, 0.0)
        return Point2D(viewport.width / 2, viewport.height * self.floor_bias)


_ROOM_RANGE = ScaleRange(0.1, 3.0)
_CAMERA_RANGE = ScaleRange(0.1, 1.5)

MODES: dict[ModeName, ModeSpec] = {
    ModeName.ROOM: ModeSpec(
        name=ModeName.ROOM,
        description="Compare scaled width and depth against room dimensions",
        evaluator=EvaluatorConfig(
            use_obstacles=False,
            use_screen_bounds=False,
            use_room_bounds=True,
            use_size_heuristic=False,
            scale_range=_ROOM_RANGE,
        ),
        floor_bias=0.5,
    ),
    ModeName.ROOM_3D: ModeSpec(
        name=ModeName.ROOM_3D,
        description="Room dimensions including height, plus wall containment",
        evaluator=EvaluatorConfig(
            use_obstacles=False,
            use_screen_bounds=False,
            use_room_bounds=True,
            use_size_heuristic=False,
            compare_room_height=True,
            check_room_placement=True,
            scale_range=_ROOM_RANGE,
        ),
        floor_bias=0.5,
    ),
    ModeName.IMAGE: ModeSpec(
        name=ModeName.IMAGE,
        description="Overlay on a still photo, screen bounds and size checks",
        evaluator=EvaluatorConfig(
            use_obstacles=False,
            use_screen_bounds=True,
            use_size_heuristic=True,
            max_width_ratio=0.8,
            max_height_ratio=0.5,
            scale_range=ScaleRange(0.1, 2.0),
        ),
        default_scale=0.5,
        floor_bias=0.5,
    ),
    ModeName.SMART: ModeSpec(
        name=ModeName.SMART,
        description="Fixed obstacle zones with bounds and size checks",
        evaluator=EvaluatorConfig(
            use_obstacles=True,
            use_screen_bounds=True,
            use_size_heuristic=True,
            scale_range=_CAMERA_RANGE,
        ),
        default_scale=0.3,
    ),
    ModeName.AI: ModeSpec(
        name=ModeName.AI,
        description="Object detection with screen bounds check",
        evaluator=EvaluatorConfig(
            use_obstacles=True,
            use_screen_bounds=True,
            use_size_heuristic=False,
            scale_range=_CAMERA_RANGE,
        ),
        default_scale=0.4,
        refresh_interval=2.0,
    ),
    ModeName.REALTIME: ModeSpec(
        name=ModeName.REALTIME,
        description="Live frame analysis refreshed every second",
        evaluator=EvaluatorConfig(
            use_obstacles=True,
            use_screen_bounds=False,
            use_size_heuristic=False,
            scale_range=_CAMERA_RANGE,
        ),
        default_scale=0.4,
        refresh_interval=1.0,
    ),
    ModeName.CLOUD_VISION: ModeSpec(
        name=ModeName.CLOUD_VISION,
        description="Labelled object detection with clear-floor reporting",
        evaluator=EvaluatorConfig(
            use_obstacles=True,
            use_screen_bounds=False,
            use_size_heuristic=False,
            scale_range=_CAMERA_RANGE,
        ),
        default_scale=0.4,
        floor_bias=0.75,
        refresh_interval=4.0,
    ),
}


def get_mode(name: str | ModeName) -> ModeSpec:
    """Look up a mode by name.

    Raises:
        UnknownModeError: If the name is not a registered mode.
    """
    try:
        return MODES[ModeName(name)]
    except ValueError:
        raise UnknownModeError(str(name)) from None


def list_modes() -> list[ModeSpec]:
    return list(MODES.values())
