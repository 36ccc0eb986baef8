"""Fit evaluation: combines placement, item size, obstacles and space bounds.

The evaluator runs a fixed sequence of checks and the first one that
decides the verdict wins:

1. No item selected: vacuous fit.
2. Obstacle collision (registry in use).
3. Viewport bounds (screen modes).
4. Room dimensions, optionally followed by 3-D containment (room modes).
5. Reasonable-size heuristic (screen modes).
6. Positive confirmation.

Screen checks compare screen units with screen units and the room check
compares centimeters with centimeters; the two are never mixed in a single
comparison.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import FurnitureItem
from ..value_objects import (
    FitReason,
    FitResult,
    Rect,
    RoomDimensions,
    ScaledSize,
    SpaceBounds,
    Viewport,
)
from .geometry import bounding_rect, scaled_size
from .obstacle import ObstacleRegistry
from .placement import DEFAULT_SCALE_RANGE, Placement, ScaleRange

__all__ = [
    "EvaluatorConfig",
    "FitEvaluator",
]

CLEAR_SPACE_REASON = "Clear space detected"
CLEAR_ZONE_REASON = "Clear floor space detected"
ROOM_FIT_REASON = "Fits!"
OUT_OF_BOUNDS_REASON = "Out of bounds"
TOO_LARGE_REASON = "Too large for view"
OUTSIDE_ROOM_REASON = "Outside room walls"


@dataclass(frozen=True)
class EvaluatorConfig:
    """Which checks a viewer mode applies, and their parameters.

    Attributes:
        use_obstacles: Run the obstacle collision check.
        use_screen_bounds: Require the overlay to sit inside the viewport.
        use_room_bounds: Compare the scaled item against the room size.
        use_size_heuristic: Reject overlays too large for the viewport.
        compare_room_height: Include height in the room comparison.
        check_room_placement: Also require the item to sit inside the room
            walls at its 3-D position.
        max_width_ratio: Size heuristic limit as a fraction of viewport width.
        max_height_ratio: Size heuristic limit as a fraction of viewport height.
        scale_range: Scale bounds for placements in this mode.
    """

    use_obstacles: bool = True
    use_screen_bounds: bool = True
    use_room_bounds: bool = False
    use_size_heuristic: bool = True
    compare_room_height: bool = False
    check_room_placement: bool = False
    max_width_ratio: float = 0.6
    max_height_ratio: float = 0.4
    scale_range: ScaleRange = DEFAULT_SCALE_RANGE

    def __post_init__(self) -> None:
        if not 0 < self.max_width_ratio <= 1 or not 0 < self.max_height_ratio <= 1:
            raise ValueError("Size heuristic ratios must be in (0, 1]")

    @property
    def is_room_only(self) -> bool:
        """True if no screen-space or obstacle check is active."""
        return not (
            self.use_obstacles or self.use_screen_bounds or self.use_size_heuristic
        )


def _cm(value: float) -> str:
    text = f"{value:.1f}"
    return text[:-2] if text.endswith(".0") else text


class FitEvaluator:
    """Evaluates whether a placed furniture item fits.

    ``evaluate`` is a pure function of its arguments: it holds no state
    between calls, produces no side effects, and returns equal results for
    equal inputs. It is cheap enough to run on every gesture tick.
    """

    def __init__(self, config: EvaluatorConfig | None = None) -> None:
        self.config = config or EvaluatorConfig()

    def evaluate(
        self,
        item: FurnitureItem | None,
        placement: Placement,
        bounds: SpaceBounds | None = None,
        registry: ObstacleRegistry | None = None,
    ) -> FitResult:
        """Produce the fit verdict for an item at a placement.

        A check whose collaborator is missing (no registry, no viewport,
        no room) is skipped rather than treated as an error.

        Args:
            item: Selected furniture item, or None.
            placement: Current position and scale.
            bounds: Viewport and/or room the item is checked against.
            registry: Current obstacle snapshot.

        Returns:
            The FitResult decided by the first failing check, or a
            positive confirmation.
        """
        if item is None:
            return FitResult(fits=True, reason="", code=FitReason.NO_SELECTION)

        cfg = self.config
        viewport = bounds.viewport if bounds is not None else None
        room = bounds.room if bounds is not None else None
        size = scaled_size(item.dimensions, placement.scale)
        rect = bounding_rect(placement.center, size)

        if cfg.use_obstacles and registry is not None:
            collision = registry.collides_with(rect)
            if collision.collision and collision.region is not None:
                region = collision.region
                return FitResult(
                    fits=False,
                    reason=f"Blocked by {region.display_label}",
                    code=FitReason.BLOCKED,
                    blocking_region=region,
                    detail=f"({round(region.confidence * 100)}% confidence)",
                )

        if cfg.use_screen_bounds and viewport is not None:
            if not self._within_viewport(rect, viewport):
                return FitResult(
                    fits=False,
                    reason=OUT_OF_BOUNDS_REASON,
                    code=FitReason.OUT_OF_BOUNDS,
                )

        if cfg.use_room_bounds and room is not None:
            room_result = self._check_room(size, placement, room)
            if room_result is not None:
                return room_result

        if cfg.use_size_heuristic and viewport is not None:
            if not (
                size.width < cfg.max_width_ratio * viewport.width
                and size.height < cfg.max_height_ratio * viewport.height
            ):
                return FitResult(
                    fits=False,
                    reason=TOO_LARGE_REASON,
                    code=FitReason.TOO_LARGE,
                )

        return self._confirm(placement, registry)

    def _within_viewport(self, rect: Rect, viewport: Viewport) -> bool:
        # Strict: the overlay may not touch the viewport edges.
        return (
            rect.left > 0
            and rect.right < viewport.width
            and rect.top > 0
            and rect.bottom < viewport.height
        )

    def _check_room(
        self,
        size: ScaledSize,
        placement: Placement,
        room: RoomDimensions,
    ) -> FitResult | None:
        exceeded: list[tuple[str, float, float]] = []
        if size.width > room.width:
            exceeded.append(("wide", size.width, room.width))
        if size.depth > room.depth:
            exceeded.append(("deep", size.depth, room.depth))
        if self.config.compare_room_height and size.height > room.height:
            exceeded.append(("tall", size.height, room.height))

        if exceeded:
            axis, actual, limit = exceeded[0]
            detail = "; ".join(
                f"{name}: {_cm(a)} cm > {_cm(b)} cm" for name, a, b in exceeded
            )
            return FitResult(
                fits=False,
                reason=f"Too {axis} for room ({_cm(actual)} cm > {_cm(limit)} cm)",
                code=FitReason.EXCEEDS_ROOM,
                detail=detail,
            )

        if self.config.check_room_placement and not self._inside_room(
            size, placement, room
        ):
            return FitResult(
                fits=False,
                reason=OUTSIDE_ROOM_REASON,
                code=FitReason.OUTSIDE_ROOM,
            )
        return None

    def _inside_room(
        self, size: ScaledSize, placement: Placement, room: RoomDimensions
    ) -> bool:
        # Room is centred on the origin on x/z; y is the item's base elevation.
        half_room_w = room.width / 2
        half_room_d = room.depth / 2
        return (
            placement.x - size.width / 2 >= -half_room_w
            and placement.x + size.width / 2 <= half_room_w
            and placement.y >= 0
            and placement.y + size.height <= room.height
            and placement.z - size.depth / 2 >= -half_room_d
            and placement.z + size.depth / 2 <= half_room_d
        )

    def _confirm(
        self, placement: Placement, registry: ObstacleRegistry | None
    ) -> FitResult:
        if registry is not None and self.config.use_obstacles:
            clear = registry.clear_region_at(placement.center)
            if clear is not None:
                return FitResult(
                    fits=True,
                    reason=CLEAR_ZONE_REASON,
                    code=FitReason.CLEAR_ZONE,
                    detail="Safe to place here",
                )
        if self.config.is_room_only:
            return FitResult(fits=True, reason=ROOM_FIT_REASON, code=FitReason.CLEAR)
        return FitResult(fits=True, reason=CLEAR_SPACE_REASON, code=FitReason.CLEAR)
