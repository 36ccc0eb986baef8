"""Fit session: the state behind one viewer screen.

A session owns the placement of the selected item and the obstacle
registry for its view, and re-evaluates the fit verdict on demand. The
verdict is never cached: every read of ``result`` recomputes it from the
current item, placement, bounds and obstacle snapshot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from roomfit.domain.entities import FurnitureItem
from roomfit.domain.services import (
    FitEvaluator,
    ObstacleRegistry,
    PlacementState,
    bounding_rect,
    scaled_size,
)
from roomfit.domain.value_objects import (
    FitReason,
    FitResult,
    Rect,
    Region,
    SpaceBounds,
)

from .modes import ModeName, ModeSpec, get_mode

logger = logging.getLogger(__name__)

BLOCKED_HINT = (
    "This space is blocked by an obstacle. "
    "Try moving the furniture to an empty area."
)


@dataclass(frozen=True)
class OverlayState:
    """Everything a presentation adapter needs to draw the overlay.

    Attributes:
        rect: Overlay rectangle, centre-anchored at the placement.
        border_color: Green when the item fits, red otherwise.
        scale_percent: Current scale as a whole percentage.
        result: The fit verdict the overlay reflects.
    """

    rect: Rect
    border_color: str
    scale_percent: int
    result: FitResult


class FitSession:
    """Placement, obstacles and verdict for one viewer screen.

    Gesture methods are synchronous and never wait on a detector refresh;
    the obstacle snapshot is swapped atomically by update_regions().

    Attributes:
        mode: Mode configuration for this session.
        bounds: Viewport and/or room the item is checked against.
        placement: Mutable overlay placement.
        registry: Current obstacle snapshot.
        evaluator: Fit evaluator configured for the mode.
    """

    def __init__(
        self,
        mode: ModeSpec | ModeName | str,
        bounds: SpaceBounds,
        item: FurnitureItem | None = None,
        registry: ObstacleRegistry | None = None,
    ) -> None:
        self.mode = mode if isinstance(mode, ModeSpec) else get_mode(mode)
        self.bounds = bounds
        self.registry = registry if registry is not None else ObstacleRegistry()
        self.evaluator = FitEvaluator(self.mode.evaluator)
        self.placement = PlacementState(
            scale_range=self.mode.scale_range,
            default_position=self.mode.default_position(bounds.viewport),
            default_scale=self.mode.default_scale,
        )
        self._item = item

    @property
    def item(self) -> FurnitureItem | None:
        return self._item

    def select(self, item: FurnitureItem) -> FitResult:
        """Select an item and put its overlay at the default placement."""
        self._item = item
        self.placement.reset()
        logger.debug(f"Selected {item.id} in {self.mode.name.value} mode")
        return self.result

    def deselect(self) -> None:
        self._item = None

    def move(self, to_x: float, to_y: float, to_z: float | None = None) -> FitResult:
        self.placement.move(to_x, to_y, to_z)
        return self.result

    def adjust_scale(self, factor: float) -> FitResult:
        self.placement.adjust_scale(factor)
        return self.result

    def set_scale(self, scale: float) -> FitResult:
        self.placement.set_scale(scale)
        return self.result

    def scale_up(self) -> FitResult:
        self.placement.scale_up()
        return self.result

    def scale_down(self) -> FitResult:
        self.placement.scale_down()
        return self.result

    def reset(self) -> FitResult:
        self.placement.reset()
        return self.result

    def update_regions(self, regions: Iterable[Region]) -> FitResult:
        """Replace the obstacle snapshot and return the new verdict."""
        self.registry.set_regions(regions)
        return self.result

    @property
    def result(self) -> FitResult:
        """Current fit verdict, recomputed on every access."""
        return self.evaluator.evaluate(
            self._item,
            self.placement.snapshot(),
            self.bounds,
            self.registry,
        )

    def overlay(self) -> OverlayState | None:
        """Overlay geometry and color for the current item, if one is selected."""
        if self._item is None:
            return None
        snapshot = self.placement.snapshot()
        size = scaled_size(self._item.dimensions, snapshot.scale)
        result = self.result
        return OverlayState(
            rect=bounding_rect(snapshot.center, size),
            border_color=result.border_color,
            scale_percent=round(snapshot.scale * 100),
            result=result,
        )

    def release_hint(self) -> str | None:
        """Message to show when a drag ends, or None if the spot is usable."""
        result = self.result
        if result.fits:
            return None
        if result.code == FitReason.BLOCKED:
            return BLOCKED_HINT
        return result.reason
