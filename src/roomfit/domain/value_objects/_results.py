"""Fit verdict value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._regions import Region

FITS_COLOR = "#00FF00"
BLOCKED_COLOR = "#FF0000"


class FitReason(str, Enum):
    """Machine-readable code for the check that decided a fit verdict.

    Attributes:
        NO_SELECTION: No furniture item selected; vacuous fit.
        BLOCKED: Overlaps a detected obstacle.
        OUT_OF_BOUNDS: Overlay reaches past the viewport edges.
        EXCEEDS_ROOM: Scaled item is larger than the room.
        OUTSIDE_ROOM: Item pokes through a wall at its 3-D position.
        TOO_LARGE: Overlay is implausibly large for the view.
        CLEAR: No check failed.
        CLEAR_ZONE: No check failed and the item sits on known-clear space.
    """

    NO_SELECTION = "no_selection"
    BLOCKED = "blocked"
    OUT_OF_BOUNDS = "out_of_bounds"
    EXCEEDS_ROOM = "exceeds_room"
    OUTSIDE_ROOM = "outside_room"
    TOO_LARGE = "too_large"
    CLEAR = "clear"
    CLEAR_ZONE = "clear_zone"


@dataclass(frozen=True)
class FitResult:
    """Fit verdict for one placement.

    Derived on demand and never stored: the same inputs always produce an
    equal result.

    Attributes:
        fits: Whether the placement is usable.
        reason: Human-readable reason, empty when nothing is selected.
        code: Which check decided the verdict.
        blocking_region: The obstacle that blocked the placement, if any.
        detail: Secondary text such as a confidence annotation.
    """

    fits: bool
    reason: str
    code: FitReason
    blocking_region: Region | None = None
    detail: str = ""

    @property
    def border_color(self) -> str:
        """Overlay border color: green when the item fits, red otherwise."""
        return FITS_COLOR if self.fits else BLOCKED_COLOR


@dataclass(frozen=True)
class CollisionCheck:
    """Outcome of an obstacle registry collision query.

    Attributes:
        collision: True if an active obstacle overlaps the queried rect.
        region: The overlapping obstacle chosen by the registry policy.
    """

    collision: bool
    region: Region | None = None
