"""Domain exceptions for the fit-evaluation engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import Region


class InvalidScale(ValueError):
    """Raised when a scale or scale factor is not a positive finite number."""

    def __init__(self, value: float) -> None:
        self.value = value
        super().__init__(f"Scale must be a positive finite number, got {value!r}")


class MalformedRegion(ValueError):
    """Raised when a detected region has unusable geometry or confidence.

    Attributes:
        region: The offending region.
        problem: Short description of what is wrong with it.
    """

    def __init__(self, region: "Region", problem: str) -> None:
        self.region = region
        self.problem = problem
        super().__init__(f"Malformed region ({problem}): {region!r}")
