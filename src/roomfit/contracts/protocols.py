"""Service protocols for dependency injection.

This module defines protocol classes that establish contracts between layers.
Detector implementations in the infrastructure layer depend on these
protocols, so a simulated detector and a real computer-vision backend can be
swapped without touching the fit evaluator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from roomfit.domain.value_objects import Region


class DetectorError(Exception):
    """Raised when a detector cannot produce a region snapshot.

    Attributes:
        message: What went wrong.
        detector: Name of the detector that failed.
    """

    def __init__(self, message: str, detector: str = "detector") -> None:
        self.message = message
        self.detector = detector
        super().__init__(f"{detector}: {message}")


@runtime_checkable
class DetectorProtocol(Protocol):
    """Protocol for obstacle detectors.

    A detector is a black box returning zero or more regions, each with a
    classification and a confidence in [0, 1]. The engine makes no
    assumption about how they were produced.

    Example:
        ```python
        class FixedDetector:
            async def detect_now(self) -> list[Region]:
                return [Region(x=0, y=0, width=50, height=50, confidence=0.9)]
        ```
    """

    async def detect_now(self) -> "list[Region]":
        """Run one detection cycle.

        Returns:
            Regions detected in the current view.

        Raises:
            DetectorError: If the detector could not produce a snapshot.
        """
        ...
