"""Detector that falls back to a secondary source on failure."""

from __future__ import annotations

import logging

from roomfit.contracts import DetectorError, DetectorProtocol
from roomfit.domain.value_objects import Region

logger = logging.getLogger(__name__)


class FallbackDetector:
    """Try the primary detector and use the fallback when it fails.

    Only DetectorError triggers the fallback. A failure of the fallback
    itself propagates to the caller.

    Attributes:
        primary: Preferred detector, e.g. a remote inference endpoint.
        fallback: Detector used when the primary fails.
        fallback_count: Number of cycles served by the fallback.
    """

    def __init__(self, primary: DetectorProtocol, fallback: DetectorProtocol) -> None:
        self.primary = primary
        self.fallback = fallback
        self.fallback_count = 0

    async def detect_now(self) -> list[Region]:
        try:
            return await self.primary.detect_now()
        except DetectorError as e:
            self.fallback_count += 1
            logger.info(f"Primary detector failed ({e}), using fallback")
            return await self.fallback.detect_now()
