"""Contracts module - protocols for cross-layer communication.

By depending on protocols rather than concrete implementations, the engine
stays decoupled from whichever detector supplies its regions.

Example:
    ```python
    from roomfit.contracts import DetectorProtocol

    async def snapshot(detector: DetectorProtocol) -> int:
        return len(await detector.detect_now())
    ```
"""

from .protocols import DetectorError, DetectorProtocol

__all__ = ["DetectorError", "DetectorProtocol"]
