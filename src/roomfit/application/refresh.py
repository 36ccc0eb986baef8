"""Periodic obstacle refresh.

ObstacleRefresher polls a detector on a fixed interval and swaps the result
into an obstacle registry. Everything runs on one asyncio event loop; the
only coordination needed is a busy flag, so a tick that fires while the
previous detection is still in flight is skipped rather than queued.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable

from roomfit.contracts import DetectorError, DetectorProtocol
from roomfit.domain.services import ObstacleRegistry

logger = logging.getLogger(__name__)

__all__ = ["ObstacleRefresher"]


class ObstacleRefresher:
    """Cancellable periodic refresh of an obstacle registry.

    Detector failures are logged and counted; the registry keeps its
    previous snapshot, so fit checking degrades instead of stopping.

    Attributes:
        detector: Source of region snapshots.
        registry: Registry the snapshots are written into.
        interval: Seconds between refresh ticks.
        on_update: Called with the registry after each successful refresh.
            Errors it raises are logged and do not fail the refresh.
        refresh_count: Successful refreshes.
        skipped_count: Refreshes skipped because one was already running.
        failure_count: Refreshes that failed in the detector.

    Example:
        >>> refresher = ObstacleRefresher(detector, session.registry, interval=1.0)
        >>> async with refresher:
        ...     await asyncio.sleep(5)  # registry refreshed about five times
    """

    def __init__(
        self,
        detector: DetectorProtocol,
        registry: ObstacleRegistry,
        interval: float,
        on_update: Callable[[ObstacleRegistry], None] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("Refresh interval must be positive")
        self.detector = detector
        self.registry = registry
        self.interval = interval
        self.on_update = on_update
        self.refresh_count = 0
        self.skipped_count = 0
        self.failure_count = 0
        self._refreshing = False
        self._timer: asyncio.Task[None] | None = None
        self._in_flight: set[asyncio.Task[bool]] = set()

    @property
    def is_refreshing(self) -> bool:
        return self._refreshing

    @property
    def is_running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    async def refresh(self) -> bool:
        """Run one detection cycle and replace the registry snapshot.

        Returns:
            True if the registry was updated, False if the refresh was
            skipped because another one is in flight or the detector failed.
        """
        if self._refreshing:
            self.skipped_count += 1
            logger.debug("Refresh already in progress, skipping")
            return False

        self._refreshing = True
        try:
            regions = await self.detector.detect_now()
        except DetectorError as e:
            self.failure_count += 1
            logger.warning(f"Detector failed, keeping previous snapshot: {e}")
            return False
        except Exception as e:
            self.failure_count += 1
            logger.error(f"Unexpected detector error: {type(e).__name__}: {e}")
            return False
        else:
            self.registry.set_regions(regions)
            self.refresh_count += 1
            if self.on_update is not None:
                try:
                    self.on_update(self.registry)
                except Exception as e:
                    logger.error(
                        f"Refresh callback failed: {type(e).__name__}: {e}"
                    )
            return True
        finally:
            self._refreshing = False

    async def start(self, refresh_immediately: bool = True) -> None:
        """Start the periodic timer.

        Args:
            refresh_immediately: Run one refresh before the first tick.
        """
        if self.is_running:
            logger.debug("Refresher already running")
            return
        if refresh_immediately:
            await self.refresh()
        self._timer = asyncio.create_task(self._tick_forever())
        logger.info(f"Obstacle refresh started (every {self.interval}s)")

    async def stop(self) -> None:
        """Cancel the timer and any refresh still in flight."""
        pending: list[asyncio.Task] = list(self._in_flight)
        if self._timer is not None:
            pending.append(self._timer)
        self._timer = None
        for task in pending:
            task.cancel()
        for task in pending:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        self._in_flight.clear()
        self._refreshing = False
        if pending:
            logger.info("Obstacle refresh stopped")

    async def _tick_forever(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            # Not awaited: a slow detector must not delay the next tick.
            task = asyncio.create_task(self.refresh())
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)

    async def __aenter__(self) -> ObstacleRefresher:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()
