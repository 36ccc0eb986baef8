"""Watch command: re-evaluate a scenario while a detector refreshes obstacles.

Runs the periodic obstacle refresher against a simulated detector for the
scenario's mode and prints the verdict after every refresh.
"""

import asyncio
import random
from pathlib import Path
from typing import Annotated

import typer

from roomfit.application import FitSession, ObstacleRefresher
from roomfit.application.catalog import CatalogItemNotFoundError
from roomfit.application.config import ConfigError, config_to_session, load_config
from roomfit.contracts import DetectorProtocol
from roomfit.domain.value_objects import FitResult
from roomfit.infrastructure import FitReportFormatter, detector_for_mode
from roomfit.infrastructure.detectors import (
    FallbackDetector,
    HttpObjectDetector,
    file_frame_source,
)

from .validate import display_load_error


async def run_watch(
    session: FitSession,
    detector: DetectorProtocol,
    ticks: int,
    interval: float,
) -> FitResult:
    """Refresh obstacles until `ticks` refreshes have succeeded.

    Returns:
        The verdict after the last refresh.
    """
    formatter = FitReportFormatter()
    done = asyncio.Event()

    def on_update(_registry) -> None:
        count = refresher.refresh_count
        typer.echo(f"[{count}] {formatter.format_verdict(session.result)}")
        if count >= ticks:
            done.set()

    refresher = ObstacleRefresher(detector, session.registry, interval, on_update)
    async with refresher:
        try:
            await asyncio.wait_for(done.wait(), timeout=interval * ticks + 5.0)
        except asyncio.TimeoutError:
            typer.echo(
                f"Stopped after {refresher.refresh_count} of {ticks} refreshes "
                f"({refresher.failure_count} detector failures)",
                err=True,
            )
    return session.result


def watch_command(
    scenario_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON scenario file"),
    ],
    ticks: Annotated[
        int,
        typer.Option("--ticks", "-n", min=1, help="Number of refreshes to run"),
    ] = 5,
    interval: Annotated[
        float | None,
        typer.Option("--interval", "-i", min=0.001, help="Seconds between refreshes (default: mode's interval)"),
    ] = None,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for the simulated detector"),
    ] = None,
    endpoint: Annotated[
        str | None,
        typer.Option("--endpoint", help="Remote inference endpoint; needs --frame"),
    ] = None,
    frame: Annotated[
        Path | None,
        typer.Option("--frame", help="Image file sent to the endpoint on every refresh"),
    ] = None,
    token: Annotated[
        str | None,
        typer.Option("--token", envvar="ROOMFIT_DETECTOR_TOKEN", help="Bearer token for the endpoint"),
    ] = None,
) -> None:
    """Watch the verdict change as simulated detection refreshes obstacles.

    Exit codes:
        0 - Item fits after the last refresh
        1 - Scenario could not be loaded or the mode has no detector
        2 - Item does not fit after the last refresh

    Example:
        roomfit watch camera.json --ticks 10 --interval 0.5 --seed 42
        roomfit watch camera.json --endpoint $URL --frame frame.jpg
    """
    try:
        config = load_config(scenario_file)
        session = config_to_session(config)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)
    except (CatalogItemNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    viewport = session.bounds.viewport
    if viewport is None:
        typer.echo("Error: watch needs a viewport in the scenario", err=True)
        raise typer.Exit(code=1)
    detector = detector_for_mode(session.mode.name, viewport, random.Random(seed))
    if detector is None:
        typer.echo(
            f"Error: mode '{session.mode.name.value}' does not use a detector",
            err=True,
        )
        raise typer.Exit(code=1)

    if endpoint is not None or frame is not None:
        if endpoint is None or frame is None:
            typer.echo("Error: --endpoint and --frame must be given together", err=True)
            raise typer.Exit(code=1)
        remote = HttpObjectDetector(
            endpoint,
            file_frame_source(frame, int(viewport.width), int(viewport.height)),
            viewport,
            token=token,
        )
        # Simulated detection keeps the watch going when the endpoint fails.
        detector = FallbackDetector(remote, detector)

    period = interval or session.mode.refresh_interval or 1.0
    typer.echo(
        f"Watching {session.mode.name.value} mode: {ticks} refreshes every {period}s"
    )
    result = asyncio.run(run_watch(session, detector, ticks, period))
    raise typer.Exit(code=0 if result.fits else 2)
