"""Typer CLI for furniture fit checks."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from roomfit.application import (
    CatalogItemNotFoundError,
    FitSession,
    FurnitureCatalog,
    ModeName,
    get_mode,
    list_modes,
)
from roomfit.application.config import ConfigError, config_to_session, load_config
from roomfit.application.config.validator import check_item
from roomfit.cli.commands import display_load_error, validate_command, watch_command
from roomfit.domain import InvalidScale, RoomDimensions, SpaceBounds
from roomfit.infrastructure import (
    CatalogFormatter,
    FitReportFormatter,
    JsonReportExporter,
    ModeFormatter,
)

app = typer.Typer(
    name="roomfit",
    help="Check whether furniture fits a room or a camera view.",
)

app.command(name="validate")(validate_command)
app.command(name="watch")(watch_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Check whether furniture fits a room or a camera view."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _emit(session: FitSession, output_format: str) -> None:
    if output_format == "json":
        typer.echo(JsonReportExporter().export(session))
    else:
        typer.echo(FitReportFormatter().format(session))


@app.command()
def check(
    scenario_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON scenario file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """Evaluate a scenario and report whether the item fits.

    Exit codes:
        0 - The item fits
        1 - The scenario could not be evaluated
        2 - The item does not fit

    Example:
        roomfit check living-room.json
    """
    if output_format not in ("text", "json"):
        typer.echo(f"Unknown format: {output_format}. Use text or json.", err=True)
        raise typer.Exit(code=1)

    try:
        config = load_config(scenario_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    item_check = check_item(config, FurnitureCatalog())
    if not item_check.is_valid:
        for error in item_check.errors:
            typer.echo(f"Error: {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)

    try:
        session = config_to_session(config)
    except (CatalogItemNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _emit(session, output_format)
    raise typer.Exit(code=0 if session.result.fits else 2)


@app.command()
def catalog(
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = "text",
) -> None:
    """List the furniture presets."""
    items = FurnitureCatalog().list_items()
    if output_format == "json":
        typer.echo(
            json.dumps(
                [
                    {
                        "id": item.id,
                        "name": item.name,
                        "category": item.category.value,
                        "width": item.dimensions.width,
                        "height": item.dimensions.height,
                        "depth": item.dimensions.depth,
                        "color": item.color,
                    }
                    for item in items
                ],
                indent=2,
            )
        )
        return
    typer.echo(CatalogFormatter().format(items))


@app.command()
def modes() -> None:
    """List the viewer modes and their parameters."""
    typer.echo(ModeFormatter().format(list_modes()))


@app.command()
def fit(
    item_id: Annotated[str, typer.Option("--item", help="Catalog item id, e.g. sofa-1")],
    room_width: Annotated[float, typer.Option("--room-width", "-w", help="Room width in cm")],
    room_height: Annotated[float, typer.Option("--room-height", "-h", help="Room height in cm")],
    room_depth: Annotated[float, typer.Option("--room-depth", "-d", help="Room depth in cm")],
    scale: Annotated[float, typer.Option("--scale", "-s", help="Scale multiplier")] = 1.0,
    include_height: Annotated[
        bool,
        typer.Option("--include-height", help="Also compare height (room_3d checks)"),
    ] = False,
) -> None:
    """Quick check of a catalog item against room dimensions.

    Example:
        roomfit fit --item table-1 -w 160 -h 250 -d 300 --scale 1.5
    """
    try:
        item = FurnitureCatalog().get(item_id)
        room = RoomDimensions(room_width, room_height, room_depth)
    except (CatalogItemNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    mode = get_mode(ModeName.ROOM_3D if include_height else ModeName.ROOM)
    session = FitSession(mode, SpaceBounds(room=room), item=item)
    try:
        session.set_scale(scale)
    except InvalidScale as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _emit(session, "text")
    raise typer.Exit(code=0 if session.result.fits else 2)


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Interface to bind")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Port to listen on")] = 8000,
    reload: Annotated[bool, typer.Option("--reload", help="Reload on code changes")] = False,
) -> None:
    """Run the REST API with uvicorn."""
    import uvicorn

    uvicorn.run("roomfit.web:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
