"""Convert validated scenario configurations into engine objects.

The functions here are the seam between the pydantic schema and the
domain layer: nothing in the domain imports the schema.
"""

from __future__ import annotations

from dataclasses import replace

from roomfit.application.catalog import FurnitureCatalog
from roomfit.application.config.schema import (
    EvaluatorOverridesConfig,
    ScenarioConfiguration,
)
from roomfit.application.modes import ModeSpec, get_mode
from roomfit.application.session import FitSession
from roomfit.domain.entities import FurnitureItem
from roomfit.domain.services import ScaleRange
from roomfit.domain.value_objects import (
    Region,
    RoomDimensions,
    SpaceBounds,
    Viewport,
)


def config_to_item(
    config: ScenarioConfiguration, catalog: FurnitureCatalog | None = None
) -> FurnitureItem | None:
    """Resolve the scenario's item.

    Raises:
        CatalogItemNotFoundError: If the preset id is not in the catalog.
    """
    if config.item is None:
        return None
    catalog = catalog or FurnitureCatalog()
    if config.item.preset is not None:
        return catalog.get(config.item.preset)
    custom = config.item.custom
    assert custom is not None
    return catalog.create_custom(
        custom.width, custom.height, custom.depth, name=custom.name
    )


def config_to_bounds(config: ScenarioConfiguration) -> SpaceBounds:
    viewport = (
        Viewport(config.viewport.width, config.viewport.height)
        if config.viewport is not None
        else None
    )
    room = (
        RoomDimensions(config.room.width, config.room.height, config.room.depth)
        if config.room is not None
        else None
    )
    return SpaceBounds(viewport=viewport, room=room)


def config_to_regions(config: ScenarioConfiguration) -> list[Region]:
    return [
        Region(
            x=r.x,
            y=r.y,
            width=r.width,
            height=r.height,
            classification=r.type,
            confidence=r.confidence,
            label=r.label,
        )
        for r in config.regions
    ]


def apply_evaluator_overrides(
    mode: ModeSpec, overrides: EvaluatorOverridesConfig | None
) -> ModeSpec:
    """Return the mode with any per-scenario evaluator overrides applied.

    Raises:
        ValueError: If the resulting scale range is empty.
    """
    if overrides is None:
        return mode
    evaluator = mode.evaluator
    changes: dict[str, object] = {}
    if overrides.max_width_ratio is not None:
        changes["max_width_ratio"] = overrides.max_width_ratio
    if overrides.max_height_ratio is not None:
        changes["max_height_ratio"] = overrides.max_height_ratio
    if overrides.compare_room_height is not None:
        changes["compare_room_height"] = overrides.compare_room_height
    if overrides.scale_min is not None or overrides.scale_max is not None:
        changes["scale_range"] = ScaleRange(
            minimum=overrides.scale_min or evaluator.scale_range.minimum,
            maximum=overrides.scale_max or evaluator.scale_range.maximum,
        )
    if not changes:
        return mode
    return replace(mode, evaluator=replace(evaluator, **changes))


def config_to_session(
    config: ScenarioConfiguration, catalog: FurnitureCatalog | None = None
) -> FitSession:
    """Build a FitSession positioned as the scenario describes.

    Placement fields left out of the scenario keep the mode's defaults.
    A scale outside the mode's range is clamped.

    Args:
        config: Validated scenario.
        catalog: Catalog used to resolve preset ids.

    Returns:
        A session whose ``result`` is the scenario's verdict.
    """
    mode = apply_evaluator_overrides(get_mode(config.mode), config.evaluator)
    session = FitSession(
        mode,
        config_to_bounds(config),
        item=config_to_item(config, catalog),
    )
    session.registry.set_regions(config_to_regions(config))

    placement = config.placement
    state = session.placement
    session.move(
        placement.x if placement.x is not None else state.x,
        placement.y if placement.y is not None else state.y,
        placement.z,
    )
    if placement.scale is not None:
        session.set_scale(placement.scale)
    return session
