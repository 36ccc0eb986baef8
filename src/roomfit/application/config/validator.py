"""Validation structures and scenario advisory checks.

Pydantic already enforces the shape of a scenario. The checks here catch
scenarios that are well-formed but will not behave as the author probably
expects: a preset id that does not exist, a screen mode with no viewport,
regions the registry will ignore, and similar.
"""

from dataclasses import dataclass, field
from typing import Any

from roomfit.application.catalog import FurnitureCatalog, parse_dimension
from roomfit.application.config.schema import ScenarioConfiguration
from roomfit.application.modes import get_mode
from roomfit.domain.services import OBSTACLE_CONFIDENCE_THRESHOLD
from roomfit.domain.value_objects import RegionClassification


@dataclass
class ValidationIssue:
    """One problem found in a scenario, located by its JSON path."""

    path: str
    message: str
    value: Any = None
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Errors block a scenario from being used; warnings only advise.

    ``exit_code`` maps the outcome onto the validate command's exit
    status: 1 for errors, 2 for warnings only, 0 when clean.
    """

    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> None:
        self.errors.append(ValidationIssue(path, message, value=value))

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> None:
        self.warnings.append(ValidationIssue(path, message, suggestion=suggestion))

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_item(
    config: ScenarioConfiguration, catalog: FurnitureCatalog
) -> ValidationResult:
    """Check that the selected item can be resolved."""
    result = ValidationResult()
    if config.item is None:
        result.add_warning(
            path="item",
            message="No item selected; every placement trivially fits",
            suggestion="Set item.preset to a catalog id or give item.custom dimensions",
        )
        return result

    if config.item.preset is not None and not catalog.item_exists(config.item.preset):
        available = ", ".join(item.id for item in catalog.list_items())
        result.add_error(
            path="item.preset",
            message=f"Unknown catalog item '{config.item.preset}'. Available: {available}",
            value=config.item.preset,
        )

    custom = config.item.custom
    if custom is not None:
        for axis in ("width", "height", "depth"):
            raw = getattr(custom, axis)
            if raw is None or _is_usable_number(raw):
                continue
            result.add_warning(
                path=f"item.custom.{axis}",
                message=f"Unusable {axis} {raw!r}; the default will be used",
            )
    return result


def _is_usable_number(value: float | str) -> bool:
    return parse_dimension(value, default=-1.0) > 0


def check_mode_inputs(config: ScenarioConfiguration) -> ValidationResult:
    """Check that the scenario provides the spaces its mode checks against."""
    result = ValidationResult()
    mode = get_mode(config.mode)
    evaluator = mode.evaluator
    needs_viewport = evaluator.use_screen_bounds or evaluator.use_size_heuristic

    if needs_viewport and config.viewport is None:
        result.add_warning(
            path="viewport",
            message=f"Mode '{mode.name.value}' checks screen bounds but no viewport is given",
            suggestion="Add viewport.width and viewport.height",
        )
    if evaluator.use_room_bounds and config.room is None:
        result.add_warning(
            path="room",
            message=f"Mode '{mode.name.value}' compares against a room but no room is given",
            suggestion="Add room.width, room.height and room.depth in centimeters",
        )
    if config.regions and not evaluator.use_obstacles:
        result.add_warning(
            path="regions",
            message=f"Mode '{mode.name.value}' ignores detected regions",
        )
    if config.placement.z != 0 and not mode.uses_room_space:
        result.add_warning(
            path="placement.z",
            message=f"Mode '{mode.name.value}' ignores placement.z",
        )

    scale = config.placement.scale
    scale_range = evaluator.scale_range
    overrides = config.evaluator
    if overrides is not None:
        low = overrides.scale_min or scale_range.minimum
        high = overrides.scale_max or scale_range.maximum
        if low > high:
            result.add_error(
                path="evaluator",
                message=f"Scale range is empty ({low} > {high})",
            )
            return result
    else:
        low, high = scale_range.minimum, scale_range.maximum
    if scale is not None and not low <= scale <= high:
        result.add_warning(
            path="placement.scale",
            message=f"Scale {scale} is outside the mode's range {low}-{high} and will be clamped",
        )
    return result


def check_regions(config: ScenarioConfiguration) -> ValidationResult:
    """Flag regions that will never affect a verdict."""
    result = ValidationResult()
    for i, region in enumerate(config.regions):
        path = f"regions[{i}]"
        if region.confidence <= OBSTACLE_CONFIDENCE_THRESHOLD:
            result.add_warning(
                path=f"{path}.confidence",
                message=(
                    f"Confidence {region.confidence} is not above "
                    f"{OBSTACLE_CONFIDENCE_THRESHOLD}; the region is ignored"
                ),
            )
        if region.width == 0 or region.height == 0:
            result.add_warning(
                path=path,
                message="Zero-size region never overlaps anything",
            )
        elif config.viewport is not None and (
            region.x >= config.viewport.width
            or region.y >= config.viewport.height
            or region.x + region.width <= 0
            or region.y + region.height <= 0
        ):
            kind = "Obstacle" if region.type == RegionClassification.OBSTACLE else "Clear region"
            result.add_warning(
                path=path,
                message=f"{kind} lies entirely outside the viewport",
            )
    return result


def validate_config(
    config: ScenarioConfiguration, catalog: FurnitureCatalog | None = None
) -> ValidationResult:
    """Perform full validation of a scenario.

    Args:
        config: A ScenarioConfiguration instance (already validated by Pydantic)
        catalog: Catalog used to resolve preset ids

    Returns:
        ValidationResult containing any errors or warnings
    """
    catalog = catalog or FurnitureCatalog()
    result = ValidationResult()
    result.merge(check_item(config, catalog))
    result.merge(check_mode_inputs(config))
    result.merge(check_regions(config))
    return result
