"""Scenario configuration schema.

Pydantic models describing a fit-check scenario: which mode to evaluate in,
which item, where it is placed, the viewport and room it is checked against,
and the detected regions. Scenario files are JSON documents matching
ScenarioConfiguration.
"""

from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from roomfit.application.modes import ModeName
from roomfit.domain.value_objects import RegionClassification

# Supported schema versions for scenario files
# Version 1.0: Initial schema
# Version 1.1: Added evaluator overrides and region labels
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})

# Alias so scenario files read "type": "obstacle" | "clear"
RegionTypeConfig = RegionClassification

# Raw text typed into a dimension field, e.g. "120 cm"
DimensionText = Annotated[str, Field(max_length=32)]


class CustomItemConfig(BaseModel):
    """Custom furniture dimensions in centimeters.

    Values may be numbers or the raw text a user typed; text that does not
    parse falls back to the catalog defaults (100 x 100 x 50).
    """

    model_config = ConfigDict(extra="forbid")

    width: float | DimensionText | None = None
    height: float | DimensionText | None = None
    depth: float | DimensionText | None = None
    name: str = Field(default="Custom Furniture", min_length=1, max_length=80)


class ItemConfig(BaseModel):
    """Selected item: a catalog preset id or custom dimensions, not both."""

    model_config = ConfigDict(extra="forbid")

    preset: str | None = Field(default=None, min_length=1)
    custom: CustomItemConfig | None = None

    @model_validator(mode="after")
    def validate_preset_or_custom(self) -> "ItemConfig":
        """Ensure exactly one of 'preset' or 'custom' is given."""
        if (self.preset is None) == (self.custom is None):
            raise ValueError("Specify exactly one of 'preset' or 'custom'")
        return self


class PlacementConfig(BaseModel):
    """Overlay placement. Omitted fields use the mode's defaults."""

    model_config = ConfigDict(extra="forbid")

    x: float | None = None
    y: float | None = None
    z: float = 0.0
    scale: float | None = Field(default=None, gt=0, description="Scale multiplier")


class ViewportConfig(BaseModel):
    """Screen size in screen units."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=10000)
    height: float = Field(..., gt=0, le=10000)


class RoomConfig(BaseModel):
    """Room dimensions in centimeters."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=10000, description="Room width in cm")
    height: float = Field(..., gt=0, le=10000, description="Ceiling height in cm")
    depth: float = Field(..., gt=0, le=10000, description="Room depth in cm")


class RegionConfig(BaseModel):
    """A detected region in screen coordinates.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Region width (zero allowed; a zero-size region never collides).
        height: Region height.
        type: obstacle or clear.
        confidence: Detector confidence in [0, 1].
        label: Optional label such as "person" or "floor".
    """

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    type: RegionTypeConfig = RegionTypeConfig.OBSTACLE
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    label: str | None = None


class EvaluatorOverridesConfig(BaseModel):
    """Per-scenario overrides of the mode's evaluator parameters."""

    model_config = ConfigDict(extra="forbid")

    max_width_ratio: float | None = Field(default=None, gt=0, le=1)
    max_height_ratio: float | None = Field(default=None, gt=0, le=1)
    compare_room_height: bool | None = None
    scale_min: float | None = Field(default=None, gt=0)
    scale_max: float | None = Field(default=None, gt=0)

    @model_validator(mode="after")
    def validate_scale_bounds(self) -> "EvaluatorOverridesConfig":
        """Ensure scale_min does not exceed scale_max."""
        if (
            self.scale_min is not None
            and self.scale_max is not None
            and self.scale_min > self.scale_max
        ):
            raise ValueError("scale_min must not exceed scale_max")
        return self


class ScenarioConfiguration(BaseModel):
    """Root model for a fit-check scenario file.

    Attributes:
        schema_version: Scenario schema version.
        mode: Viewer mode whose checks apply.
        item: Selected item, or None for no selection.
        placement: Overlay placement.
        viewport: Screen size, for screen-space modes.
        room: Room dimensions, for room modes.
        regions: Detected regions.
        evaluator: Optional overrides of the mode's parameters.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0")
    mode: ModeName
    item: ItemConfig | None = None
    placement: PlacementConfig = Field(default_factory=PlacementConfig)
    viewport: ViewportConfig | None = None
    room: RoomConfig | None = None
    regions: list[RegionConfig] = Field(default_factory=list, max_length=500)
    evaluator: EvaluatorOverridesConfig | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        """Ensure the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version: {v}. Supported versions: {supported}"
            )
        return v
