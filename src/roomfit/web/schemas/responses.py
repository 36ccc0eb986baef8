"""Response schemas for API endpoints."""

from typing import Any

from pydantic import BaseModel, Field

from roomfit.domain.value_objects import FitResult
from roomfit.web.schemas.common import FurnitureItemSchema, RectSchema, RegionSchema


class CatalogListSchema(BaseModel):
    """Response for catalog listing."""

    items: list[FurnitureItemSchema] = Field(..., description="Catalog presets")


class ModeSchema(BaseModel):
    """One viewer mode."""

    name: str
    description: str
    use_obstacles: bool
    use_screen_bounds: bool
    use_room_bounds: bool
    use_size_heuristic: bool
    scale_min: float
    scale_max: float
    default_scale: float
    refresh_interval: float | None = None


class ModeListSchema(BaseModel):
    """Response for mode listing."""

    modes: list[ModeSchema]


class FitResultSchema(BaseModel):
    """A fit verdict."""

    fits: bool = Field(..., description="Whether the placement is usable")
    code: str = Field(..., description="Check that decided the verdict")
    reason: str = Field(..., description="Human-readable reason")
    detail: str = Field(default="", description="Secondary text")
    border_color: str = Field(..., description="Overlay border color")
    blocking_region: RegionSchema | None = None

    @classmethod
    def from_result(cls, result: FitResult) -> "FitResultSchema":
        return cls(
            fits=result.fits,
            code=result.code.value,
            reason=result.reason,
            detail=result.detail,
            border_color=result.border_color,
            blocking_region=(
                RegionSchema.from_region(result.blocking_region)
                if result.blocking_region is not None
                else None
            ),
        )


class OverlaySchema(BaseModel):
    """Overlay geometry for the selected item."""

    rect: RectSchema
    border_color: str
    scale_percent: int


class EvaluateResponseSchema(BaseModel):
    """Response for scenario evaluation."""

    mode: str
    item: FurnitureItemSchema | None = None
    placement: dict[str, float] = Field(..., description="x, y, z and scale")
    overlay: OverlaySchema | None = None
    result: FitResultSchema
    ignored_regions: int = Field(
        default=0,
        description=(
            "Obstacle regions skipped for being at or below the confidence "
            "threshold; always 0 in modes that do not check obstacles"
        ),
    )


class ValidationResultSchema(BaseModel):
    """Response for scenario validation."""

    is_valid: bool = Field(..., description="Whether the scenario is valid")
    errors: list[dict[str, Any]] = Field(default_factory=list)
    warnings: list[dict[str, Any]] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
