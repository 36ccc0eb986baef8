"""Request schemas for API endpoints."""

from pydantic import BaseModel, Field

from roomfit.application.config.schema import DimensionText
from roomfit.web.schemas.common import ScenarioBody


class CustomItemRequest(BaseModel):
    """Request for building a custom furniture item.

    Dimensions may be numbers or raw text; unusable values fall back to
    the catalog defaults.
    """

    width: float | DimensionText | None = Field(
        default=None, description="Width in cm"
    )
    height: float | DimensionText | None = Field(
        default=None, description="Height in cm"
    )
    depth: float | DimensionText | None = Field(
        default=None, description="Depth in cm"
    )
    name: str = Field(default="Custom Furniture", min_length=1, max_length=80)


class EvaluateRequest(ScenarioBody):
    """Request for evaluating a scenario."""


class ScenarioValidateRequest(ScenarioBody):
    """Request for validating a scenario."""
