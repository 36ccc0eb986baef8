"""Common Pydantic schemas shared across requests and responses."""

from typing import Any

from pydantic import BaseModel, Field

from roomfit.domain.entities import FurnitureItem
from roomfit.domain.value_objects import Rect, Region, RegionClassification


class DimensionsSchema(BaseModel):
    """Furniture dimensions in centimeters."""

    width: float = Field(..., gt=0, description="Width in cm")
    height: float = Field(..., gt=0, description="Height in cm")
    depth: float = Field(..., gt=0, description="Depth in cm")


class FurnitureItemSchema(BaseModel):
    """A catalog or custom furniture item."""

    id: str = Field(..., description="Item identifier")
    name: str = Field(..., description="Display name")
    category: str = Field(..., description="sofa, table, shelf or custom")
    dimensions: DimensionsSchema
    color: str = Field(..., description="Placeholder color as #RRGGBB")

    @classmethod
    def from_item(cls, item: FurnitureItem) -> "FurnitureItemSchema":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category.value,
            dimensions=DimensionsSchema(
                width=item.dimensions.width,
                height=item.dimensions.height,
                depth=item.dimensions.depth,
            ),
            color=item.color,
        )


class RegionSchema(BaseModel):
    """A detected region in screen coordinates."""

    x: float
    y: float
    width: float
    height: float
    type: RegionClassification
    confidence: float
    label: str | None = None

    @classmethod
    def from_region(cls, region: Region) -> "RegionSchema":
        return cls(
            x=region.x,
            y=region.y,
            width=region.width,
            height=region.height,
            type=region.classification,
            confidence=region.confidence,
            label=region.label,
        )


class RectSchema(BaseModel):
    """Axis-aligned rectangle."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_rect(cls, rect: Rect) -> "RectSchema":
        return cls(left=rect.left, top=rect.top, right=rect.right, bottom=rect.bottom)


class ScenarioBody(BaseModel):
    """Wrapper for a scenario document sent in a request body."""

    config: dict[str, Any] = Field(..., description="Scenario configuration JSON")
