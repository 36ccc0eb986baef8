"""Pydantic schemas for the REST API."""

from roomfit.web.schemas.common import (
    DimensionsSchema,
    FurnitureItemSchema,
    RectSchema,
    RegionSchema,
    ScenarioBody,
)
from roomfit.web.schemas.requests import (
    CustomItemRequest,
    EvaluateRequest,
    ScenarioValidateRequest,
)
from roomfit.web.schemas.responses import (
    CatalogListSchema,
    ErrorResponseSchema,
    EvaluateResponseSchema,
    FitResultSchema,
    ModeListSchema,
    ModeSchema,
    OverlaySchema,
    ValidationResultSchema,
)

__all__ = [
    # Common
    "DimensionsSchema",
    "FurnitureItemSchema",
    "RectSchema",
    "RegionSchema",
    "ScenarioBody",
    # Requests
    "CustomItemRequest",
    "EvaluateRequest",
    "ScenarioValidateRequest",
    # Responses
    "CatalogListSchema",
    "ErrorResponseSchema",
    "EvaluateResponseSchema",
    "FitResultSchema",
    "ModeListSchema",
    "ModeSchema",
    "OverlaySchema",
    "ValidationResultSchema",
]
