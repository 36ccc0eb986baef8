"""Scenario evaluation endpoint."""

from fastapi import APIRouter, HTTPException

from roomfit.application.config import config_to_session, load_config_from_dict
from roomfit.domain.services import OBSTACLE_CONFIDENCE_THRESHOLD
from roomfit.web.dependencies import CatalogDep
from roomfit.web.schemas.common import FurnitureItemSchema, RectSchema
from roomfit.web.schemas.requests import EvaluateRequest
from roomfit.web.schemas.responses import (
    EvaluateResponseSchema,
    FitResultSchema,
    OverlaySchema,
)

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponseSchema)
async def evaluate_scenario(
    request: EvaluateRequest,
    catalog: CatalogDep,
) -> EvaluateResponseSchema:
    """Evaluate whether the scenario's item fits at its placement.

    Raises:
        ConfigError: If the scenario is invalid (handled by exception handler).
        CatalogItemNotFoundError: If the preset id is unknown (handled by exception handler).
        HTTPException: If the evaluator overrides are inconsistent with the mode.
    """
    config = load_config_from_dict(request.config)
    try:
        session = config_to_session(config, catalog)
    except ValueError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": str(e), "error_type": "invalid_overrides"},
        ) from e

    snapshot = session.placement.snapshot()
    overlay = session.overlay()
    ignored = 0
    if session.mode.evaluator.use_obstacles:
        ignored = sum(
            1
            for region in session.registry.regions
            if region.is_obstacle and region.confidence <= OBSTACLE_CONFIDENCE_THRESHOLD
        )
    return EvaluateResponseSchema(
        mode=session.mode.name.value,
        item=FurnitureItemSchema.from_item(session.item) if session.item else None,
        placement={
            "x": snapshot.x,
            "y": snapshot.y,
            "z": snapshot.z,
            "scale": snapshot.scale,
        },
        overlay=(
            OverlaySchema(
                rect=RectSchema.from_rect(overlay.rect),
                border_color=overlay.border_color,
                scale_percent=overlay.scale_percent,
            )
            if overlay is not None
            else None
        ),
        result=FitResultSchema.from_result(session.result),
        ignored_regions=ignored,
    )
