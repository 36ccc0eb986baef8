"""Scenario validation endpoint."""

from fastapi import APIRouter

from roomfit.application.config import (
    ConfigError,
    load_config_from_dict,
    validate_config,
)
from roomfit.web.dependencies import CatalogDep
from roomfit.web.schemas.requests import ScenarioValidateRequest
from roomfit.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_scenario(
    request: ScenarioValidateRequest,
    catalog: CatalogDep,
) -> ValidationResultSchema:
    """Validate a scenario without evaluating it.

    Schema errors are reported in the response body rather than as an
    error status, so clients can show them next to the offending fields.
    """
    try:
        config = load_config_from_dict(request.config)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"message": d["message"], "path": d["path"]} for d in e.details
            ],
        )

    result = validate_config(config, catalog)
    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[{"message": e.message, "path": e.path} for e in result.errors],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
