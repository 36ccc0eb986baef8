"""Viewer mode endpoints."""

from fastapi import APIRouter

from roomfit.application.modes import ModeSpec, get_mode, list_modes
from roomfit.web.schemas.responses import (
    ErrorResponseSchema,
    ModeListSchema,
    ModeSchema,
)

router = APIRouter(prefix="/modes", tags=["modes"])


def _mode_schema(mode: ModeSpec) -> ModeSchema:
    return ModeSchema(
        name=mode.name.value,
        description=mode.description,
        use_obstacles=mode.evaluator.use_obstacles,
        use_screen_bounds=mode.evaluator.use_screen_bounds,
        use_room_bounds=mode.evaluator.use_room_bounds,
        use_size_heuristic=mode.evaluator.use_size_heuristic,
        scale_min=mode.scale_range.minimum,
        scale_max=mode.scale_range.maximum,
        default_scale=mode.default_scale,
        refresh_interval=mode.refresh_interval,
    )


@router.get("", response_model=ModeListSchema)
async def get_modes() -> ModeListSchema:
    """List viewer modes with their checks and scale ranges."""
    return ModeListSchema(modes=[_mode_schema(mode) for mode in list_modes()])


@router.get(
    "/{name}",
    response_model=ModeSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_mode_by_name(name: str) -> ModeSchema:
    """Get one viewer mode.

    Raises:
        UnknownModeError: If the name is not a mode (handled by exception handler).
    """
    return _mode_schema(get_mode(name))
