"""Furniture catalog endpoints."""

from fastapi import APIRouter, status

from roomfit.web.dependencies import CatalogDep
from roomfit.web.schemas.common import FurnitureItemSchema
from roomfit.web.schemas.requests import CustomItemRequest
from roomfit.web.schemas.responses import CatalogListSchema, ErrorResponseSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogListSchema)
async def list_items(catalog: CatalogDep) -> CatalogListSchema:
    """List all furniture presets."""
    return CatalogListSchema(
        items=[FurnitureItemSchema.from_item(item) for item in catalog.list_items()]
    )


@router.post(
    "/custom",
    response_model=FurnitureItemSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_custom_item(
    request: CustomItemRequest,
    catalog: CatalogDep,
) -> FurnitureItemSchema:
    """Build a custom item from entered dimensions.

    The item is returned, not stored; pass its dimensions in a scenario's
    ``item.custom`` to evaluate it.
    """
    item = catalog.create_custom(
        request.width, request.height, request.depth, name=request.name
    )
    return FurnitureItemSchema.from_item(item)


@router.get(
    "/{item_id}",
    response_model=FurnitureItemSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_item(item_id: str, catalog: CatalogDep) -> FurnitureItemSchema:
    """Get one preset by id.

    Raises:
        CatalogItemNotFoundError: If the id is unknown (handled by exception handler).
    """
    return FurnitureItemSchema.from_item(catalog.get(item_id))
