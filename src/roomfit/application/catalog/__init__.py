"""Furniture catalog: bundled presets and custom items."""

from .manager import (
    DEFAULT_CUSTOM_DEPTH,
    DEFAULT_CUSTOM_HEIGHT,
    DEFAULT_CUSTOM_WIDTH,
    CatalogItemNotFoundError,
    FurnitureCatalog,
    parse_dimension,
)

__all__ = [
    "CatalogItemNotFoundError",
    "DEFAULT_CUSTOM_DEPTH",
    "DEFAULT_CUSTOM_HEIGHT",
    "DEFAULT_CUSTOM_WIDTH",
    "FurnitureCatalog",
    "parse_dimension",
]
