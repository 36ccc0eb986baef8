"""Furniture catalog with bundled presets and custom items.

This module provides the FurnitureCatalog class for listing the bundled
preset items and for building custom items from user-entered dimensions.
"""

from __future__ import annotations

import json
import logging
import math
import re
import uuid
from functools import cached_property
from importlib import resources
from typing import Any

from roomfit.domain.entities import FurnitureCategory, FurnitureItem
from roomfit.domain.value_objects import Dimensions

logger = logging.getLogger(__name__)

# Fallbacks for custom dimensions that are missing, non-numeric or non-positive.
DEFAULT_CUSTOM_WIDTH = 100.0
DEFAULT_CUSTOM_HEIGHT = 100.0
DEFAULT_CUSTOM_DEPTH = 50.0
CUSTOM_ITEM_NAME = "Custom Furniture"
CUSTOM_ITEM_COLOR = "#4CAF50"


class CatalogItemNotFoundError(Exception):
    """Raised when a requested catalog item does not exist."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Catalog item not found: {item_id}")


def parse_dimension(value: str | float | None, default: float) -> float:
    """Parse a user-entered dimension, falling back to a default.

    Leading numeric text is accepted ("120cm" parses as 120). Anything
    that does not yield a positive finite number gives the default.

    Args:
        value: Raw input from a text field, or an already numeric value.
        default: Value used when the input is unusable.

    Returns:
        A positive dimension in centimeters.

    Examples:
        >>> parse_dimension("120", 100.0)
        120.0
        >>> parse_dimension("abc", 100.0)
        100.0
        >>> parse_dimension("0", 50.0)
        50.0
    """
    if value is None:
        return default
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        number = _leading_float(value.strip())
        if number is None:
            return default
    if not math.isfinite(number) or number <= 0:
        return default
    return number


_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_float(text: str) -> float | None:
    # Numeric prefix, e.g. "12.5 cm" -> 12.5
    match = _LEADING_NUMBER.match(text)
    return float(match.group()) if match else None


class FurnitureCatalog:
    """Catalog of furniture presets.

    Presets are read once from the bundled ``presets.json`` package data.

    Example:
        catalog = FurnitureCatalog()
        for item in catalog.list_items():
            print(f"{item.name}: {item.dimensions.width} cm wide")

        table = catalog.get("table-1")
        custom = catalog.create_custom("180", "90", "abc")  # depth falls back to 50
    """

    def __init__(self, data_package: str = "roomfit.application.catalog.data") -> None:
        """Initialize the catalog.

        Args:
            data_package: Package holding presets.json.
        """
        self._data_package = data_package

    @cached_property
    def _presets(self) -> dict[str, FurnitureItem]:
        content = (
            resources.files(self._data_package)
            .joinpath("presets.json")
            .read_text(encoding="utf-8")
        )
        items = [_item_from_dict(entry) for entry in json.loads(content)]
        logger.debug(f"Loaded {len(items)} furniture presets")
        return {item.id: item for item in items}

    def list_items(self) -> list[FurnitureItem]:
        """List all presets in catalog order."""
        return list(self._presets.values())

    def get(self, item_id: str) -> FurnitureItem:
        """Get a preset by id.

        Raises:
            CatalogItemNotFoundError: If no preset has this id.
        """
        try:
            return self._presets[item_id]
        except KeyError:
            raise CatalogItemNotFoundError(item_id) from None

    def find_by_name(self, name: str) -> FurnitureItem | None:
        """Find a preset by display name, ignoring case."""
        wanted = name.strip().lower()
        for item in self._presets.values():
            if item.name.lower() == wanted:
                return item
        return None

    def item_exists(self, item_id: str) -> bool:
        return item_id in self._presets

    def create_custom(
        self,
        width: str | float | None,
        height: str | float | None,
        depth: str | float | None,
        name: str = CUSTOM_ITEM_NAME,
        source_image: Any = None,
    ) -> FurnitureItem:
        """Build a custom item from user-entered dimensions.

        Every call returns a fresh item with its own id.

        Args:
            width: Width text or number in centimeters.
            height: Height text or number in centimeters.
            depth: Depth text or number in centimeters.
            name: Display name.
            source_image: Opaque handle to an uploaded image.

        Returns:
            The new custom FurnitureItem.
        """
        dimensions = Dimensions(
            width=parse_dimension(width, DEFAULT_CUSTOM_WIDTH),
            height=parse_dimension(height, DEFAULT_CUSTOM_HEIGHT),
            depth=parse_dimension(depth, DEFAULT_CUSTOM_DEPTH),
        )
        return FurnitureItem(
            id=f"custom-{uuid.uuid4().hex[:8]}",
            name=name or CUSTOM_ITEM_NAME,
            category=FurnitureCategory.CUSTOM,
            dimensions=dimensions,
            color=CUSTOM_ITEM_COLOR,
            source_image=source_image,
        )


def _item_from_dict(entry: dict[str, Any]) -> FurnitureItem:
    dims = entry["dimensions"]
    return FurnitureItem(
        id=entry["id"],
        name=entry["name"],
        category=FurnitureCategory(entry["category"]),
        dimensions=Dimensions(
            width=float(dims["width"]),
            height=float(dims["height"]),
            depth=float(dims["depth"]),
        ),
        color=entry.get("color", "#808080"),
    )
