"""Domain entities for furniture fit checking."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .value_objects import Dimensions


class FurnitureCategory(str, Enum):
    """Catalog category of a furniture item."""

    SOFA = "sofa"
    TABLE = "table"
    SHELF = "shelf"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FurnitureItem:
    """A furniture item with real-world dimensions.

    Identity is ``id``; every other field is descriptive. Items are never
    mutated after creation: a custom item is a fresh instance each time
    one is created.

    Attributes:
        id: Unique identifier (e.g. "table-1", "custom-3f2a9c1b").
        name: Display name.
        category: Catalog category.
        dimensions: Physical size in centimeters.
        color: Display color as a hex string.
        source_image: Opaque handle to a user-supplied image, if any.
    """

    id: str
    name: str
    category: FurnitureCategory
    dimensions: Dimensions
    color: str = "#808080"
    source_image: Any = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Furniture id must not be empty")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FurnitureItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
