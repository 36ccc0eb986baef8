"""FastAPI dependency injection for roomfit services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from roomfit.application.catalog import FurnitureCatalog


@lru_cache(maxsize=1)
def get_catalog() -> FurnitureCatalog:
    """Get the cached FurnitureCatalog instance."""
    return FurnitureCatalog()


CatalogDep = Annotated[FurnitureCatalog, Depends(get_catalog)]
