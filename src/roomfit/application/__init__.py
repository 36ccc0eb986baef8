"""Application layer: catalog, viewer modes, sessions, refresh and scenarios."""

from .catalog import CatalogItemNotFoundError, FurnitureCatalog
from .modes import MODES, ModeName, ModeSpec, UnknownModeError, get_mode, list_modes
from .refresh import ObstacleRefresher
from .session import BLOCKED_HINT, FitSession, OverlayState

__all__ = [
    "BLOCKED_HINT",
    "CatalogItemNotFoundError",
    "FitSession",
    "FurnitureCatalog",
    "MODES",
    "ModeName",
    "ModeSpec",
    "ObstacleRefresher",
    "OverlayState",
    "UnknownModeError",
    "get_mode",
    "list_modes",
]
