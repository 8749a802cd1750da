"""Shared enumerations used across the backend."""

from enum import StrEnum


class GameStatus(StrEnum):
    """Lifecycle stages of a game round."""

    ACTIVE = "active"
    CLOSING = "closing"
    COMPLETE = "complete"


class ResourceCategory(StrEnum):
    """Catalog resource type names the economy engine trades in."""

    ITEMS = "Items"
    TRANSPORTS = "Transports"
    VEHICLES = "Vehicles"
    WEAPONS = "Weapons"
    ASSOCIATES = "Associates"
    ENFORCERS = "Enforcers"


MARKET_CATEGORIES: tuple[ResourceCategory, ...] = (
    ResourceCategory.ITEMS,
    ResourceCategory.TRANSPORTS,
    ResourceCategory.VEHICLES,
    ResourceCategory.WEAPONS,
)

PERSONNEL_CATEGORIES: tuple[ResourceCategory, ...] = (
    ResourceCategory.ASSOCIATES,
    ResourceCategory.ENFORCERS,
)
