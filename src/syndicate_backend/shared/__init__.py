"""Shared utilities, enumerations and cross-cutting helpers for the backend."""

from syndicate_backend.shared import errors
from syndicate_backend.shared.enums import (
    MARKET_CATEGORIES,
    PERSONNEL_CATEGORIES,
    GameStatus,
    ResourceCategory,
)
from syndicate_backend.shared.logging import setup_logging
from syndicate_backend.shared.rng import RandomService

__all__ = [
    "MARKET_CATEGORIES",
    "PERSONNEL_CATEGORIES",
    "GameStatus",
    "RandomService",
    "ResourceCategory",
    "errors",
    "setup_logging",
]
