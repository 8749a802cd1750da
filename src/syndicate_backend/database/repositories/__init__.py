"""Repositories encapsulating queries against the ledger store."""

from syndicate_backend.database.repositories.catalog import CatalogRepository, CatalogRow
from syndicate_backend.database.repositories.game import GameRepository
from syndicate_backend.database.repositories.ledger import (
    PartitionRepository,
    PlayerRepository,
    PlayerResourceRepository,
)
from syndicate_backend.database.repositories.user import UserRepository

__all__ = [
    "CatalogRepository",
    "CatalogRow",
    "GameRepository",
    "PartitionRepository",
    "PlayerRepository",
    "PlayerResourceRepository",
    "UserRepository",
]
