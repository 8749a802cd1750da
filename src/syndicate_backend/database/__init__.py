"""Database connectivity helpers, schemas and repositories."""

from syndicate_backend.database.base import BaseSchema
from syndicate_backend.database.dependencies import get_database, get_session
from syndicate_backend.database.repositories import (
    CatalogRepository,
    CatalogRow,
    GameRepository,
    PartitionRepository,
    PlayerRepository,
    PlayerResourceRepository,
    UserRepository,
)
from syndicate_backend.database.schemas import (
    GameSchema,
    LedgerPartitionSchema,
    PlayerResourceSchema,
    PlayerSchema,
    ResourceAttributeValueSchema,
    ResourceSchema,
    ResourceSetItemSchema,
    ResourceSetSchema,
    ResourceTypeAttributeSchema,
    ResourceTypeSchema,
    UserSchema,
    partition_name,
)
from syndicate_backend.database.service import DatabaseService
from syndicate_backend.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "BaseSchema",
    "CatalogRepository",
    "CatalogRow",
    "DatabaseService",
    "GameRepository",
    "GameSchema",
    "LedgerPartitionSchema",
    "PartitionRepository",
    "PlayerRepository",
    "PlayerResourceRepository",
    "PlayerResourceSchema",
    "PlayerSchema",
    "ResourceAttributeValueSchema",
    "ResourceSchema",
    "ResourceSetItemSchema",
    "ResourceSetSchema",
    "ResourceTypeAttributeSchema",
    "ResourceTypeSchema",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_settings",
    "partition_name",
]
