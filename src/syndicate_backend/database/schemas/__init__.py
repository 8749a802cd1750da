"""SQLAlchemy schemas for the global catalog and per-game ledgers."""

from syndicate_backend.database.schemas.catalog import (
    ResourceAttributeValueSchema,
    ResourceSchema,
    ResourceSetItemSchema,
    ResourceSetSchema,
    ResourceTypeAttributeSchema,
    ResourceTypeSchema,
)
from syndicate_backend.database.schemas.game import GameSchema
from syndicate_backend.database.schemas.ledger import (
    LedgerPartitionSchema,
    PlayerResourceSchema,
    PlayerSchema,
    partition_name,
)
from syndicate_backend.database.schemas.user import UserSchema

__all__ = [
    "GameSchema",
    "LedgerPartitionSchema",
    "PlayerResourceSchema",
    "PlayerSchema",
    "ResourceAttributeValueSchema",
    "ResourceSchema",
    "ResourceSetItemSchema",
    "ResourceSetSchema",
    "ResourceTypeAttributeSchema",
    "ResourceTypeSchema",
    "UserSchema",
    "partition_name",
]
