"""Lifecycle of the isolated per-game ledger partition.

A partition is registered when its game is created and removed, with every
player and holding in it, when the game is deleted. Both run inside the
caller's transaction so the game row and its partition succeed or fail
together. Economy operations call :meth:`TenantPartitionManager.require_partition`,
which holds a shared lock on the registry row so a concurrent drop waits for
in-flight operations and later ones see the partition as gone.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from syndicate_backend.database import PartitionRepository, partition_name
from syndicate_backend.shared.errors import PartitionError, PartitionNotFoundError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class TenantPartitionManager:
    """Provision, drop and check game partitions."""

    def ensure_partition(self, *, session: Session, game_id: int) -> str:
        """Create the partition for *game_id* unless it already exists."""
        repository = PartitionRepository(session)
        name = partition_name(game_id)
        try:
            if repository.exists(game_id):
                return name
            repository.add(game_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to provision partition %s", name)
            msg = f"Failed to provision data partition for game {game_id}"
            raise PartitionError(msg, game_id=game_id) from exc
        logger.info("Provisioned partition %s", name)
        return name

    def drop_partition(self, *, session: Session, game_id: int) -> None:
        """Irrecoverably delete the partition and all rows it contains."""
        repository = PartitionRepository(session)
        name = partition_name(game_id)
        try:
            if not repository.exists(game_id):
                logger.info("Partition %s already absent", name)
                return
            removed = repository.delete(game_id)
        except SQLAlchemyError as exc:
            logger.exception("Failed to drop partition %s", name)
            msg = f"Failed to drop data partition for game {game_id}"
            raise PartitionError(msg, game_id=game_id) from exc
        logger.info("Dropped partition %s (%d players)", name, removed)

    def partition_exists(self, *, session: Session, game_id: int) -> bool:
        """Return whether the partition for *game_id* is provisioned."""
        return PartitionRepository(session).exists(game_id)

    def require_partition(self, *, session: Session, game_id: int) -> None:
        """Guard an economy call; missing partitions are terminal."""
        if PartitionRepository(session).lock_shared(game_id) is None:
            raise PartitionNotFoundError(game_id)


__all__ = ["TenantPartitionManager"]
