"""Repositories for partition-scoped ledger rows.

Every query here is scoped by ``game_id``. Mutations are conditional
``UPDATE ... WHERE <precondition> RETURNING`` statements: ``None`` means the
precondition no longer held when the store applied the change.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import delete, exists, func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from syndicate_backend.database.schemas import (
    LedgerPartitionSchema,
    PlayerResourceSchema,
    PlayerSchema,
    partition_name,
)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class PartitionRepository:
    """Registry of provisioned game partitions."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def exists(self, game_id: int) -> bool:
        stmt = select(
            exists().where(LedgerPartitionSchema.game_id == game_id)
        )
        return bool(self._session.scalar(stmt))

    def lock_shared(self, game_id: int) -> LedgerPartitionSchema | None:
        """Return the registry row under a shared lock (``FOR SHARE``)."""
        stmt = (
            select(LedgerPartitionSchema)
            .where(LedgerPartitionSchema.game_id == game_id)
            .with_for_update(read=True)
        )
        return self._session.scalar(stmt)

    def add(self, game_id: int) -> LedgerPartitionSchema:
        partition = LedgerPartitionSchema(game_id=game_id, name=partition_name(game_id))
        self._session.add(partition)
        self._session.flush()
        return partition

    def delete(self, game_id: int) -> int:
        """Delete every row of the partition; return the number of players removed."""
        self._session.execute(
            delete(PlayerResourceSchema)
            .where(PlayerResourceSchema.game_id == game_id)
            .execution_options(synchronize_session=False)
        )
        removed = self._session.execute(
            delete(PlayerSchema)
            .where(PlayerSchema.game_id == game_id)
            .execution_options(synchronize_session=False)
        ).rowcount
        self._session.execute(
            delete(LedgerPartitionSchema)
            .where(LedgerPartitionSchema.game_id == game_id)
            .execution_options(synchronize_session=False)
        )
        self._session.expire_all()
        return removed


class PlayerRepository:
    """Persistence operations for :class:`PlayerSchema` within one partition."""

    def __init__(self, session: Session, game_id: int) -> None:
        self._session = session
        self._game_id = game_id

    def get(self, player_id: UUID) -> PlayerSchema | None:
        stmt = select(PlayerSchema).where(
            PlayerSchema.game_id == self._game_id, PlayerSchema.id == player_id
        )
        return self._session.scalar(stmt)

    def lock(self, player_id: UUID) -> PlayerSchema | None:
        """Return the player row locked ``FOR UPDATE``."""
        stmt = (
            select(PlayerSchema)
            .where(PlayerSchema.game_id == self._game_id, PlayerSchema.id == player_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return self._session.scalar(stmt)

    def get_by_user(self, user_id: UUID) -> PlayerSchema | None:
        stmt = select(PlayerSchema).where(
            PlayerSchema.game_id == self._game_id, PlayerSchema.user_id == user_id
        )
        return self._session.scalar(stmt)

    def get_by_name(self, name: str) -> PlayerSchema | None:
        stmt = select(PlayerSchema).where(
            PlayerSchema.game_id == self._game_id, PlayerSchema.name == name
        )
        return self._session.scalar(stmt)

    def add(self, player: PlayerSchema) -> PlayerSchema:
        player.game_id = self._game_id
        self._session.add(player)
        self._session.flush()
        self._session.refresh(player)
        return player

    def apply(
        self, player_id: UUID, *conditions: Any, **values: Any
    ) -> PlayerSchema | None:
        """Apply *values* to the player if every condition still holds."""
        stmt = (
            update(PlayerSchema)
            .where(
                PlayerSchema.game_id == self._game_id,
                PlayerSchema.id == player_id,
                *conditions,
            )
            .values(**values)
            .returning(PlayerSchema)
            .execution_options(populate_existing=True)
        )
        return self._session.scalars(stmt).one_or_none()


class PlayerResourceRepository:
    """Persistence operations for :class:`PlayerResourceSchema` within one partition."""

    def __init__(self, session: Session, game_id: int) -> None:
        self._session = session
        self._game_id = game_id

    def quantity(self, player_id: UUID, resource_id: int, *, lock: bool = False) -> int:
        """Return the owned quantity, ``0`` when no row exists."""
        stmt = select(PlayerResourceSchema.quantity).where(
            PlayerResourceSchema.game_id == self._game_id,
            PlayerResourceSchema.player_id == player_id,
            PlayerResourceSchema.resource_id == resource_id,
        )
        if lock:
            stmt = stmt.with_for_update()
        return self._session.scalar(stmt) or 0

    def list_owned(self, player_id: UUID) -> list[PlayerResourceSchema]:
        """Return holdings with a positive quantity, ordered by resource id."""
        stmt = (
            select(PlayerResourceSchema)
            .where(
                PlayerResourceSchema.game_id == self._game_id,
                PlayerResourceSchema.player_id == player_id,
                PlayerResourceSchema.quantity > 0,
            )
            .order_by(PlayerResourceSchema.resource_id)
        )
        return list(self._session.scalars(stmt))

    def increment(self, player_id: UUID, resource_id: int, quantity: int) -> int:
        """Create or increase the holding by *quantity*; return the new total."""
        dialect = self._session.get_bind().dialect.name
        try:
            insert = _UPSERT_INSERTS[dialect]
        except KeyError:
            msg = f"Upserts are not supported on the '{dialect}' dialect."
            raise NotImplementedError(msg) from None
        stmt = insert(PlayerResourceSchema).values(
            game_id=self._game_id,
            player_id=player_id,
            resource_id=resource_id,
            quantity=quantity,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[
                PlayerResourceSchema.player_id,
                PlayerResourceSchema.resource_id,
            ],
            set_={
                "quantity": PlayerResourceSchema.quantity + stmt.excluded.quantity,
                "updated_at": func.now(),
            },
        ).returning(PlayerResourceSchema.quantity)
        return self._session.execute(stmt).scalar_one()

    def decrement(self, player_id: UUID, resource_id: int, quantity: int) -> int | None:
        """Reduce the holding if it covers *quantity*; ``None`` otherwise."""
        stmt = (
            update(PlayerResourceSchema)
            .where(
                PlayerResourceSchema.game_id == self._game_id,
                PlayerResourceSchema.player_id == player_id,
                PlayerResourceSchema.resource_id == resource_id,
                PlayerResourceSchema.quantity >= quantity,
            )
            .values(quantity=PlayerResourceSchema.quantity - quantity)
            .returning(PlayerResourceSchema.quantity)
            .execution_options(synchronize_session=False)
        )
        return self._session.execute(stmt).scalar_one_or_none()
