"""Per-game ledger schemas.

Every game owns one partition, registered in ``ledger_partitions``. Players and
their resource holdings carry the partition key (``game_id``) and cascade away
with it, so dropping one game never touches another game's rows.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from syndicate_backend.database.base import BaseSchema


def partition_name(game_id: int) -> str:
    """Return the deterministic partition handle for *game_id*."""
    return f"game_{game_id}"


class LedgerPartitionSchema(BaseSchema):
    """Registry row for a provisioned game partition."""

    __tablename__ = "ledger_partitions"

    game_id: Mapped[int] = mapped_column(
        ForeignKey("games.id", ondelete="CASCADE"), primary_key=True
    )
    name: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class PlayerSchema(BaseSchema):
    """One user's economic state inside one game."""

    __tablename__ = "players"
    __table_args__ = (
        UniqueConstraint("game_id", "user_id", name="uq_players_game_user"),
        UniqueConstraint("game_id", "name", name="uq_players_game_name"),
        CheckConstraint("turns_active >= 0", name="ck_players_turns_active"),
        CheckConstraint("turns_reserve >= 0", name="ck_players_turns_reserve"),
        CheckConstraint("turns_transferred >= 0", name="ck_players_turns_transferred"),
        CheckConstraint("money_cash >= 0", name="ck_players_money_cash"),
        CheckConstraint("money_bank >= 0", name="ck_players_money_bank"),
        Index("ix_players_user_id", "user_id"),
        Index("ix_players_location_id", "location_id"),
    )

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    game_id: Mapped[int] = mapped_column(
        ForeignKey("ledger_partitions.game_id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    location_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    turns_active: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    turns_reserve: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    turns_transferred: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    money_cash: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    money_bank: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class PlayerResourceSchema(BaseSchema):
    """Quantity of a catalog resource owned by a player; kept at zero."""

    __tablename__ = "player_resources"
    __table_args__ = (
        UniqueConstraint("player_id", "resource_id", name="uq_player_resources_pair"),
        CheckConstraint("quantity >= 0", name="ck_player_resources_quantity"),
        Index("ix_player_resources_player_id", "player_id"),
        Index("ix_player_resources_resource_id", "resource_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_id: Mapped[int] = mapped_column(
        ForeignKey("ledger_partitions.game_id", ondelete="CASCADE"), nullable=False
    )
    player_id: Mapped[UUID] = mapped_column(
        ForeignKey("players.id", ondelete="CASCADE"), nullable=False
    )
    resource_id: Mapped[int] = mapped_column(
        ForeignKey("resources.id", ondelete="CASCADE"), nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
