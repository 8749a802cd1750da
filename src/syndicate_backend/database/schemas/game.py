"""Game round schema."""

from datetime import datetime

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from syndicate_backend.database.base import BaseSchema
from syndicate_backend.shared import GameStatus


class GameSchema(BaseSchema):
    """SQLAlchemy model for a game round."""

    __tablename__ = "games"
    __table_args__ = (
        CheckConstraint("length_days > 0", name="ck_games_length_days"),
        CheckConstraint("starting_reserve >= 0", name="ck_games_starting_reserve"),
        CheckConstraint("starting_bank >= 0", name="ck_games_starting_bank"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    length_days: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[GameStatus] = mapped_column(
        Enum(
            GameStatus,
            name="game_status",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=GameStatus.ACTIVE,
    )
    resource_set_id: Mapped[int | None] = mapped_column(
        ForeignKey("resource_sets.id", ondelete="SET NULL"), nullable=True
    )
    starting_reserve: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    starting_bank: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )
