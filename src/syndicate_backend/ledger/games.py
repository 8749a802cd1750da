"""Game lifecycle: rounds, their partitions, and the players who join them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import select

from syndicate_backend.database import (
    GameRepository,
    GameSchema,
    PlayerRepository,
    PlayerSchema,
    UserRepository,
)
from syndicate_backend.ledger.models import PlayerState
from syndicate_backend.ledger.partitions import TenantPartitionManager
from syndicate_backend.shared import GameStatus
from syndicate_backend.shared.errors import (
    DuplicatePlayerError,
    GameNotFoundError,
    PlayerNotFoundError,
    UserNotFoundError,
    ValidationError,
)

if TYPE_CHECKING:
    from datetime import datetime
    from uuid import UUID

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameDraft:
    """Attributes an administrator supplies when creating a game."""

    start_date: datetime
    length_days: int
    status: GameStatus = GameStatus.ACTIVE
    resource_set_id: int | None = None
    starting_reserve: int = 0
    starting_bank: int = 0


class GameService:
    """Create and delete games together with their partitions; admit players."""

    def __init__(self, *, partitions: TenantPartitionManager | None = None) -> None:
        self._partitions = partitions or TenantPartitionManager()

    def create_game(self, *, session: Session, draft: GameDraft) -> GameSchema:
        """Insert the game and provision its partition in the same transaction."""
        if draft.length_days <= 0:
            msg = "length_days must be positive"
            raise ValidationError(msg, length_days=draft.length_days)
        if draft.starting_reserve < 0 or draft.starting_bank < 0:
            msg = "Starting allocations must not be negative"
            raise ValidationError(
                msg,
                starting_reserve=draft.starting_reserve,
                starting_bank=draft.starting_bank,
            )
        game = GameRepository(session).add(
            GameSchema(
                start_date=draft.start_date,
                length_days=draft.length_days,
                status=draft.status,
                resource_set_id=draft.resource_set_id,
                starting_reserve=draft.starting_reserve,
                starting_bank=draft.starting_bank,
            )
        )
        self._partitions.ensure_partition(session=session, game_id=game.id)
        logger.info("Created game %s", game.id)
        return game

    def delete_game(self, *, session: Session, game_id: int) -> None:
        """Drop the partition and delete the game in the same transaction."""
        repository = GameRepository(session)
        if repository.get_by_id(game_id) is None:
            raise GameNotFoundError(game_id)
        self._partitions.drop_partition(session=session, game_id=game_id)
        repository.delete(game_id)
        logger.info("Deleted game %s", game_id)

    def get_game(self, *, session: Session, game_id: int) -> GameSchema:
        game = GameRepository(session).get_by_id(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    def list_games(self, *, session: Session) -> list[GameSchema]:
        return GameRepository(session).list_all()

    def join_game(
        self,
        *,
        session: Session,
        game_id: int,
        user_id: UUID,
        name: str,
        location_id: int | None = None,
    ) -> PlayerState:
        """Create the user's player in *game_id* with the game's starting allocations."""
        game = self.get_game(session=session, game_id=game_id)
        if game.status is GameStatus.COMPLETE:
            msg = "Game is complete and no longer accepts players"
            raise ValidationError(msg, game_id=game_id, status=game.status.value)
        self._partitions.require_partition(session=session, game_id=game_id)
        if UserRepository(session).get_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        name = name.strip()
        if not name:
            msg = "Player name must not be empty"
            raise ValidationError(msg)
        players = PlayerRepository(session, game_id)
        if players.get_by_user(user_id) is not None:
            msg = "User has already joined this game"
            raise DuplicatePlayerError(msg, game_id=game_id, user_id=str(user_id))
        if players.get_by_name(name) is not None:
            msg = "Player name is already taken in this game"
            raise DuplicatePlayerError(msg, game_id=game_id, name=name)

        player = players.add(
            PlayerSchema(
                user_id=user_id,
                name=name,
                location_id=location_id,
                turns_active=0,
                turns_reserve=game.starting_reserve,
                turns_transferred=0,
                money_cash=0,
                money_bank=game.starting_bank,
            )
        )
        logger.info("User %s joined game %s as %s", user_id, game_id, name)
        return PlayerState.model_validate(player)

    def get_player(
        self, *, session: Session, game_id: int, player_id: UUID
    ) -> PlayerState:
        self._partitions.require_partition(session=session, game_id=game_id)
        player = PlayerRepository(session, game_id).get(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id)
        return PlayerState.model_validate(player)

    def list_user_players(self, *, session: Session, user_id: UUID) -> list[PlayerState]:
        """Return the user's players across every game, skipping missing partitions."""
        players: list[PlayerState] = []
        game_ids = session.scalars(select(GameSchema.id).order_by(GameSchema.id))
        for game_id in game_ids.all():
            if not self._partitions.partition_exists(session=session, game_id=game_id):
                logger.warning("Skipping game %s without a partition", game_id)
                continue
            player = PlayerRepository(session, game_id).get_by_user(user_id)
            if player is not None:
                players.append(PlayerState.model_validate(player))
        return players


__all__ = ["GameDraft", "GameService"]
