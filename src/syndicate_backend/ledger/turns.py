"""Turn pools: account (per user) -> reserve (per player) -> active (per player).

Turns only ever flow downward. ``turns_transferred`` records the lifetime
inflow into a player's reserve and is never decremented.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from syndicate_backend.database import PlayerSchema, UserRepository
from syndicate_backend.ledger.base import (
    LedgerService,
    require_headroom,
    require_positive,
)
from syndicate_backend.ledger.models import AccountTransferResult, PlayerState, UserState
from syndicate_backend.shared.errors import InsufficientTurnsError, UserNotFoundError

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class TurnService(LedgerService):
    """Transfers between the three turn pools."""

    def reserve_to_active(
        self, *, session: Session, game_id: int, player_id: UUID, amount: object
    ) -> PlayerState:
        """Move *amount* turns from the player's reserve into active turns."""
        amount = require_positive("amount", amount)
        players, player = self._lock_player(session, game_id, player_id)
        if amount > player.turns_reserve:
            raise InsufficientTurnsError(
                "reserve", requested=amount, available=player.turns_reserve
            )
        require_headroom("turns_active", player.turns_active, amount)

        updated = players.apply(
            player_id,
            PlayerSchema.turns_reserve >= amount,
            turns_reserve=PlayerSchema.turns_reserve - amount,
            turns_active=PlayerSchema.turns_active + amount,
        )
        if updated is None:
            raise InsufficientTurnsError(
                "reserve", requested=amount, available=player.turns_reserve
            )
        logger.info(
            "Player %s activated %d reserve turns in game %s",
            player_id,
            amount,
            game_id,
        )
        return PlayerState.model_validate(updated)

    def account_to_reserve(
        self,
        *,
        session: Session,
        game_id: int,
        player_id: UUID,
        user_id: UUID,
        amount: object,
    ) -> AccountTransferResult:
        """Move *amount* turns from the user's account into the player's reserve."""
        amount = require_positive("amount", amount)
        players, player = self._lock_player(session, game_id, player_id)
        users = UserRepository(session)
        user = users.lock(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        if amount > user.turns:
            raise InsufficientTurnsError(
                "account", requested=amount, available=user.turns
            )
        require_headroom("turns_reserve", player.turns_reserve, amount)
        require_headroom("turns_transferred", player.turns_transferred, amount)

        updated_user = users.debit_turns(user_id, amount)
        if updated_user is None:
            raise InsufficientTurnsError(
                "account", requested=amount, available=user.turns
            )
        updated_player = players.apply(
            player_id,
            turns_reserve=PlayerSchema.turns_reserve + amount,
            turns_transferred=PlayerSchema.turns_transferred + amount,
        )
        logger.info(
            "User %s moved %d account turns to player %s in game %s",
            user_id,
            amount,
            player_id,
            game_id,
        )
        return AccountTransferResult(
            player=PlayerState.model_validate(updated_player),
            user=UserState.model_validate(updated_user),
        )


__all__ = ["TurnService"]
