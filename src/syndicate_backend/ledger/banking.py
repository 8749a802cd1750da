"""Banking: move money between a player's cash and bank balances.

Only two transitions exist. ``withdraw`` empties the bank into cash.
``deposit`` moves at most 15% of current cash into an empty bank; the bank
never accumulates across deposits.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from syndicate_backend.database import PlayerSchema
from syndicate_backend.ledger.base import (
    LedgerService,
    require_headroom,
    require_positive,
)
from syndicate_backend.ledger.models import BankBalances
from syndicate_backend.shared.errors import (
    BankNotEmptyError,
    CapExceededError,
    InsufficientCashError,
    NoFundsError,
)

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

DEPOSIT_CAP_RATIO = Decimal("0.15")


def deposit_cap(money_cash: int) -> int:
    """Return the largest deposit allowed for *money_cash* on hand."""
    return int(Decimal(money_cash) * DEPOSIT_CAP_RATIO // 1)


class BankService(LedgerService):
    """Withdraw and deposit operations on a single player row."""

    def withdraw(
        self, *, session: Session, game_id: int, player_id: UUID
    ) -> BankBalances:
        """Move the whole bank balance back into cash."""
        players, player = self._lock_player(session, game_id, player_id)
        if player.money_bank <= 0:
            raise NoFundsError

        amount = player.money_bank
        require_headroom("money_cash", player.money_cash, amount)
        updated = players.apply(
            player_id,
            PlayerSchema.money_bank > 0,
            money_cash=PlayerSchema.money_cash + PlayerSchema.money_bank,
            money_bank=0,
        )
        if updated is None:
            raise NoFundsError
        logger.info(
            "Player %s withdrew %d in game %s", player_id, amount, game_id
        )
        return _balances(updated)

    def deposit(
        self, *, session: Session, game_id: int, player_id: UUID, amount: object
    ) -> BankBalances:
        """Move *amount* from cash into an empty bank, capped at 15% of cash."""
        amount = require_positive("amount", amount)
        players, player = self._lock_player(session, game_id, player_id)
        _check_deposit(player, amount)

        updated = players.apply(
            player_id,
            PlayerSchema.money_bank == 0,
            PlayerSchema.money_cash >= amount,
            # integer form of amount <= floor(cash * 0.15)
            PlayerSchema.money_cash * 15 >= amount * 100,
            money_cash=PlayerSchema.money_cash - amount,
            money_bank=PlayerSchema.money_bank + amount,
        )
        if updated is None:
            # the row changed after it was read; report against its current state
            session.refresh(player)
            _check_deposit(player, amount)
            raise CapExceededError(
                requested=amount, maximum=deposit_cap(player.money_cash)
            )
        logger.info(
            "Player %s deposited %d in game %s", player_id, amount, game_id
        )
        return _balances(updated)


def _check_deposit(player: PlayerSchema, amount: int) -> None:
    if player.money_bank > 0:
        raise BankNotEmptyError(player.money_bank)
    maximum = deposit_cap(player.money_cash)
    if amount > maximum:
        raise CapExceededError(requested=amount, maximum=maximum)
    # unreachable while money_cash >= 0, which ck_players_money_cash enforces
    if amount > player.money_cash:
        raise InsufficientCashError(requested=amount, available=player.money_cash)


def _balances(player: PlayerSchema) -> BankBalances:
    return BankBalances(
        player_id=player.id,
        money_cash=player.money_cash,
        money_bank=player.money_bank,
    )


__all__ = ["DEPOSIT_CAP_RATIO", "BankService", "deposit_cap"]
