"""Helpers shared by the economy subsystems."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import TYPE_CHECKING

from syndicate_backend.database import PlayerRepository
from syndicate_backend.ledger.partitions import TenantPartitionManager
from syndicate_backend.shared.errors import (
    BalanceLimitError,
    InvalidAmountError,
    PlayerNotFoundError,
)

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session

    from syndicate_backend.database import PlayerSchema

# Upper bound of the 32-bit integer balance, turn and quantity columns.
MAX_BALANCE = 2**31 - 1


def require_positive(field: str, value: object) -> int:
    """Return *value* as an ``int`` if it is a positive whole number that fits a column."""
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise InvalidAmountError(field, value)
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidAmountError(field, value)
    if isinstance(value, Decimal) and not value.is_finite():
        raise InvalidAmountError(field, value)
    if value != int(value) or value <= 0 or value > MAX_BALANCE:
        raise InvalidAmountError(field, value)
    return int(value)


def require_headroom(field: str, current: int, amount: int) -> None:
    """Raise :class:`BalanceLimitError` unless ``current + amount`` fits a column."""
    if current > MAX_BALANCE - amount:
        raise BalanceLimitError(field, current=current, amount=amount)


class LedgerService:
    """Base for services that mutate one player inside one game partition."""

    def __init__(self, *, partitions: TenantPartitionManager | None = None) -> None:
        self._partitions = partitions or TenantPartitionManager()

    def _lock_player(
        self, session: Session, game_id: int, player_id: UUID
    ) -> tuple[PlayerRepository, PlayerSchema]:
        """Check the partition, then lock and return the player row."""
        self._partitions.require_partition(session=session, game_id=game_id)
        players = PlayerRepository(session, game_id)
        player = players.lock(player_id)
        if player is None:
            raise PlayerNotFoundError(player_id)
        return players, player


__all__ = ["MAX_BALANCE", "LedgerService", "require_headroom", "require_positive"]
