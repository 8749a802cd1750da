"""Error taxonomy raised by the economy engine.

Every error carries a human readable ``message`` and a ``detail`` mapping with
the figures a caller needs to render a message such as "need $X, have $Y".
Store-level exceptions are never exposed through these types.
"""

from __future__ import annotations

from typing import Any


class LedgerError(Exception):
    """Base class for all economy engine failures."""

    code = "ledger_error"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class NotFoundError(LedgerError):
    """A player, game, user or resource reference does not resolve."""

    code = "not_found"


class PlayerNotFoundError(NotFoundError):
    code = "player_not_found"

    def __init__(self, player_id: object) -> None:
        super().__init__("Player not found", player_id=str(player_id))


class GameNotFoundError(NotFoundError):
    code = "game_not_found"

    def __init__(self, game_id: int) -> None:
        super().__init__("Game not found", game_id=game_id)


class UserNotFoundError(NotFoundError):
    code = "user_not_found"

    def __init__(self, user_id: object) -> None:
        super().__init__("User not found", user_id=str(user_id))


class ValidationError(LedgerError):
    """Malformed request values or a resource of the wrong catalog type."""

    code = "validation_error"


class InvalidAmountError(ValidationError):
    code = "invalid_amount"

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"{field} must be a positive integer", field=field, value=value)


class BalanceLimitError(ValidationError):
    code = "balance_limit_exceeded"

    def __init__(self, field: str, *, current: int, amount: int) -> None:
        super().__init__(
            f"Adding {amount} would push {field} past the largest storable value",
            field=field,
            current=current,
            amount=amount,
        )


class ResourceNotAvailableError(ValidationError):
    code = "resource_not_available"


class DuplicatePlayerError(ValidationError):
    code = "duplicate_player"


class InsufficientBalanceError(LedgerError):
    """A balance check failed; ``requested`` and ``available`` are reported."""

    code = "insufficient_balance"

    def __init__(self, message: str, *, requested: int, available: int) -> None:
        super().__init__(message, requested=requested, available=available)
        self.requested = requested
        self.available = available


class InsufficientFundsError(InsufficientBalanceError):
    code = "insufficient_funds"

    def __init__(
        self, *, requested: int, available: int, message: str | None = None
    ) -> None:
        super().__init__(
            message or f"Insufficient funds. Need ${requested}, have ${available}",
            requested=requested,
            available=available,
        )
        self.detail["shortfall"] = requested - available


class InsufficientCashError(InsufficientFundsError):
    code = "insufficient_cash"


class NoFundsError(InsufficientFundsError):
    code = "no_funds"

    def __init__(self) -> None:
        super().__init__(
            requested=1, available=0, message="No money in bank to withdraw"
        )


class InsufficientQuantityError(InsufficientBalanceError):
    code = "insufficient_quantity"

    def __init__(self, *, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient quantity. Have {available}, requested {requested}",
            requested=requested,
            available=available,
        )


class InsufficientTurnsError(InsufficientBalanceError):
    code = "insufficient_turns"

    def __init__(self, pool: str, *, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient {pool} turns (have: {available}, requested: {requested})",
            requested=requested,
            available=available,
        )
        self.detail["pool"] = pool


class PolicyViolationError(LedgerError):
    """Banking rule violations."""

    code = "policy_violation"


class CapExceededError(PolicyViolationError):
    code = "deposit_cap_exceeded"

    def __init__(self, *, requested: int, maximum: int) -> None:
        super().__init__(
            f"Cannot deposit more than 15% of cash (max: {maximum})",
            requested=requested,
            maximum=maximum,
        )


class BankNotEmptyError(PolicyViolationError):
    code = "bank_not_empty"

    def __init__(self, balance: int) -> None:
        super().__init__(
            "Bank already has money. Must withdraw before depositing",
            money_bank=balance,
        )


class PartitionError(LedgerError):
    """Provisioning or drop of a game partition failed; never retriable."""

    code = "partition_error"


class PartitionNotFoundError(PartitionError):
    code = "partition_not_found"

    def __init__(self, game_id: int) -> None:
        super().__init__("Game data partition does not exist", game_id=game_id)


__all__ = [
    "BalanceLimitError",
    "BankNotEmptyError",
    "CapExceededError",
    "DuplicatePlayerError",
    "GameNotFoundError",
    "InsufficientBalanceError",
    "InsufficientCashError",
    "InsufficientFundsError",
    "InsufficientQuantityError",
    "InsufficientTurnsError",
    "InvalidAmountError",
    "LedgerError",
    "NoFundsError",
    "NotFoundError",
    "PartitionError",
    "PartitionNotFoundError",
    "PlayerNotFoundError",
    "PolicyViolationError",
    "ResourceNotAvailableError",
    "UserNotFoundError",
    "ValidationError",
]
