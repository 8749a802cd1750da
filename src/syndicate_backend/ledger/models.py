"""Immutable results returned by the economy subsystems."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from uuid import UUID  # noqa: TC003

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class PlayerState(BaseModel):
    """Post-mutation view of a player row."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    game_id: int
    user_id: UUID
    name: str
    location_id: int | None = None
    turns_active: int
    turns_reserve: int
    turns_transferred: int
    money_cash: int
    money_bank: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserState(BaseModel):
    """Post-mutation view of a user's account-level turns."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    nickname: str
    turns: int


class BankBalances(BaseModel):
    """Cash/bank split after a banking operation."""

    model_config = ConfigDict(frozen=True)

    player_id: UUID
    money_cash: int
    money_bank: int


class MarketResource(BaseModel):
    """A tradable catalog resource annotated with prices and the player's holding."""

    model_config = ConfigDict(frozen=True)

    id: int
    resource_type_id: int
    resource_type_name: str
    name: str
    description: str | None = None
    buy_price: int
    sell_price: int
    player_quantity: int


class TradeResult(BaseModel):
    """Holding and cash after a market buy or sell."""

    model_config = ConfigDict(frozen=True)

    player_quantity: int
    money_cash: int


class InventoryEntry(BaseModel):
    """One positive holding of a player."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    resource_id: int
    quantity: int


class PersonnelResource(BaseModel):
    """A recruitable personnel resource with its yield bounds."""

    model_config = ConfigDict(frozen=True)

    id: int
    resource_type_id: int
    resource_type_name: str
    name: str
    description: str | None = None
    value: int
    recruitmin: int
    recruitmax: int
    player_quantity: int


class RecruitedUnits(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resource_id: int = Field(alias="resourceId")
    resource_name: str = Field(alias="resourceName")
    quantity: int


class RecruitedPlayerTurns(BaseModel):
    model_config = ConfigDict(frozen=True)

    turns_active: int
    turns_reserve: int


class RecruitmentResult(BaseModel):
    """Outcome of a recruitment; quantities are random within the resource bounds."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    turns_used: int = Field(alias="turnsUsed")
    recruited: tuple[RecruitedUnits, ...]
    player: RecruitedPlayerTurns


class DivestedPlayerCash(BaseModel):
    model_config = ConfigDict(frozen=True)

    money_cash: int


class DivestResult(BaseModel):
    """Outcome of a divestment.

    ``cash_received`` is negative: divesting personnel costs severance pay, and
    callers rely on the sign as published.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resource_id: int = Field(alias="resourceId")
    resource_name: str = Field(alias="resourceName")
    quantity_divested: int = Field(alias="quantityDivested")
    cash_received: int = Field(alias="cashReceived")
    player: DivestedPlayerCash


class AccountTransferResult(BaseModel):
    """Player and user rows after an account-to-reserve transfer."""

    model_config = ConfigDict(frozen=True)

    player: PlayerState
    user: UserState


__all__ = [
    "AccountTransferResult",
    "BankBalances",
    "DivestResult",
    "DivestedPlayerCash",
    "InventoryEntry",
    "MarketResource",
    "PersonnelResource",
    "PlayerState",
    "RecruitedPlayerTurns",
    "RecruitedUnits",
    "RecruitmentResult",
    "TradeResult",
    "UserState",
]
