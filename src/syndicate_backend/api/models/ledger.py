"""Pydantic request bodies for the economy endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field, PositiveInt

from syndicate_backend.ledger import MAX_BALANCE


class AmountRequest(BaseModel):
    """Single positive whole amount of money or turns."""

    amount: PositiveInt = Field(le=MAX_BALANCE)


class TradeRequest(BaseModel):
    resource_id: int
    quantity: PositiveInt = Field(le=MAX_BALANCE)


class RecruitRequest(BaseModel):
    """Turns to spend and the personnel resources to split them across."""

    resource_ids: list[int] = Field(min_length=1)
    turns: PositiveInt = Field(le=MAX_BALANCE)


class DivestRequest(BaseModel):
    resource_id: int
    quantity: PositiveInt = Field(le=MAX_BALANCE)
