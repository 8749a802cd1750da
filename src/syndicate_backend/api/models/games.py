"""Pydantic models for game and player endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt

from syndicate_backend.shared import GameStatus

PLAYER_NAME_MAX_LENGTH = 64


class GameCreateRequest(BaseModel):
    """Payload an administrator sends to open a new game."""

    start_date: datetime
    length_days: PositiveInt
    status: GameStatus = GameStatus.ACTIVE
    resource_set_id: int | None = None
    starting_reserve: NonNegativeInt = 0
    starting_bank: NonNegativeInt = 0


class GameResponse(BaseModel):
    """Public representation of a game."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    start_date: datetime
    length_days: int
    status: GameStatus
    resource_set_id: int | None
    starting_reserve: int
    starting_bank: int


class JoinGameRequest(BaseModel):
    """Payload for creating the caller's player in a game."""

    name: str = Field(min_length=1, max_length=PLAYER_NAME_MAX_LENGTH)
    location_id: int | None = None

