"""Models used for API request and response payloads."""

from syndicate_backend.api.models.games import (
    GameCreateRequest,
    GameResponse,
    JoinGameRequest,
)
from syndicate_backend.api.models.ledger import (
    AmountRequest,
    DivestRequest,
    RecruitRequest,
    TradeRequest,
)

__all__ = [
    "AmountRequest",
    "DivestRequest",
    "GameCreateRequest",
    "GameResponse",
    "JoinGameRequest",
    "RecruitRequest",
    "TradeRequest",
]
