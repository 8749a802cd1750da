"""Route definitions for public HTTP endpoints."""

from syndicate_backend.api.routers.bank import router as bank_router
from syndicate_backend.api.routers.games import router as games_router
from syndicate_backend.api.routers.market import router as market_router
from syndicate_backend.api.routers.personnel import router as personnel_router
from syndicate_backend.api.routers.turns import router as turns_router

__all__ = [
    "bank_router",
    "games_router",
    "market_router",
    "personnel_router",
    "turns_router",
]
