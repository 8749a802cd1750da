"""Marketplace endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from syndicate_backend.api.dependencies import get_market_service, get_owned_player
from syndicate_backend.api.models import TradeRequest
from syndicate_backend.database import get_session
from syndicate_backend.ledger import (
    InventoryEntry,
    MarketResource,
    MarketService,
    PlayerState,
    TradeResult,
)

router = APIRouter(
    prefix="/games/{game_id}/players/{player_id}/market", tags=["market"]
)


@router.get("", response_model=list[MarketResource])
def list_market(
    type_filter: str | None = Query(default=None, alias="type"),
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    market: MarketService = Depends(get_market_service),
) -> list[MarketResource]:
    return market.list_resources(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        type_filter=type_filter,
    )


@router.get("/inventory", response_model=list[InventoryEntry])
def inventory(
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    market: MarketService = Depends(get_market_service),
) -> list[InventoryEntry]:
    return market.inventory(session=session, game_id=player.game_id, player_id=player.id)


@router.post("/buy", response_model=TradeResult)
def buy(
    payload: TradeRequest,
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    market: MarketService = Depends(get_market_service),
) -> TradeResult:
    return market.buy(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        resource_id=payload.resource_id,
        quantity=payload.quantity,
    )


@router.post("/sell", response_model=TradeResult)
def sell(
    payload: TradeRequest,
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    market: MarketService = Depends(get_market_service),
) -> TradeResult:
    return market.sell(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        resource_id=payload.resource_id,
        quantity=payload.quantity,
    )
