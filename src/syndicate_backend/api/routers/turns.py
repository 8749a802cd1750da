"""Turn-pool transfer endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from syndicate_backend.api.dependencies import get_owned_player, get_turn_service
from syndicate_backend.api.models import AmountRequest
from syndicate_backend.database import get_session
from syndicate_backend.ledger import AccountTransferResult, PlayerState, TurnService

router = APIRouter(prefix="/games/{game_id}/players/{player_id}/turns", tags=["turns"])


@router.post("/reserve-to-active", response_model=PlayerState)
def reserve_to_active(
    payload: AmountRequest,
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    turns: TurnService = Depends(get_turn_service),
) -> PlayerState:
    return turns.reserve_to_active(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        amount=payload.amount,
    )


@router.post("/account-to-reserve", response_model=AccountTransferResult)
def account_to_reserve(
    payload: AmountRequest,
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    turns: TurnService = Depends(get_turn_service),
) -> AccountTransferResult:
    """Move turns from the caller's account into this player's reserve."""

    return turns.account_to_reserve(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        user_id=player.user_id,
        amount=payload.amount,
    )
