"""Banking endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from syndicate_backend.api.dependencies import get_bank_service, get_owned_player
from syndicate_backend.api.models import AmountRequest
from syndicate_backend.database import get_session
from syndicate_backend.ledger import BankBalances, BankService, PlayerState

router = APIRouter(prefix="/games/{game_id}/players/{player_id}/bank", tags=["bank"])


@router.post("/withdraw", response_model=BankBalances)
def withdraw(
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    bank: BankService = Depends(get_bank_service),
) -> BankBalances:
    """Move the whole bank balance into cash."""

    return bank.withdraw(session=session, game_id=player.game_id, player_id=player.id)


@router.post("/deposit", response_model=BankBalances)
def deposit(
    payload: AmountRequest,
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    bank: BankService = Depends(get_bank_service),
) -> BankBalances:
    """Deposit up to 15% of cash into an empty bank."""

    return bank.deposit(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        amount=payload.amount,
    )
