"""Personnel recruitment and divestment endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from syndicate_backend.api.dependencies import get_owned_player, get_personnel_service
from syndicate_backend.api.models import DivestRequest, RecruitRequest
from syndicate_backend.database import get_session
from syndicate_backend.ledger import (
    DivestResult,
    PersonnelResource,
    PersonnelService,
    PlayerState,
    RecruitmentResult,
)

router = APIRouter(
    prefix="/games/{game_id}/players/{player_id}/personnel", tags=["personnel"]
)


@router.get("", response_model=list[PersonnelResource])
def list_personnel(
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    personnel: PersonnelService = Depends(get_personnel_service),
) -> list[PersonnelResource]:
    return personnel.list_personnel(
        session=session, game_id=player.game_id, player_id=player.id
    )


@router.post("/recruit", response_model=RecruitmentResult)
def recruit(
    payload: RecruitRequest,
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    personnel: PersonnelService = Depends(get_personnel_service),
) -> RecruitmentResult:
    """Spend active turns on personnel; yields are random within catalog bounds."""

    return personnel.recruit(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        resource_ids=payload.resource_ids,
        turns=payload.turns,
    )


@router.post("/divest", response_model=DivestResult)
def divest(
    payload: DivestRequest,
    player: PlayerState = Depends(get_owned_player),
    session: Session = Depends(get_session),
    personnel: PersonnelService = Depends(get_personnel_service),
) -> DivestResult:
    return personnel.divest(
        session=session,
        game_id=player.game_id,
        player_id=player.id,
        resource_id=payload.resource_id,
        quantity=payload.quantity,
    )
