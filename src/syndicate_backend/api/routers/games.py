"""Game listing, administration and joining endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from syndicate_backend.api.dependencies import (
    get_current_user,
    get_game_service,
    get_owned_player,
    require_admin,
)
from syndicate_backend.api.models import GameCreateRequest, GameResponse, JoinGameRequest
from syndicate_backend.database import UserSchema, get_session
from syndicate_backend.ledger import GameDraft, GameService, PlayerState

router = APIRouter(tags=["games"])


@router.get("/games", response_model=list[GameResponse])
def list_games(
    _: UserSchema = Depends(get_current_user),
    session: Session = Depends(get_session),
    games: GameService = Depends(get_game_service),
) -> list[GameResponse]:
    return [
        GameResponse.model_validate(game) for game in games.list_games(session=session)
    ]


@router.get("/games/{game_id}", response_model=GameResponse)
def get_game(
    game_id: int,
    _: UserSchema = Depends(get_current_user),
    session: Session = Depends(get_session),
    games: GameService = Depends(get_game_service),
) -> GameResponse:
    return GameResponse.model_validate(games.get_game(session=session, game_id=game_id))


@router.post(
    "/games", response_model=GameResponse, status_code=status.HTTP_201_CREATED
)
def create_game(
    payload: GameCreateRequest,
    _: UserSchema = Depends(require_admin),
    session: Session = Depends(get_session),
    games: GameService = Depends(get_game_service),
) -> GameResponse:
    """Create a game together with its data partition."""

    game = games.create_game(
        session=session, draft=GameDraft(**payload.model_dump())
    )
    return GameResponse.model_validate(game)


@router.delete("/games/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(
    game_id: int,
    _: UserSchema = Depends(require_admin),
    session: Session = Depends(get_session),
    games: GameService = Depends(get_game_service),
) -> Response:
    """Delete a game and irrecoverably drop every player in it."""

    games.delete_game(session=session, game_id=game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/games/{game_id}/join",
    response_model=PlayerState,
    status_code=status.HTTP_201_CREATED,
)
def join_game(
    game_id: int,
    payload: JoinGameRequest,
    user: UserSchema = Depends(get_current_user),
    session: Session = Depends(get_session),
    games: GameService = Depends(get_game_service),
) -> PlayerState:
    return games.join_game(
        session=session,
        game_id=game_id,
        user_id=user.id,
        name=payload.name,
        location_id=payload.location_id,
    )


@router.get("/players/me", response_model=list[PlayerState])
def list_my_players(
    user: UserSchema = Depends(get_current_user),
    session: Session = Depends(get_session),
    games: GameService = Depends(get_game_service),
) -> list[PlayerState]:
    """Return the caller's players across every game."""

    return games.list_user_players(session=session, user_id=user.id)


@router.get("/games/{game_id}/players/{player_id}", response_model=PlayerState)
def get_player(player: PlayerState = Depends(get_owned_player)) -> PlayerState:
    return player
