"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from syndicate_backend.api.services import AuthService
from syndicate_backend.database import UserRepository, UserSchema, get_session
from syndicate_backend.ledger import (
    BankService,
    GameService,
    MarketService,
    PersonnelService,
    PlayerState,
    TurnService,
)
from syndicate_backend.shared import RandomService

_security = HTTPBearer(auto_error=False)
_rng = RandomService()


def get_auth_service() -> AuthService:
    """Return an :class:`AuthService` bound to the current settings."""

    return AuthService()


def get_game_service() -> GameService:
    return GameService()


def get_bank_service() -> BankService:
    return BankService()


def get_market_service() -> MarketService:
    return MarketService()


def get_personnel_service() -> PersonnelService:
    """Return a personnel service drawing from the process-wide random source."""

    return PersonnelService(rng=_rng)


def get_turn_service() -> TurnService:
    return TurnService()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    session: Session = Depends(get_session),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserSchema:
    """Resolve the authenticated user from a bearer token."""

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing credentials"
        )

    try:
        payload = auth_service.decode_access_token(credentials.credentials)
    except jwt.PyJWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        ) from exc

    try:
        user_id = UUID(payload.sub)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token subject"
        ) from exc

    user = UserRepository(session).get_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found"
        )

    return user


def require_admin(user: UserSchema = Depends(get_current_user)) -> UserSchema:
    """Reject callers without the administrator flag."""

    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Administrator required"
        )
    return user


def get_owned_player(
    game_id: int,
    player_id: UUID,
    user: UserSchema = Depends(get_current_user),
    session: Session = Depends(get_session),
    games: GameService = Depends(get_game_service),
) -> PlayerState:
    """Resolve the player in the path and check the caller owns it."""

    player = games.get_player(session=session, game_id=game_id, player_id=player_id)
    if player.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Player belongs to another user"
        )
    return player


__all__ = [
    "get_auth_service",
    "get_bank_service",
    "get_current_user",
    "get_game_service",
    "get_market_service",
    "get_owned_player",
    "get_personnel_service",
    "get_turn_service",
    "require_admin",
]
