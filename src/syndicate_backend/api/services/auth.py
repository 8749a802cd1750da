"""Bearer token issue and verification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from syndicate_backend.settings import BackendSettings, get_settings


@dataclass(slots=True)
class TokenPayload:
    """Represents encoded token metadata."""

    sub: str
    exp: datetime


class AuthService:
    """Signs and verifies HS256 access tokens whose subject is a user id.

    Signup and login live in a separate identity service; this backend only
    needs to trust the tokens it hands out.
    """

    def __init__(
        self,
        *,
        secret_key: str | None = None,
        algorithm: str = "HS256",
        access_token_ttl_minutes: int = 60,
        settings: BackendSettings | None = None,
    ) -> None:
        config = settings or get_settings()
        self._secret_key = secret_key or config.auth_secret_key
        self._algorithm = algorithm
        self._access_token_ttl = timedelta(minutes=access_token_ttl_minutes)

    def create_access_token(self, subject: str) -> str:
        expires_at = datetime.now(tz=UTC) + self._access_token_ttl
        payload = {"sub": subject, "exp": expires_at}
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> TokenPayload:
        """Return the payload of *token*; raises :class:`jwt.PyJWTError` if invalid."""
        data = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        return TokenPayload(
            sub=data["sub"], exp=datetime.fromtimestamp(data["exp"], tz=UTC)
        )


__all__ = ["AuthService", "TokenPayload"]
