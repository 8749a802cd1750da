"""Service layer for API-specific business logic."""

from syndicate_backend.api.services.auth import AuthService, TokenPayload

__all__ = ["AuthService", "TokenPayload"]
