"""API layer modules exposed by the backend."""

from syndicate_backend.api.app import create_api

__all__ = ["create_api"]
