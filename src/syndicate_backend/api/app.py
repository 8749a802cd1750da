"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from syndicate_backend.api.routers import (
    bank_router,
    games_router,
    market_router,
    personnel_router,
    turns_router,
)
from syndicate_backend.shared.errors import (
    InsufficientBalanceError,
    LedgerError,
    NotFoundError,
    PartitionError,
    PartitionNotFoundError,
    PolicyViolationError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first.
ERROR_STATUS: tuple[tuple[type[LedgerError], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InsufficientBalanceError, status.HTTP_409_CONFLICT),
    (PolicyViolationError, status.HTTP_409_CONFLICT),
    (PartitionNotFoundError, status.HTTP_410_GONE),
    (PartitionError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: LedgerError) -> int:
    """Return the HTTP status code for an engine error."""
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    content = {**exc.detail, "detail": exc.message, "error": exc.code}
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    app = FastAPI(title="Syndicate API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(LedgerError, _ledger_error_handler)
    app.include_router(games_router)
    app.include_router(bank_router)
    app.include_router(market_router)
    app.include_router(personnel_router)
    app.include_router(turns_router)
    return app


__all__ = ["ERROR_STATUS", "create_api", "status_for"]
