"""Translate domain errors into ``{"error": ..., "code": ...}`` responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ledger.domain.common.exceptions import (
    InternalFailureError,
    InvalidRequestShapeError,
    LedgerError,
    RateLimitExceededError,
)
from ledger.domain.wallets.exceptions import WalletNotFoundError

logger = logging.getLogger(__name__)

# Anything not listed is a client error.
_STATUS_CODES: dict[type[LedgerError], int] = {
    WalletNotFoundError: status.HTTP_404_NOT_FOUND,
    RateLimitExceededError: status.HTTP_429_TOO_MANY_REQUESTS,
    InternalFailureError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: LedgerError) -> int:
    for cls in type(exc).__mro__:
        if cls in _STATUS_CODES:
            return _STATUS_CODES[cls]
    return status.HTTP_400_BAD_REQUEST


def error_response(exc: LedgerError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code_for(exc),
        content={"error": exc.message, "code": exc.code},
    )


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    return error_response(exc)


def _summarize(errors) -> list[dict]:
    # Entries carry the raw request body under "input"; keep it out of the logs.
    return [
        {"loc": list(error.get("loc", ())), "type": error.get("type"), "msg": error.get("msg")}
        for error in errors
    ]


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(
        "Invalid request body",
        extra={"path": request.url.path, "errors": _summarize(exc.errors())},
    )
    return error_response(InvalidRequestShapeError())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return error_response(InternalFailureError())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


__all__ = ["error_response", "register_exception_handlers", "status_code_for"]
