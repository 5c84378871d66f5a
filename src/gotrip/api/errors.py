"""Maps domain exceptions to HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gotrip.core.exceptions import (
    ActiveTripExists,
    GoTripError,
    InvalidInput,
    InvalidTransition,
    NotFoundError,
)

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[GoTripError], int] = {
    InvalidInput: 422,
    InvalidTransition: 409,
    ActiveTripExists: 409,
    NotFoundError: 404,
}


async def gotrip_error_handler(request: Request, exc: GoTripError) -> JSONResponse:
    status_code = next(
        (code for cls, code in STATUS_CODES.items() if isinstance(exc, cls)),
        500,
    )
    if status_code == 500:
        logger.error(f"Unhandled domain error on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": type(exc).__name__, "details": exc.details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GoTripError, gotrip_error_handler)
