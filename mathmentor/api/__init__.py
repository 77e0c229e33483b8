"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from ..core import QuizGenerationError, UserNotFound, ValidationError
from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


def register_routes(app: FastAPI) -> None:
    """Attach all application routers to the given app."""

    for router in ALL_ROUTERS:
        app.include_router(router)


async def _validation_error(request: Request, exc: Exception) -> JSONResponse:
    message = str(exc) if isinstance(exc, ValidationError) else "Invalid data provided"
    return JSONResponse({"detail": message}, status_code=400)


async def _not_found(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse({"detail": str(exc)}, status_code=404)


async def _database_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse({"detail": "Database error"}, status_code=500)


async def _quiz_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Question generation failed: %s", exc)
    return JSONResponse({"detail": "Could not generate a question"}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and storage errors onto HTTP status codes."""

    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(UserNotFound, _not_found)
    app.add_exception_handler(SQLAlchemyError, _database_error)
    # sqlite3 raises OverflowError for integers outside its 64-bit range.
    app.add_exception_handler(OverflowError, _database_error)
    app.add_exception_handler(QuizGenerationError, _quiz_error)


__all__ = ["register_error_handlers", "register_routes"]
