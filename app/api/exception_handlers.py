"""
Exception handlers for the FastAPI application.

Every failure leaves the API as JSON ``{"message": ..., "error"?: ...}``.
Store errors are classified (constraint violation vs. unreachable database)
and their raw detail is logged, never returned to the client.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import FitnessTrackerError

logger = logging.getLogger(__name__)


def create_error_response(status_code: int, message: str, error: Any | None = None) -> JSONResponse:
    content: dict[str, Any] = {"message": message}
    if error:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


async def fitness_tracker_error_handler(request: Request, exc: FitnessTrackerError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %r", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return create_error_response(exc.status_code, str(exc.detail))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for error in exc.errors():
        loc = ".".join(str(x) for x in error["loc"])
        errors.append({"field": loc, "message": error["msg"], "type": error["type"]})
    return create_error_response(422, "Validation failed", errors)


def _is_connectivity_error(exc: SQLAlchemyError) -> bool:
    if isinstance(exc, (OperationalError, InterfaceError)):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Constraint violations -> 400, unreachable DB -> 503, anything else -> 500."""
    if isinstance(exc, IntegrityError):
        logger.warning("%s %s violated a constraint: %s", request.method, request.url.path, exc.orig)
        return create_error_response(400, "Request conflicts with stored data")
    if _is_connectivity_error(exc):
        logger.error("%s %s: database unavailable: %s", request.method, request.url.path, exc)
        return create_error_response(503, "Database unavailable")
    logger.exception("%s %s: database error", request.method, request.url.path)
    return create_error_response(500, "Internal server error")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return create_error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(FitnessTrackerError, fitness_tracker_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    # Catch-all; must stay last
    app.add_exception_handler(Exception, generic_exception_handler)
