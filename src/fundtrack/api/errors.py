"""API error handling: every failure becomes ``{"error": "<message>"}``.

Status code mapping:
- ``ValidationError`` / ``ConflictError`` → 400
- ``NotFoundError`` → 404
- ``PersistenceError`` → 500
- malformed JSON or path parameters → 400 (500 on transaction-creating routes)
- ``HTTPException`` → its own status, detail as the message
- any other ``Exception`` → 500

Routes that write several records in one unit convert every domain error
to a 500 themselves (see ``fundtrack.api.routers.transactions``).
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fundtrack.api.schemas import ErrorResponse
from fundtrack.domain.errors import (
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = "Internal Server Error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the uniform error response."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


async def _handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


def creates_transaction(request: Request) -> bool:
    """True for the POST routes that record a transaction in one unit."""
    if request.method != "POST":
        return False
    path = request.url.path.rstrip("/")
    if path.startswith("/transactions/"):
        return True
    return path.startswith("/debts/") and path.endswith("/transactions")


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject bodies or path parameters FastAPI could not parse.

    400 everywhere except the transaction-creating routes, which answer
    every failure with 500.
    """
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    message = "Invalid request: " + "; ".join(problems)

    if creates_transaction(request):
        logger.error("%s %s failed: %s", request.method, request.url.path, message)
        return error_response(500, message)

    logger.info("%s %s rejected: %s", request.method, request.url.path, message)
    return error_response(400, message)


async def _handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.info("Validation error: %s", exc)
    return error_response(400, str(exc))


async def _handle_conflict_error(request: Request, exc: ConflictError) -> JSONResponse:
    logger.info("Conflict: %s", exc)
    return error_response(400, str(exc))


async def _handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.info("Not found: %s", exc)
    return error_response(404, str(exc))


async def _handle_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
    logger.error("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, INTERNAL_SERVER_ERROR)


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(500, INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the exception handlers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(ValidationError, _handle_validation_error)
    app.add_exception_handler(ConflictError, _handle_conflict_error)
    app.add_exception_handler(NotFoundError, _handle_not_found)
    app.add_exception_handler(PersistenceError, _handle_persistence_error)
    app.add_exception_handler(Exception, _handle_unexpected)
