"""
Domain errors and their HTTP translation.

Services raise these; the handlers registered by ``register_error_handlers``
turn them into a status code and a ``{"msg": ...}`` body.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from google.api_core.exceptions import GoogleAPICallError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TodoAppError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Bad request"

    def __init__(self, msg: str = None):
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequest(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Invalid request"


class Conflict(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "User already exists"


class NotFound(TodoAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_msg = "Not found"


class UserNotFound(NotFound):
    # Login reports an unknown email as a client error, not a missing route
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "User not found"


class TodoNotFound(NotFound):
    default_msg = "Todo not found"


class InvalidCredentials(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Invalid credentials"


class Unauthenticated(TodoAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "Token is not valid"


class Forbidden(TodoAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_msg = "Unauthorized"


def _msg_response(status_code: int, msg: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"msg": msg}, headers=headers)


async def todo_app_error_handler(request: Request, exc: TodoAppError) -> JSONResponse:
    headers = None
    if isinstance(exc, Unauthenticated):
        headers = {"WWW-Authenticate": "Bearer"}
    return _msg_response(exc.status_code, exc.msg, headers)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report the first invalid field as a BadRequest."""
    errors = exc.errors()
    if not errors:
        return _msg_response(BadRequest.status_code, BadRequest.default_msg)

    first = errors[0]
    # Drop the leading "body"/"query" segment from the location
    loc = [str(part) for part in first.get("loc", ())[1:]]
    msg = first.get("msg", BadRequest.default_msg)
    if loc:
        msg = f"{'.'.join(loc)}: {msg}"
    return _msg_response(BadRequest.status_code, msg)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _msg_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def store_error_handler(request: Request, exc: GoogleAPICallError) -> JSONResponse:
    logger.exception("Store call failed for %s %s", request.method, request.url.path)
    return _msg_response(status.HTTP_503_SERVICE_UNAVAILABLE, "Database unavailable")


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(TodoAppError, todo_app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(GoogleAPICallError, store_error_handler)
