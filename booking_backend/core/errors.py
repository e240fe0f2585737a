"""Application error taxonomy and its mapping onto HTTP responses."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class BookingAppError(Exception):
    """Base class for errors that carry their own client-visible status and message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ConflictError(BookingAppError):
    status_code = status.HTTP_409_CONFLICT
    message = "User already exists with this email."


class AuthenticationFailure(BookingAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials."


class AuthorizationFailure(BookingAppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Invalid or expired token."


class InternalFailure(BookingAppError):
    pass


def error_response(exc: BookingAppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def app_error_handler(request: Request, exc: BookingAppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return error_response(exc)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"Rejected request body on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"message": "Missing required fields."},
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Not found."
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": message},
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers that translate raised errors into JSON responses."""
    app.add_exception_handler(BookingAppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
