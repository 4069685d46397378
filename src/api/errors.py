"""Map domain errors and framework errors to JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.models import ErrorResponse
from domain.model.errors import (
    AuthenticationError,
    DomainError,
    DuplicateError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"
INVALID_REQUEST_BODY = "Invalid request body"
SERVER_ERROR = "Server error"

# Checked in order; first isinstance match wins
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (DuplicateError, status.HTTP_409_CONFLICT),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def status_for(error: DomainError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_response(status_code: int, message: str, error: str | None = None, headers: dict | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, error=error).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    error = exc.error if isinstance(exc, InternalError) else None
    if status_code >= 500:
        logger.error("Request failed", extra={"path": request.url.path, "error": error or exc.message})
    return _error_response(status_code, exc.message or SERVER_ERROR, error=error, headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = ROUTE_NOT_FOUND
    else:
        message = str(exc.detail)
    return _error_response(exc.status_code, message, headers=getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request body", extra={"path": request.url.path, "errors": str(exc.errors())[:200]})
    return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_BODY)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled server error", extra={"path": request.url.path})
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
