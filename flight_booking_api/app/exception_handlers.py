"""
Exception handlers translating domain errors into HTTP responses.

Every error body is a flat JSON object mapping a field name to a
message, e.g. ``{"number": "The Flight number already exists in
system"}``.  Errors that do not concern a field use the key ``error``.

Status codes:

* ``ShapeValidationError`` and request validation failures → 400
* ``SelfConflictError`` → 400
* ``NotFoundError`` → 404
* ``DuplicateKeyError`` → 409
* anything else → 500, logged with its traceback, no detail returned
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.errors import (
    DomainError,
    DuplicateKeyError,
    NotFoundError,
    SelfConflictError,
    ShapeValidationError,
)


logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred whilst processing the request"

STATUS_BY_ERROR: dict[type, int] = {
    ShapeValidationError: status.HTTP_400_BAD_REQUEST,
    SelfConflictError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateKeyError: status.HTTP_409_CONFLICT,
}


def status_for(exc: DomainError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain rejection with its field map."""
    status_code = status_for(exc)
    logger.warning(
        "%s %s rejected with %s: %s",
        request.method,
        request.url.path,
        status_code,
        exc.reasons or exc.message,
    )
    content = exc.reasons or {"error": exc.message}
    return JSONResponse(status_code=status_code, content=content)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies and path parameters as a 400 field map."""
    return await domain_error_handler(request, ShapeValidationError.from_pydantic(exc.errors()))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Keep framework errors (unknown route, wrong method) in the same body shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unexpected error while handling %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": UNEXPECTED_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
