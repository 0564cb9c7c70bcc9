"""Map domain errors to HTTP responses."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ratings.domain.errors import (
    ErrorCode,
    InternalError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

CONFLICT_CODES = {ErrorCode.ID_TAKEN, ErrorCode.DUPLICATE}


async def validation_error_handler(request: Request, exc: ValidationError):
    """400 for bad fields, 409 when the record clashes with a stored one."""
    status_code = status.HTTP_400_BAD_REQUEST
    if exc.codes() & CONFLICT_CODES:
        status_code = status.HTTP_409_CONFLICT
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.public_message(),
            "errors": {field: code.value for field, code in exc.errors.items()},
        },
    )


async def not_found_error_handler(request: Request, exc: NotFoundError):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.public_message()},
    )


async def internal_error_handler(request: Request, exc: InternalError):
    logger.error(
        f"Internal error on {request.method} {request.url.path}: {exc.__cause__!r}",
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.public_message()},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(NotFoundError, not_found_error_handler)
    app.add_exception_handler(InternalError, internal_error_handler)
