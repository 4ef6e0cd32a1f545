"""Exception handlers that keep every failure body as ``{"error": ...}``."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.models import ErrorKind, OutwardError

logger = structlog.get_logger(__name__)


async def outward_error_handler(request: Request, exc: OutwardError) -> JSONResponse:
    """Render an OutwardError with its own status."""
    logger.info(
        "outward_error",
        path=request.url.path,
        kind=exc.kind.name,
        status_code=exc.status_code,
        error=exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors."""
    logger.warning("validation_error", path=request.url.path, errors=exc.errors())
    return JSONResponse(
        status_code=ErrorKind.INVALID_ZIPCODE.status_code,
        content={"error": ErrorKind.INVALID_ZIPCODE.default_message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions."""
    logger.warning(
        "http_exception",
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.error(
        "unexpected_exception",
        path=request.url.path,
        error=str(exc),
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": ErrorKind.INTERNAL.default_message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an app."""
    app.add_exception_handler(OutwardError, outward_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
