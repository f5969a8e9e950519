"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON responses whose ``error`` field is human-readable.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from modelcdn.core.config import get_settings
from modelcdn.domain.exceptions import ModelCdnException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "MISSING_INPUT": 400,
    "INVALID_INPUT": 400,
    "UNSUPPORTED_TYPE": 400,
    "PAYLOAD_TOO_LARGE": 400,
    "INVALID_PATH": 403,
    "UNAUTHORIZED": 401,
    "NOT_FOUND": 404,
    "UPSTREAM_FETCH_FAILED": 400,
    "STORAGE_FAILURE": 500,
    "ADMIN_NOT_CONFIGURED": 500,
}


def status_for(exc: ModelCdnException) -> int:
    """Return the HTTP status for a domain exception (400 when the code is unmapped)."""
    return _ERROR_CODE_STATUS.get(exc.error_code, 400)


def _modelcdn_exception_handler(
    request: Request, exc: ModelCdnException
) -> JSONResponse:
    """Return JSON from ModelCdnException.to_dict() with appropriate status code.

    Server-side failures keep ``details`` (paths, OS errors) in the log only,
    unless settings.debug.
    """
    status = status_for(exc)
    content = exc.to_dict()
    if status >= 500:
        logger.error(
            "%s %s failed: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.details,
        )
        if not get_settings().debug:
            content.pop("details", None)
    else:
        logger.warning(
            "%s %s rejected: %s", request.method, request.url.path, exc.error_code
        )
    return JSONResponse(
        status_code=status,
        content=content,
        headers=exc.headers,
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "code": "VALIDATION_ERROR",
            "details": jsonable_encoder(exc.errors()),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail, "code": "HTTP_ERROR"},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": detail, "code": "INTERNAL_ERROR"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: ModelCdnException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(ModelCdnException, _modelcdn_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
