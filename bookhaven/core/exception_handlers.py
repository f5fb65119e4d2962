"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to JSON responses shaped {"error", "message", "details"}.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookhaven.core.config import get_settings
from bookhaven.domain.exceptions import BookHavenException, ConflictException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "VALIDATION_ERROR": 400,
}


def _status_for(exc: BookHavenException) -> int:
    if isinstance(exc, ConflictException):
        return 409
    return _ERROR_CODE_STATUS.get(exc.error_code, 400)


def _bookhaven_exception_handler(
    request: Request, exc: BookHavenException
) -> JSONResponse:
    """Return JSON from BookHavenException.to_dict() with the mapped status code."""
    status = _status_for(exc)
    if status == 409:
        logger.info("Conflict on %s %s: %s", request.method, request.url.path, exc.error_code)
    return JSONResponse(status_code=status, content=jsonable_encoder(exc.to_dict()))


def _field_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors to {field, message}; field is the dotted location."""
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        errors.append({"field": ".".join(loc), "message": err.get("msg", "")})
    return errors


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with one entry per invalid field."""
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": {"errors": _field_errors(exc)},
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail, "details": {}},
        headers=getattr(exc, "headers", None),
    )


def _rate_limit_exception_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Return 429 in the shared error shape; the exceeded limit goes in details."""
    logger.info("Rate limit hit on %s %s: %s", request.method, request.url.path, exc.detail)
    response = JSONResponse(
        status_code=429,
        content={
            "error": "RATE_LIMITED",
            "message": "Too many requests. Please try again later.",
            "details": {"limit": str(exc.detail)},
        },
    )
    view_limit = getattr(request.state, "view_rate_limit", None)
    limiter = getattr(request.app.state, "limiter", None)
    if limiter is not None and view_limit is not None:
        response = limiter._inject_headers(response, view_limit)
    return response


def _store_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Return 500 for entity store failures; the driver message is never exposed."""
    logger.exception("Store error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "STORE_ERROR",
            "message": "The data store could not complete the request",
            "details": {},
        },
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail, "details": {}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: BookHavenException (and
    subclasses), RequestValidationError, RateLimitExceeded,
    StarletteHTTPException, SQLAlchemyError, generic Exception.
    """
    app.add_exception_handler(BookHavenException, _bookhaven_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _store_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
