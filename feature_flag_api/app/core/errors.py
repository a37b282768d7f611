"""
Error taxonomy and exception handlers for the feature flag service.

Handlers and services raise the exceptions defined here; the handlers
registered by ``register_exception_handlers`` turn them into JSON
responses of the form ``{"error": "<message>"}``.  Starlette's own
HTTP errors (unknown route, method not allowed) are rendered in the
same shape so clients only ever have to look at one field.

Usage::

    from feature_flag_api.app.core.errors import NotFoundError

    raise NotFoundError()
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

FLAG_NOT_FOUND = "Feature flag not found"
FLAG_ALREADY_EXISTS = "Feature flag already exists"


class FlagServiceError(Exception):
    """Base class for errors returned to API clients."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(FlagServiceError):
    """Malformed request body: missing field or wrong type."""

    status_code = 400
    default_message = "Invalid request body"


class NotFoundError(FlagServiceError):
    """The flag targeted by the operation does not exist."""

    status_code = 404
    default_message = FLAG_NOT_FOUND


class ConflictError(FlagServiceError):
    """A flag with the requested name already exists."""

    status_code = 409
    default_message = FLAG_ALREADY_EXISTS


async def flag_service_error_handler(request: Request, exc: FlagServiceError) -> JSONResponse:
    """Render a ``FlagServiceError`` as ``{"error": message}``."""
    logger.warning(
        "%s %s -> %d: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render routing errors in the same shape as service errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the service's exception handlers to ``app``."""
    app.add_exception_handler(FlagServiceError, flag_service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
