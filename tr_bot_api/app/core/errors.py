"""
Exception handlers shaping every error response.

Route handlers signal client errors by raising ``HTTPException``; the
handlers registered here render them, together with request validation
failures and unexpected exceptions, as a JSON body of the form
``{"error": {"message": "..."}}``.
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings

logger = logging.getLogger(__name__)


def error_body(message: str) -> Dict[str, Any]:
    return {"error": {"message": message}}


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn the first validation error into a readable message.

    ``loc`` looks like ``("path", "pattern_id")`` or ``("body",
    "kick_steps", 3)``; it is joined into ``path.pattern_id``.
    """
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", "Invalid value")
    if location:
        return f"Invalid '{location}': {message}"
    return message


def register_exception_handlers(app: FastAPI, app_settings: Settings) -> None:
    """Attach the error handlers to ``app``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(_describe_validation_error(exc)),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        if app_settings.is_production:
            message = "server error"
        else:
            message = str(exc) or exc.__class__.__name__
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(message),
        )
