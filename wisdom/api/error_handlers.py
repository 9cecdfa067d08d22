"""Error Handlers — global exception handlers mapping failures to {"error", "code"} bodies.

Invariants:
    - WisdomError → its own status and public message; tag and cause only logged
    - Unknown route → 404 "Not Found"; wrong method → 405 "Method Not Allowed"
    - Exception (catch-all) → 500 generic message, never leaks internal details
    - The HTTP status line always equals the body's "code"

Design Decisions:
    - Three-layer handler: domain (WisdomError), routing (HTTPException), catch-all (Exception)
    - Catch-all response sets the fixed headers itself: Starlette serves it from
      ServerErrorMiddleware, outside ResponseHeadersMiddleware
    - Every body goes through the ErrorBody schema, which fixes its keys and their order
"""

import logging

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from wisdom.api.jsonp import WisdomJSONResponse
from wisdom.api.middleware import fixed_headers, request_fields
from wisdom.core.errors import (
    ErrorCategory, ErrorSeverity, InternalFailure, MethodNotAllowedError,
    RouteNotFoundError, WisdomError,
)
from wisdom.schemas.entities import ErrorBody

logger = logging.getLogger(__name__)


def register_error_handlers(
    app: FastAPI, server_name: str, media_type: str,
) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_wisdom_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app, fixed_headers(server_name, media_type))


def log_error(request: Request, exc: WisdomError) -> None:
    """Operator-facing line: requester, method, URL, diagnostic tag and cause."""
    level = (
        logging.WARNING if exc.severity == ErrorSeverity.WARNING
        else logging.ERROR
    )
    fields = request_fields(request)
    logger.log(
        level,
        f"{fields['remote_addr']} {request.method} {request.url} "
        f"[{exc.tag}] {exc.cause if exc.cause else exc.message}",
        extra={**fields, **exc.log_extra(), "status_code": exc.http_status},
    )


def error_response(exc: WisdomError, headers: dict | None = None) -> WisdomJSONResponse:
    body = ErrorBody(**exc.to_response())
    return WisdomJSONResponse(
        body.model_dump(), status_code=exc.http_status, headers=headers,
    )


def _register_wisdom_error_handler(app: FastAPI) -> None:
    """Register Wisdom domain/infrastructure error handler."""

    @app.exception_handler(WisdomError)
    async def wisdom_error_handler(request: Request, exc: WisdomError):
        log_error(request, exc)
        return error_response(exc)


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing error handler (unmatched path or method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            error = RouteNotFoundError()
        elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            error = MethodNotAllowedError()
        else:
            error = WisdomError(
                str(exc.detail), "httpExceptionHandler",
                ErrorCategory.INTERNAL, http_status=exc.status_code,
            )
        log_error(request, error)
        return error_response(error, headers=getattr(exc, "headers", None))


def _register_generic_error_handler(app: FastAPI, headers: dict) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        error = InternalFailure("unhandled", exc, ErrorCategory.INTERNAL)
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={**request_fields(request), **error.log_extra()},
        )
        return error_response(error, headers=headers)
