"""Response Middleware — fixed identity headers and one access log line per request.

Invariants:
    - Every response leaving the router carries Server, X-Wisdom-Media-Type and
      Content-Type: application/json; charset=utf-8 (redirects and errors included)
    - One access line per request: "<remote> <method> <url>" plus status code
"""

import logging
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from wisdom.api.jsonp import JSON_CONTENT_TYPE

logger = logging.getLogger(__name__)


def fixed_headers(server_name: str, media_type: str) -> dict[str, str]:
    return {
        "Server": server_name,
        "X-Wisdom-Media-Type": media_type,
        "Content-Type": JSON_CONTENT_TYPE,
    }


def request_fields(request: Request) -> dict:
    """Requester address, method and path for log records."""
    return {
        "remote_addr": (
            f"{request.client.host}:{request.client.port}"
            if request.client else "unknown"
        ),
        "method": request.method,
        "path": request.url.path,
    }


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Stamp the fixed headers on every response and log the request."""

    def __init__(self, app, server_name: str, media_type: str):
        super().__init__(app)
        self._headers = fixed_headers(server_name, media_type)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        fields = request_fields(request)
        try:
            response = await call_next(request)
        except Exception:
            logger.error(
                f"{fields['remote_addr']} {request.method} {request.url} - unhandled",
                extra=fields,
            )
            raise

        for name, value in self._headers.items():
            response.headers[name] = value

        logger.info(
            f"{fields['remote_addr']} {request.method} {request.url}",
            extra={**fields, "status_code": response.status_code},
        )
        return response
