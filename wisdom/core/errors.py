"""Error Hierarchy — typed exceptions for every Wisdom failure mode.

Invariants:
    - Every error has a public message, a diagnostic tag, an optional cause,
      a category, a severity and an HTTP status
    - to_response() is the only wire projection: {"error": ..., "code": ...}
    - tag and cause only ever appear in log records (log_extra())

Design Decisions:
    - Single hierarchy with WisdomError base: one FastAPI handler catches all (ADR: uniform error shape)
    - Tag names the call site (e.g. "SqlQuoteStore.fetch_tag_by_id") so operators can
      find the failing query without exposing it to clients
"""

from enum import Enum


GENERIC_FAILURE_MESSAGE = (
    "OOOOOPPPSSSS! error happen. don't panic! we will be back soon :)"
)


class ErrorSeverity(str, Enum):
    """Error severity — selects the log level for the error line."""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    DATABASE = "database"
    SERIALIZATION = "serialization"
    INTERNAL = "internal"


class WisdomError(Exception):
    """Base exception for all Wisdom errors."""

    def __init__(
        self,
        message: str,
        tag: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        cause: BaseException | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.tag = tag
        self.category = category
        self.severity = severity
        self.cause = cause
        self.http_status = http_status

    def to_response(self) -> dict:
        """Wire projection — public message and status code only."""
        return {"error": self.message, "code": self.http_status}

    def log_extra(self) -> dict:
        """Log projection — diagnostic tag and underlying cause."""
        return {
            "error_tag": self.tag,
            "error_cause": repr(self.cause) if self.cause else None,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class NotFoundError(WisdomError):
    """Requested entity (quote, author, tag) does not exist."""
    def __init__(
        self, resource_type: str, tag: str, cause: BaseException | None = None,
    ):
        super().__init__(
            f"{resource_type} not found", tag,
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING,
            cause, 404,
        )
        self.resource_type = resource_type


class RouteNotFoundError(WisdomError):
    """No route matches the request path."""
    def __init__(self, tag: str = "notFoundHandler"):
        super().__init__(
            "Not Found", tag, ErrorCategory.ROUTE_NOT_FOUND,
            ErrorSeverity.WARNING, None, 404,
        )


class MethodNotAllowedError(WisdomError):
    """Route exists but not for this HTTP method."""
    def __init__(self, tag: str = "methodNotAllowedHandler"):
        super().__init__(
            "Method Not Allowed", tag, ErrorCategory.METHOD_NOT_ALLOWED,
            ErrorSeverity.WARNING, None, 405,
        )


# ─── Server Errors (500-level) ──────────────────────────────────

class InternalFailure(WisdomError):
    """Query, row-scan or serialization failure. Client sees a fixed message."""
    def __init__(
        self,
        tag: str,
        cause: BaseException | None = None,
        category: ErrorCategory = ErrorCategory.DATABASE,
    ):
        super().__init__(
            GENERIC_FAILURE_MESSAGE, tag, category,
            ErrorSeverity.ERROR, cause, 500,
        )
