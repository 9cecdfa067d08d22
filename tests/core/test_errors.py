"""Error Hierarchy — wire and log projections.

Tests:
    - to_response() carries only the public message and the status code
    - log_extra() carries the diagnostic tag and cause
    - NotFoundError builds "<Entity> not found"; InternalFailure uses the fixed message
"""

from wisdom.core.errors import (
    GENERIC_FAILURE_MESSAGE, ErrorCategory, ErrorSeverity, InternalFailure,
    MethodNotAllowedError, NotFoundError, RouteNotFoundError, WisdomError,
)


def test_not_found_message_and_status():
    err = NotFoundError("Author", "authorTwitterHandler.fetch_author_by_handle")
    assert err.message == "Author not found"
    assert err.http_status == 404
    assert err.severity == ErrorSeverity.WARNING
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND


def test_wire_projection_hides_tag_and_cause():
    err = InternalFailure("SqlQuoteStore.fetch_tags", OSError("socket closed"))
    assert err.to_response() == {"error": GENERIC_FAILURE_MESSAGE, "code": 500}


def test_log_projection_carries_tag_and_cause():
    cause = OSError("socket closed")
    err = InternalFailure("SqlQuoteStore.fetch_tags", cause)
    extra = err.log_extra()
    assert extra["error_tag"] == "SqlQuoteStore.fetch_tags"
    assert "socket closed" in extra["error_cause"]


def test_log_projection_without_cause():
    assert NotFoundError("Tag", "t").log_extra()["error_cause"] is None


def test_route_errors():
    assert RouteNotFoundError().to_response() == {"error": "Not Found", "code": 404}
    assert MethodNotAllowedError().to_response() == {
        "error": "Method Not Allowed", "code": 405,
    }


def test_all_errors_share_base():
    for err in (
        NotFoundError("Quote", "t"), RouteNotFoundError(),
        MethodNotAllowedError(), InternalFailure("t"),
    ):
        assert isinstance(err, WisdomError)
