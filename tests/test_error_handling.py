"""Tests for error handling and exception classes."""

import pytest

from tasty_client.exceptions import (
    ClientSideError,
    InvalidSessionError,
    TastyAPIError,
    TastyError,
)
from tasty_client.models.errors import ErrorDetail


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_tasty_error_is_base(self) -> None:
        """All exceptions should inherit from TastyError."""
        assert issubclass(TastyAPIError, TastyError)
        assert issubclass(ClientSideError, TastyError)
        assert issubclass(InvalidSessionError, TastyError)

    def test_can_catch_as_tasty_error(self) -> None:
        """Should be catchable as TastyError."""
        with pytest.raises(TastyError):
            raise TastyAPIError("Server error", status_code=500)


class TestTastyError:
    """Tests for base TastyError."""

    def test_str_includes_status_code_and_message(self) -> None:
        error = TastyError("Something went wrong", code="oops", status_code=400)

        assert error.message == "Something went wrong"
        assert str(error) == "Error in request 400; Code: oops; Message: Something went wrong"

    def test_defaults(self) -> None:
        error = TastyError("boom")

        assert error.status_code == 0
        assert error.code == ""
        assert error.errors == []


class TestInvalidSessionError:
    """Tests for InvalidSessionError."""

    def test_default_message(self) -> None:
        error = InvalidSessionError()

        assert error.message == "Session is invalid: Session Token cannot be nil."
        assert error.code == "invalid_session"
        assert error.status_code == 0


class TestClientSideError:
    """Tests for ClientSideError."""

    def test_wraps_exception(self) -> None:
        cause = ValueError("Out of range float values are not JSON compliant")
        error = ClientSideError(cause)

        assert error.cause is cause
        assert error.status_code == 0
        assert error.message == (
            "Client Side Error: Out of range float values are not JSON compliant"
        )

    def test_accepts_plain_message(self) -> None:
        error = ClientSideError("bad query")

        assert error.cause is None
        assert error.message == "Client Side Error: bad query"


class TestTastyAPIError:
    """Tests for TastyAPIError."""

    def test_stores_status_code(self) -> None:
        """Should store the HTTP status code."""
        error = TastyAPIError("Not found", status_code=404, code="not_found")

        assert error.status_code == 404
        assert error.code == "not_found"
        assert error.message == "Not found"

    def test_stores_field_errors(self) -> None:
        details = [ErrorDetail(domain="price", reason="must be positive")]
        error = TastyAPIError("Validation failed", status_code=422, errors=details)

        assert error.errors == details
        # copied, not aliased
        assert error.errors is not details

    def test_stores_response_body(self) -> None:
        """Should store optional response body."""
        body = {"error": {"code": "123", "message": "Details"}}
        error = TastyAPIError("Error occurred", status_code=400, response_body=body)

        assert error.response_body == body
