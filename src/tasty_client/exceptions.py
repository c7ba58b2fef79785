"""Typed exceptions for the tastytrade API client."""

from typing import Any

from tasty_client.models.errors import ErrorDetail


class TastyError(Exception):
    """Base exception for all tastytrade client errors.

    Every error carries the HTTP status it was produced under. Errors that
    never reached the server (or could not interpret its answer) report 0.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        errors: list[ErrorDetail] | None = None,
        status_code: int = 0,
    ) -> None:
        self.message = message
        self.code = code
        self.errors = list(errors) if errors else []
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return f"Error in request {self.status_code}; Code: {self.code}; Message: {self.message}"


class InvalidSessionError(TastyError):
    """No session token is held; raised before any network call."""

    def __init__(
        self,
        message: str = "Session is invalid: Session Token cannot be nil.",
    ) -> None:
        super().__init__(message, code="invalid_session")


class ClientSideError(TastyError):
    """Local failure while encoding, sending or decoding a request."""

    def __init__(self, cause: Exception | str) -> None:
        self.cause = cause if isinstance(cause, Exception) else None
        super().__init__(f"Client Side Error: {cause}")


class TastyAPIError(TastyError):
    """The API rejected the request or reported a problem."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        code: str = "",
        errors: list[ErrorDetail] | None = None,
        response_body: dict[str, Any] | None = None,
    ) -> None:
        self.response_body = response_body
        super().__init__(message, code=code, errors=errors, status_code=status_code)
