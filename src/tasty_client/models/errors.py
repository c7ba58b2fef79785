"""Error envelope models."""

from tasty_client.models.common import TastyModel


class ErrorDetail(TastyModel):
    """A single field-level failure inside a rejected request."""

    domain: str = ""
    reason: str = ""


class ErrorBody(TastyModel):
    """The ``error`` object of an error response."""

    code: str = ""
    message: str = ""
    errors: list[ErrorDetail] | None = None


class ErrorEnvelope(TastyModel):
    """``{"error": {"code": ..., "message": ..., "errors": [...]}}``"""

    error: ErrorBody
