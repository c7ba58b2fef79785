"""Wire codec: query strings, request bodies, success and error payloads."""

import json
import math
from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from tasty_client.exceptions import ClientSideError, TastyAPIError
from tasty_client.models.errors import ErrorEnvelope

T = TypeVar("T", bound=BaseModel)

# Statuses whose body is an error envelope. Other statuses, including 402,
# 405 and 409, go through the success path.
ERROR_STATUS_CODES = frozenset({400, 401, 403, 404, 415, 422, 500})


def is_error_status(status_code: int) -> bool:
    """Check whether a response status carries an error envelope."""
    return status_code in ERROR_STATUS_CODES


def _is_unset(value: Any) -> bool:
    """Zero values are omitted from query strings."""
    if value is None or value is False:
        return True
    if isinstance(value, str | list | tuple | set | frozenset):
        return len(value) == 0
    if isinstance(value, int | float | Decimal) and not isinstance(value, bool):
        return value == 0
    return False


def _format_value(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, float) and not math.isfinite(value):
        raise ClientSideError(f"query parameter {name!r} is not a finite number: {value}")
    if isinstance(value, str | int | float | Decimal):
        return str(value)
    raise ClientSideError(
        f"query parameter {name!r} has unsupported type {type(value).__name__}"
    )


def encode_query(params: BaseModel | Mapping[str, Any]) -> list[tuple[str, str]]:
    """Encode a query object as ``(name, value)`` pairs.

    Model fields are keyed by their wire alias. Unset values (None, empty
    strings, zero, False, empty collections) are skipped and sequence
    values repeat the parameter name.

    Raises:
        ClientSideError: If the object or one of its values cannot be encoded
    """
    if isinstance(params, BaseModel):
        values = params.model_dump(by_alias=True, exclude_none=True)
    elif isinstance(params, Mapping):
        values = dict(params)
    else:
        raise ClientSideError(
            f"cannot encode {type(params).__name__} as query parameters"
        )

    pairs: list[tuple[str, str]] = []
    for name, value in values.items():
        if _is_unset(value):
            continue
        if isinstance(value, set | frozenset):
            formatted = sorted(_format_value(name, v) for v in value if not _is_unset(v))
            pairs.extend((name, v) for v in formatted)
        elif isinstance(value, list | tuple):
            pairs.extend((name, _format_value(name, v)) for v in value if not _is_unset(v))
        else:
            pairs.append((name, _format_value(name, value)))
    return pairs


def _json_default(value: Any) -> Any:
    """Serialize values json.dumps does not know, refusing non-finite numbers."""
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Out of range decimal value: {value}")
        return str(value)
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(payload: Any) -> bytes:
    """Serialize a request body to JSON.

    Models are dumped in python mode so every number, including
    ``Decimal`` money fields, is checked before it is written.

    Raises:
        ClientSideError: On non-finite numbers or unserializable values
    """
    try:
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(by_alias=True, exclude_none=True)
        return json.dumps(payload, allow_nan=False, default=_json_default).encode()
    except (TypeError, ValueError) as e:
        raise ClientSideError(e) from e


def decode_result(content: bytes, result_type: type[T]) -> T:
    """Decode a success payload into ``result_type``.

    Raises:
        ClientSideError: If the payload does not match the expected shape
    """
    try:
        return result_type.model_validate_json(content)
    except ValidationError as e:
        raise ClientSideError(_describe(e)) from e


def decode_error(response: httpx.Response) -> TastyAPIError:
    """Build the API error for a response in the error status set.

    The returned error always carries the response status, including when
    the body is empty or not an error envelope.
    """
    status = response.status_code
    try:
        envelope = ErrorEnvelope.model_validate_json(response.content)
    except ValidationError as e:
        return TastyAPIError(
            f"tastytrade: unexpected HTTP {status}: {_describe(e)} (empty error)",
            status_code=status,
            response_body=_json_or_none(response),
        )

    error = envelope.error
    return TastyAPIError(
        error.message,
        status_code=status,
        code=error.code,
        errors=error.errors,
        response_body=_json_or_none(response),
    )


def _describe(error: ValidationError) -> str:
    details = error.errors(include_url=False)
    if not details:
        return str(error)
    return "; ".join(
        f"{'.'.join(str(p) for p in d['loc'])}: {d['msg']}" if d["loc"] else d["msg"]
        for d in details
    )


def _json_or_none(response: httpx.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None
