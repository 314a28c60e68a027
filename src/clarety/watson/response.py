"""Response interpreter: HTTP status + body -> value or WatsonError.

Two tiers. A 2xx status is success regardless of body. Otherwise the body is
checked against ERROR_ENVELOPE_V1; a body that does not match it fails closed
with the raw status instead of being ignored.
"""

import json
from typing import Any

from pydantic import BaseModel, ValidationError

from clarety.watson.errors import DecodingError, ServiceError, TransportError, WatsonError

# Error body contract, version 1: a JSON object with a top-level "error" string.
#   {"error": "Workspace not found", "code": 404}
# "code" is optional and informational; the HTTP status is authoritative.
ERROR_ENVELOPE_V1 = "error"

# Status assumed for a structured error body when the response carries none.
DEFAULT_ERROR_STATUS = 400


def is_success(status: int | None) -> bool:
    """Check whether an HTTP status is in the 2xx range."""
    return status is not None and 200 <= status < 300


def parse_error_message(body: bytes) -> str | None:
    """Extract the ``error`` string from a JSON error body, or None if the body does not match."""
    try:
        obj = json.loads(body)
    except ValueError:
        return None
    if not isinstance(obj, dict):
        return None
    message = obj.get(ERROR_ENVELOPE_V1)
    return message if isinstance(message, str) else None


def interpret_error(status: int | None, body: bytes | None) -> WatsonError | None:
    """Classify a response. Return None on success, otherwise the matching error."""
    if is_success(status):
        return None
    if not body:
        return TransportError(status=status)
    message = parse_error_message(body)
    if message is None:
        return TransportError(status=status)
    return ServiceError(message, status=status if status is not None else DEFAULT_ERROR_STATUS)


def decode_body[T](response: type[T] | None, status: int, body: bytes) -> T | None:
    """Decode a successful body into the declared shape.

    Raises:
        DecodingError: Body is not valid JSON for the declared model.

    """
    if response is None:
        return None
    if response is bytes:
        return body  # type: ignore[return-value]
    if issubclass(response, BaseModel):
        try:
            return response.model_validate_json(body or b"null")
        except ValidationError as e:
            raise DecodingError(f"Unexpected {response.__name__} payload: {e.error_count()} validation error(s).", status=status) from None
    return _decode_plain(response, status, body)


def _decode_plain(response: type[Any], status: int, body: bytes) -> Any:
    """Decode JSON into a plain container type such as dict."""
    try:
        obj = json.loads(body)
    except ValueError:
        raise DecodingError("Response body is not valid JSON.", status=status) from None
    if not isinstance(obj, response):
        raise DecodingError(f"Expected {response.__name__}, got {type(obj).__name__}.", status=status)
    return obj
