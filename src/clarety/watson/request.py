"""Request builder: endpoint descriptor + arguments -> PreparedRequest.

Every check here runs before the network is touched. A bad path component
raises EncodingError, a body that cannot become JSON raises SerializationError.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

from pydantic import BaseModel

from clarety.watson.endpoint import BodyKind, Endpoint
from clarety.watson.errors import EncodingError, SerializationError

type QueryValue = str | int | bool | None


@dataclass(frozen=True)
class PreparedRequest:
    """A fully marshalled request, ready for the HTTP client."""

    method: str
    path: str
    params: list[tuple[str, str]] = field(default_factory=list)
    content: bytes | None = None
    headers: dict[str, str] = field(default_factory=dict)


def encode_segment(value: object) -> str:
    """Percent-encode a value as exactly one path segment.

    Every reserved character is escaped, including ``/``.

    Raises:
        EncodingError: Value is not a non-empty string or is not valid Unicode.

    """
    if not isinstance(value, str) or not value:
        raise EncodingError(f"Path component must be a non-empty string, got {value!r}.")
    try:
        return quote(value, safe="")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Path component {value!r} cannot be percent-encoded: {e.reason}.") from None


def encode_path(template: str, path_params: Mapping[str, object]) -> str:
    """Fill a path template with percent-encoded segments.

    Raises:
        EncodingError: A placeholder is missing or a value cannot be encoded.

    """
    try:
        return template.format_map({key: encode_segment(value) for key, value in path_params.items()})
    except KeyError as e:
        raise EncodingError(f"Missing path parameter {e.args[0]!r} for {template}.") from None


def format_query_value(value: str | int | bool) -> str:
    """Render a query value: booleans as ``true``/``false``, numbers as decimal."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(endpoint: Endpoint[Any], version: str | None, query: Mapping[str, QueryValue]) -> list[tuple[str, str]]:
    """Build ordered query pairs: ``version`` first, then present optional parameters.

    Raises:
        ValueError: A parameter is not declared by the endpoint.

    """
    unknown = set(query) - set(endpoint.query)
    if unknown:
        msg = f"{endpoint} does not accept query parameters: {', '.join(sorted(unknown))}"
        raise ValueError(msg)
    params: list[tuple[str, str]] = []
    if version is not None:
        params.append(("version", version))
    for name in endpoint.query:
        value = query.get(name)
        if value is not None:
            params.append((name, format_query_value(value)))
    return params


def _jsonable(obj: object) -> object:
    """json.dumps hook for pydantic models nested in plain containers."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    msg = f"Object of type {type(obj).__name__} is not JSON serializable"
    raise TypeError(msg)


def encode_body(body: object) -> bytes:
    """Serialize a request body to compact JSON bytes, omitting None fields of models.

    Raises:
        SerializationError: Circular reference, non-encodable value, or NaN/Infinity.

    """
    try:
        return json.dumps(body, default=_jsonable, allow_nan=False, separators=(",", ":")).encode()
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"Request body cannot be serialized to JSON: {e}") from None


def build_request(
    endpoint: Endpoint[Any],
    *,
    version: str | None,
    path_params: Mapping[str, object] | None = None,
    query: Mapping[str, QueryValue] | None = None,
    body: object = None,
    content_type: str | None = None,
    accept: str | None = None,
) -> PreparedRequest:
    """Marshal one call into a PreparedRequest.

    Raises:
        EncodingError: A path parameter cannot be percent-encoded.
        SerializationError: The body cannot be serialized.

    """
    path = encode_path(endpoint.path, path_params or {})
    params = encode_query(endpoint, version, query or {})
    headers = {"Accept": accept or endpoint.accept}

    content: bytes | None = None
    if body is not None and endpoint.body is BodyKind.JSON:
        content = encode_body(body)
    elif body is not None and endpoint.body is BodyKind.RAW:
        content = body.encode() if isinstance(body, str) else bytes(body)  # type: ignore[call-overload]
    if content is not None:
        headers["Content-Type"] = content_type or endpoint.content_type or "application/octet-stream"

    return PreparedRequest(method=endpoint.method, path=path, params=params, content=content, headers=headers)
