"""Declarative descriptors for REST operations.

An operation is data, not code: method, path template, the optional query
parameters it accepts, the kind of body it sends and the shape it returns.
"""

from dataclasses import dataclass, field
from enum import StrEnum

JSON_TYPE = "application/json"


class BodyKind(StrEnum):
    """What an endpoint sends as its request body."""

    NONE = "none"
    JSON = "json"
    RAW = "raw"


@dataclass(frozen=True)
class Endpoint[T]:
    """One REST operation.

    ``response`` is a pydantic model class, ``bytes`` for raw payloads, or
    None for operations that return nothing.
    """

    method: str
    path: str
    response: type[T] | None = None
    query: tuple[str, ...] = ()
    body: BodyKind = BodyKind.NONE
    content_type: str | None = None
    accept: str = JSON_TYPE
    name: str = field(default="", compare=False)

    def __str__(self) -> str:
        return self.name or f"{self.method} {self.path}"


def get[T](path: str, response: type[T] | None, *query: str, name: str = "", accept: str = JSON_TYPE) -> Endpoint[T]:
    """Build a GET endpoint."""
    return Endpoint(method="GET", path=path, response=response, query=query, accept=accept, name=name)


def post[T](
    path: str,
    response: type[T] | None,
    *query: str,
    body: BodyKind = BodyKind.JSON,
    content_type: str | None = JSON_TYPE,
    accept: str = JSON_TYPE,
    name: str = "",
) -> Endpoint[T]:
    """Build a POST endpoint (JSON body unless told otherwise)."""
    return Endpoint(
        method="POST",
        path=path,
        response=response,
        query=query,
        body=body,
        content_type=content_type,
        accept=accept,
        name=name,
    )


def delete(path: str, *, name: str = "") -> Endpoint[None]:
    """Build a DELETE endpoint that returns nothing."""
    return Endpoint(method="DELETE", path=path, name=name)
