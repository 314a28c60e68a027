"""Shared fixtures: a recording httpx mock transport and clients bound to it."""

import json
from collections.abc import Callable

import httpx
import pytest

from clarety.conversation import Conversation
from clarety.watson.client import ErrorPolicy, RestClient

URL = "https://watson.test/conversation/api"
VERSION = "2017-05-26"
USERNAME = "user"
PASSWORD = "pass"  # noqa: S105


class FakeWatson:
    """Mock transport handler that records requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.content = b"{}"
        self.headers: dict[str, str] = {"Content-Type": "application/json"}
        self.error: Exception | None = None
        self.replies: list[tuple[int, bytes]] = []

    def reply(self, status: int, body: object = None, *, raw: bytes | None = None) -> None:
        """Set the response for every following request."""
        self.status = status
        self.content = raw if raw is not None else (b"" if body is None else json.dumps(body).encode())

    def queue(self, status: int, body: object) -> None:
        """Queue a one-off response, served before the default one."""
        self.replies.append((status, json.dumps(body).encode()))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.replies:
            status, content = self.replies.pop(0)
            return httpx.Response(status, content=content, headers=self.headers)
        return httpx.Response(self.status, content=self.content, headers=self.headers)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> object:
        return json.loads(self.last.content)


@pytest.fixture
def fake() -> FakeWatson:
    """Fresh mock service."""
    return FakeWatson()


@pytest.fixture
def make_client(fake: FakeWatson) -> Callable[..., RestClient]:
    """Factory for RestClients wired to the mock service."""

    def _make(*, version: str | None = VERSION, error_policy: ErrorPolicy = ErrorPolicy.RETURN) -> RestClient:
        return RestClient(URL, USERNAME, PASSWORD, version=version, error_policy=error_policy, transport=httpx.MockTransport(fake))

    return _make


@pytest.fixture
def client(make_client: Callable[..., RestClient]) -> RestClient:
    """Versioned RestClient wired to the mock service."""
    return make_client()


@pytest.fixture
def conversation(client: RestClient) -> Conversation:
    """Conversation service wired to the mock service."""
    return Conversation(client)
