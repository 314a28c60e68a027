"""Base class for service bindings built on RestClient."""

from types import TracebackType
from typing import Self

from clarety.watson.client import RestClient


class WatsonService:
    """Owns one RestClient; closing the service closes the client."""

    def __init__(self, client: RestClient) -> None:
        self._client = client

    @property
    def client(self) -> RestClient:
        """Underlying REST client."""
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        await self.aclose()
