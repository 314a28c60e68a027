"""Generic asynchronous REST client for Watson services.

One instance per service: immutable base URL, Basic credentials and API
version. Every operation goes through RestClient.invoke.
"""

import logging
from collections.abc import Mapping
from enum import StrEnum
from types import TracebackType
from typing import Any, Self

import httpx

from clarety.watson.endpoint import Endpoint
from clarety.watson.errors import TransportError, WatsonError
from clarety.watson.request import QueryValue, build_request
from clarety.watson.response import decode_body, interpret_error
from clarety.watson.result import Result

logger = logging.getLogger(__name__)

USER_AGENT = "clarety-python"
DEFAULT_TIMEOUT = 30.0


class ErrorPolicy(StrEnum):
    """What invoke does with a failure."""

    RETURN = "return"  # hand back Result.fail(error)
    RAISE = "raise"  # raise the WatsonError


class RestClient:
    """Authenticated, versioned JSON client for one Watson service instance."""

    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        *,
        version: str | None = None,
        default_headers: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        error_policy: ErrorPolicy = ErrorPolicy.RETURN,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Service base URL, e.g. ``https://gateway.watsonplatform.net/conversation/api``.
            username: Basic auth username.
            password: Basic auth password.
            version: API version date sent as the first query parameter, or None for unversioned services.
            default_headers: Extra headers merged into every request.
            timeout: HTTP timeout in seconds.
            error_policy: Whether failures are returned or raised.
            transport: Custom httpx transport (tests pass httpx.MockTransport).

        """
        self._version = version
        self._error_policy = error_policy
        headers = {"User-Agent": USER_AGENT, **(default_headers or {})}
        self._http = httpx.AsyncClient(
            base_url=url.rstrip("/"),
            auth=httpx.BasicAuth(username, password),
            headers=headers,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def version(self) -> str | None:
        """API version pinned at construction."""
        return self._version

    @property
    def base_url(self) -> str:
        """Service base URL."""
        return str(self._http.base_url)

    async def invoke[T](
        self,
        endpoint: Endpoint[T],
        *,
        path_params: Mapping[str, object] | None = None,
        query: Mapping[str, QueryValue] | None = None,
        body: object = None,
        content_type: str | None = None,
        accept: str | None = None,
    ) -> Result[T]:
        """Run one operation: build the request, send it, interpret the response.

        Raises:
            WatsonError: Only with ErrorPolicy.RAISE.

        """
        try:
            req = build_request(
                endpoint,
                version=self._version,
                path_params=path_params,
                query=query,
                body=body,
                content_type=content_type,
                accept=accept,
            )
        except WatsonError as e:
            return self._failed(endpoint, e)

        logger.debug("%s %s", req.method, req.path)
        try:
            resp = await self._http.request(req.method, req.path, params=req.params, content=req.content, headers=req.headers)
        except httpx.HTTPError as e:
            return self._failed(endpoint, TransportError(f"{type(e).__name__}: {e}"))

        error = interpret_error(resp.status_code, resp.content)
        if error is not None:
            return self._failed(endpoint, error)
        try:
            value = decode_body(endpoint.response, resp.status_code, resp.content)
        except WatsonError as e:
            return self._failed(endpoint, e)
        return Result.success(value)  # type: ignore[return-value]

    def _failed(self, endpoint: Endpoint[Any], error: WatsonError) -> Result:
        """Log a failure and apply the error policy."""
        logger.warning("%s failed: %s: %s", endpoint, error.code, error)
        if self._error_policy is ErrorPolicy.RAISE:
            raise error
        return Result.fail(error)

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        await self.aclose()
