"""Tests for RestClient.invoke against a mock transport."""

import base64

import httpx
import pytest

from clarety.conversation import endpoints as ep
from clarety.watson.client import USER_AGENT, ErrorPolicy
from clarety.watson.errors import DecodingError, EncodingError, SerializationError, ServiceError, TransportError
from clarety.watson.result import Result

USERNAME = "user"
PASSWORD = "pass"  # noqa: S105
VERSION = "2017-05-26"

WORKSPACE = {"workspace_id": "w1", "name": "Bot", "language": "en"}


class TestResult:
    """Result builders."""

    def test_success(self):
        """Success carries the value and no error."""
        result = Result.success(5)
        assert result.ok is True
        assert result.unwrap() == 5
        assert result.error is None

    def test_fail(self):
        """Failure carries the error; unwrap raises it."""
        error = TransportError(status=503)
        result = Result.fail(error)
        assert result.ok is False
        with pytest.raises(TransportError):
            result.unwrap()


class TestInvoke:
    """Request wiring and response handling."""

    @pytest.mark.asyncio
    async def test_success_decodes_model(self, client, fake):
        """A 2xx body is decoded into the declared model."""
        fake.reply(200, WORKSPACE)
        result = await client.invoke(ep.GET_WORKSPACE, path_params={"workspace_id": "w1"})
        assert result.ok
        assert result.unwrap().name == "Bot"

    @pytest.mark.asyncio
    async def test_basic_auth_and_user_agent(self, client, fake):
        """Every request carries Basic credentials and the client's user agent."""
        fake.reply(200, WORKSPACE)
        await client.invoke(ep.GET_WORKSPACE, path_params={"workspace_id": "w1"})
        token = base64.b64encode(f"{USERNAME}:{PASSWORD}".encode()).decode()
        assert fake.last.headers["Authorization"] == f"Basic {token}"
        assert fake.last.headers["User-Agent"] == USER_AGENT

    @pytest.mark.asyncio
    async def test_url_and_version(self, client, fake):
        """The path is appended to the base URL and version is the first query parameter."""
        fake.reply(200, {"workspaces": []})
        await client.invoke(ep.LIST_WORKSPACES, query={"page_limit": 5})
        assert fake.last.url.path == "/conversation/api/v1/workspaces"
        assert list(fake.last.url.params.multi_items()) == [("version", VERSION), ("page_limit", "5")]

    @pytest.mark.asyncio
    async def test_void_operation(self, client, fake):
        """Operations without a result succeed with None."""
        fake.reply(200, {})
        result = await client.invoke(ep.DELETE_WORKSPACE, path_params={"workspace_id": "w1"})
        assert result.ok
        assert result.value is None
        assert fake.last.method == "DELETE"

    @pytest.mark.asyncio
    async def test_service_error(self, client, fake):
        """A structured error body surfaces as ServiceError with the status."""
        fake.reply(404, {"error": "Resource not found", "code": 404})
        result = await client.invoke(ep.GET_WORKSPACE, path_params={"workspace_id": "missing"})
        assert not result.ok
        assert isinstance(result.error, ServiceError)
        assert result.error.status == 404

    @pytest.mark.asyncio
    async def test_unstructured_error(self, client, fake):
        """An error status with an unrecognized body is never dropped."""
        fake.reply(503, raw=b"Service Unavailable")
        result = await client.invoke(ep.LIST_WORKSPACES)
        assert isinstance(result.error, TransportError)
        assert result.error.status == 503

    @pytest.mark.asyncio
    async def test_network_failure(self, client, fake):
        """Connection failures become TransportError without a status."""
        fake.error = httpx.ConnectError("connection refused")
        result = await client.invoke(ep.LIST_WORKSPACES)
        assert isinstance(result.error, TransportError)
        assert result.error.status is None
        assert "ConnectError" in str(result.error)

    @pytest.mark.asyncio
    async def test_decoding_failure(self, client, fake):
        """A 2xx body of the wrong shape is a DecodingError."""
        fake.reply(200, {"unexpected": True})
        result = await client.invoke(ep.GET_WORKSPACE, path_params={"workspace_id": "w1"})
        assert isinstance(result.error, DecodingError)

    @pytest.mark.asyncio
    async def test_encoding_failure_skips_network(self, client, fake):
        """An unencodable path component fails before any request is sent."""
        result = await client.invoke(ep.GET_WORKSPACE, path_params={"workspace_id": ""})
        assert isinstance(result.error, EncodingError)
        assert fake.calls == 0

    @pytest.mark.asyncio
    async def test_serialization_failure_skips_network(self, client, fake):
        """An unserializable body fails before any request is sent."""
        result = await client.invoke(ep.CREATE_WORKSPACE, body={"metadata": {1, 2}})
        assert isinstance(result.error, SerializationError)
        assert fake.calls == 0


class TestErrorPolicy:
    """Returned versus raised failures."""

    @pytest.mark.asyncio
    async def test_raise_policy(self, make_client, fake):
        """With RAISE, failures are raised instead of returned."""
        client = make_client(error_policy=ErrorPolicy.RAISE)
        fake.reply(400, {"error": "Invalid request"})
        with pytest.raises(ServiceError, match="Invalid request"):
            await client.invoke(ep.LIST_WORKSPACES)

    @pytest.mark.asyncio
    async def test_raise_policy_success(self, make_client, fake):
        """With RAISE, successes are still returned as results."""
        client = make_client(error_policy=ErrorPolicy.RAISE)
        fake.reply(200, {"workspaces": []})
        result = await client.invoke(ep.LIST_WORKSPACES)
        assert result.ok

    @pytest.mark.asyncio
    async def test_failure_is_logged(self, client, fake, caplog):
        """Returned failures are still logged."""
        fake.reply(500, raw=b"")
        with caplog.at_level("WARNING", logger="clarety.watson.client"):
            await client.invoke(ep.LIST_WORKSPACES)
        assert "list_workspaces failed" in caplog.text
