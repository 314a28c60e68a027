"""Tests for building service clients from configuration."""

from pathlib import Path

import httpx
import pytest

from clarety.config import Config, ConversationCredentials, PersonalityCredentials, ServiceCredentials
from clarety.personality import DEFAULT_URL as PERSONALITY_URL
from clarety.services import ClaretyError, Services
from clarety.speech import STT_DEFAULT_URL
from clarety.watson.client import ErrorPolicy
from clarety.watson.errors import TransportError

CONFIG_DIR = Path("/fake/config-dir")


def make_config(**kwargs):
    return Config(config_dir=CONFIG_DIR, **kwargs)


class TestServiceClients:
    """Clients get their URL and version from credentials."""

    def test_conversation_versioned(self):
        """Conversation uses its configured version and the public URL by default."""
        services = Services(make_config(conversation=ConversationCredentials(username="u", password="p", version="2018-02-16")))
        conversation = services.conversation()
        assert conversation.client.version == "2018-02-16"
        assert conversation.client.base_url.startswith("https://gateway.watsonplatform.net/conversation/api")

    def test_speech_unversioned(self):
        """Speech to Text sends no version."""
        services = Services(make_config(speech_to_text=ServiceCredentials(username="u", password="p")))
        stt = services.speech_to_text()
        assert stt.client.version is None
        assert stt.client.base_url.startswith(STT_DEFAULT_URL)

    def test_custom_url(self):
        """A configured URL replaces the public default."""
        creds = PersonalityCredentials(username="u", password="p", url="https://eu.example.test/pi/api/")
        insights = Services(make_config(personality_insights=creds)).personality_insights()
        assert insights.client.base_url.startswith("https://eu.example.test/pi/api")
        assert not insights.client.base_url.startswith(PERSONALITY_URL)
        assert insights.client.version == "2017-10-13"

    def test_missing_credentials(self):
        """Unconfigured services are reported with the section name."""
        services = Services(make_config())
        with pytest.raises(ClaretyError) as exc_info:
            services.text_to_speech()
        assert exc_info.value.code == "not_configured"
        assert "[text_to_speech]" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_policy_and_transport_passed(self):
        """The factory's error policy and transport reach every client."""
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        cfg = make_config(conversation=ConversationCredentials(username="u", password="p"))
        services = Services(cfg, error_policy=ErrorPolicy.RAISE, transport=transport)
        async with services.conversation() as conversation:
            with pytest.raises(TransportError):
                await conversation.list_workspaces()


class TestWorkspaceId:
    """Workspace resolution."""

    def test_override_wins(self):
        """An explicit workspace beats the configured one."""
        services = Services(make_config(conversation=ConversationCredentials(username="u", password="p", workspace_id="cfg")))
        assert services.workspace_id("cli") == "cli"

    def test_from_config(self):
        """Without override the configured workspace is used."""
        services = Services(make_config(conversation=ConversationCredentials(username="u", password="p", workspace_id="cfg")))
        assert services.workspace_id() == "cfg"

    def test_none_available(self):
        """No workspace anywhere is an error."""
        with pytest.raises(ClaretyError) as exc_info:
            Services(make_config()).workspace_id()
        assert exc_info.value.code == "no_workspace"


class TestRequire:
    """Up-front credential checks."""

    def test_all_configured(self):
        """Configured sections pass."""
        cfg = make_config(
            conversation=ConversationCredentials(username="u", password="p"),
            speech_to_text=ServiceCredentials(username="u", password="p"),
        )
        Services(cfg).require("conversation", "speech_to_text")

    def test_first_missing_reported(self):
        """The missing section is named."""
        services = Services(make_config(conversation=ConversationCredentials(username="u", password="p")))
        with pytest.raises(ClaretyError, match=r"\[speech_to_text\]") as exc_info:
            services.require("conversation", "speech_to_text", "text_to_speech")
        assert exc_info.value.code == "not_configured"
