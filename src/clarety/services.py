"""Build service clients from configuration."""

import httpx

from clarety import personality, speech
from clarety.config import Config, ServiceCredentials
from clarety.conversation import DEFAULT_URL as CONVERSATION_URL
from clarety.conversation import Conversation
from clarety.personality import PersonalityInsights
from clarety.speech import SpeechToText, TextToSpeech
from clarety.watson.client import ErrorPolicy, RestClient


class ClaretyError(Exception):
    """Application-level error raised while preparing service clients."""

    def __init__(self, code: str, message: str) -> None:
        """Initialize with a machine-readable code and a human-readable message.

        Args:
            code: Machine-readable error code (e.g. "not_configured").
            message: Human-readable error description.

        """
        super().__init__(message)
        self.code = code


class Services:
    """Factory for configured Watson service clients."""

    def __init__(
        self, cfg: Config, *, error_policy: ErrorPolicy = ErrorPolicy.RETURN, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        """Initialize the factory.

        Args:
            cfg: Application configuration holding per-service credentials.
            error_policy: Failure policy applied to every client built here.
            transport: Custom httpx transport shared by every client (tests only).

        """
        self._cfg = cfg
        self._error_policy = error_policy
        self._transport = transport

    def conversation(self) -> Conversation:
        """Build a Conversation client.

        Raises:
            ClaretyError: Conversation credentials are missing (code: ``not_configured``).

        """
        creds = self._require(self._cfg.conversation, "conversation")
        return Conversation(self._client(creds, CONVERSATION_URL, creds.version))

    def speech_to_text(self) -> SpeechToText:
        """Build a Speech to Text client.

        Raises:
            ClaretyError: Credentials are missing (code: ``not_configured``).

        """
        creds = self._require(self._cfg.speech_to_text, "speech_to_text")
        return SpeechToText(self._client(creds, speech.STT_DEFAULT_URL, None))

    def text_to_speech(self) -> TextToSpeech:
        """Build a Text to Speech client.

        Raises:
            ClaretyError: Credentials are missing (code: ``not_configured``).

        """
        creds = self._require(self._cfg.text_to_speech, "text_to_speech")
        return TextToSpeech(self._client(creds, speech.TTS_DEFAULT_URL, None), voice=creds.voice)

    def personality_insights(self) -> PersonalityInsights:
        """Build a Personality Insights client.

        Raises:
            ClaretyError: Credentials are missing (code: ``not_configured``).

        """
        creds = self._require(self._cfg.personality_insights, "personality_insights")
        return PersonalityInsights(self._client(creds, personality.DEFAULT_URL, creds.version))

    def workspace_id(self, override: str | None = None) -> str:
        """Resolve the workspace to chat with: explicit override, then config.

        Raises:
            ClaretyError: No workspace given or configured (code: ``no_workspace``).

        """
        if override:
            return override
        if self._cfg.conversation is not None and self._cfg.conversation.workspace_id:
            return self._cfg.conversation.workspace_id
        raise ClaretyError("no_workspace", "No workspace given. Pass --workspace or set conversation.workspace_id.")

    def require(self, *sections: str) -> None:
        """Check that every named service has credentials, before any client is built.

        Raises:
            ClaretyError: A section is missing (code: ``not_configured``).

        """
        for section in sections:
            self._require(getattr(self._cfg, section), section)

    def _client(self, creds: ServiceCredentials, default_url: str, version: str | None) -> RestClient:
        return RestClient(
            creds.url or default_url,
            creds.username,
            creds.password,
            version=version,
            timeout=self._cfg.timeout,
            error_policy=self._error_policy,
            transport=self._transport,
        )

    def _require[C: ServiceCredentials](self, creds: C | None, section: str) -> C:
        if creds is None:
            raise ClaretyError("not_configured", f"Missing [{section}] credentials in {self._cfg.config_path}.")
        return creds
