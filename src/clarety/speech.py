"""Speech to Text and Text to Speech bindings.

Both services are unversioned: their clients are built with version=None.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from clarety.watson.client import RestClient
from clarety.watson.endpoint import BodyKind, post
from clarety.watson.result import Result
from clarety.watson.service import WatsonService

STT_DEFAULT_URL = "https://stream.watsonplatform.net/speech-to-text/api"
TTS_DEFAULT_URL = "https://stream.watsonplatform.net/text-to-speech/api"

DEFAULT_AUDIO_TYPE = "audio/wav"
DEFAULT_VOICE = "en-US_AllisonVoice"

AUDIO_TYPES = {
    ".wav": "audio/wav",
    ".flac": "audio/flac",
    ".mp3": "audio/mp3",
    ".ogg": "audio/ogg;codecs=opus",
    ".opus": "audio/ogg;codecs=opus",
    ".webm": "audio/webm",
}


def audio_type_for(path: Path) -> str:
    """Guess the audio content type from a file suffix, defaulting to WAV."""
    return AUDIO_TYPES.get(path.suffix.lower(), DEFAULT_AUDIO_TYPE)


# --- Speech to Text ---


class SpeechAlternative(BaseModel):
    model_config = ConfigDict(extra="allow")

    transcript: str
    confidence: float | None = None


class SpeechResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    final: bool = False
    alternatives: list[SpeechAlternative] = Field(default_factory=list)


class SpeechRecognitionResults(BaseModel):
    """Recognition output for one audio submission."""

    model_config = ConfigDict(extra="allow")

    results: list[SpeechResult] = Field(default_factory=list)
    result_index: int = 0

    @property
    def best_transcript(self) -> str:
        """Concatenate the top alternative of every result."""
        return "".join(r.alternatives[0].transcript for r in self.results if r.alternatives)


RECOGNIZE = post(
    "/v1/recognize",
    SpeechRecognitionResults,
    "model",
    "max_alternatives",
    "word_confidence",
    "timestamps",
    "profanity_filter",
    "smart_formatting",
    "inactivity_timeout",
    body=BodyKind.RAW,
    content_type=DEFAULT_AUDIO_TYPE,
    name="recognize",
)


class SpeechToText(WatsonService):
    """Client for the Watson Speech to Text API."""

    async def recognize(
        self,
        audio: bytes,
        *,
        content_type: str = DEFAULT_AUDIO_TYPE,
        model: str | None = None,
        max_alternatives: int | None = None,
        word_confidence: bool | None = None,
        timestamps: bool | None = None,
        profanity_filter: bool | None = None,
        smart_formatting: bool | None = None,
        inactivity_timeout: int | None = None,
    ) -> Result[SpeechRecognitionResults]:
        """Transcribe a complete audio recording."""
        query = {
            "model": model,
            "max_alternatives": max_alternatives,
            "word_confidence": word_confidence,
            "timestamps": timestamps,
            "profanity_filter": profanity_filter,
            "smart_formatting": smart_formatting,
            "inactivity_timeout": inactivity_timeout,
        }
        return await self._client.invoke(RECOGNIZE, query=query, body=audio, content_type=content_type)

    async def recognize_file(self, path: Path, *, model: str | None = None) -> Result[SpeechRecognitionResults]:
        """Transcribe an audio file, with the content type taken from its suffix."""
        return await self.recognize(path.read_bytes(), content_type=audio_type_for(path), model=model)


# --- Text to Speech ---


class SynthesizeRequest(BaseModel):
    text: str


SYNTHESIZE = post("/v1/synthesize", bytes, "voice", "customization_id", accept=DEFAULT_AUDIO_TYPE, name="synthesize")


class TextToSpeech(WatsonService):
    """Client for the Watson Text to Speech API."""

    def __init__(self, client: RestClient, *, voice: str = DEFAULT_VOICE) -> None:
        """Initialize the client.

        Args:
            client: Unversioned REST client bound to a Text to Speech instance.
            voice: Voice used when synthesize is called without one.

        """
        super().__init__(client)
        self._voice = voice

    async def synthesize(
        self,
        text: str,
        *,
        voice: str | None = None,
        accept: str = DEFAULT_AUDIO_TYPE,
        customization_id: str | None = None,
    ) -> Result[bytes]:
        """Synthesize text to audio bytes in the ``accept`` format."""
        query = {"voice": voice or self._voice, "customization_id": customization_id}
        return await self._client.invoke(SYNTHESIZE, query=query, body=SynthesizeRequest(text=text), accept=accept)
