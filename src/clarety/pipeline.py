"""Voice chat pipeline: transcribe -> converse -> synthesize -> play.

Stages run as plain sequential awaits. A stage starts only after the previous
one succeeded. The first failure ends the turn: it is returned to the caller,
or raised when the clients use ErrorPolicy.RAISE. Either way failed_stage
names the stage that stopped.
"""

import logging
from collections.abc import Awaitable
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from types import TracebackType
from typing import Protocol, Self

from clarety.conversation import Context, Conversation, InputData, MessageRequest, MessageResponse
from clarety.speech import DEFAULT_AUDIO_TYPE, SpeechToText, TextToSpeech
from clarety.watson.errors import WatsonError
from clarety.watson.result import Result

logger = logging.getLogger(__name__)


class Speaker(StrEnum):
    """Chat participants."""

    ME = "me"
    WATSON = "watson"

    @property
    def display_name(self) -> str:
        """Name shown next to the participant's messages."""
        return "Me" if self is Speaker.ME else "Watson"


class Stage(StrEnum):
    """Pipeline stages, in execution order."""

    TRANSCRIBE = "transcribe"
    CONVERSE = "converse"
    SYNTHESIZE = "synthesize"


@dataclass(frozen=True)
class Turn:
    """One line of the chat transcript."""

    speaker: Speaker
    text: str


@dataclass(frozen=True)
class VoiceReply:
    """Outcome of a complete voice turn."""

    transcript: str
    reply: str
    audio: bytes


class AudioSink(Protocol):
    """Playback target for synthesized speech."""

    def play(self, audio: bytes) -> None: ...


class FileSink:
    """Audio sink that writes every reply to the same file, replacing the previous one."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """File the latest reply is written to."""
        return self._path

    def play(self, audio: bytes) -> None:
        """Write the audio, replacing the previous reply."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_bytes(audio)
        tmp_path.replace(self._path)


class ChatSession:
    """A conversation with one workspace, owning its service clients and audio sink.

    The session carries the Conversation ``context`` from each response into
    the next request, so consecutive turns continue the same dialog.
    """

    def __init__(
        self,
        conversation: Conversation,
        workspace_id: str,
        *,
        speech_to_text: SpeechToText | None = None,
        text_to_speech: TextToSpeech | None = None,
        sink: AudioSink | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            conversation: Conversation client; closed with the session.
            workspace_id: Workspace the bot runs in.
            speech_to_text: Needed for voice turns; closed with the session.
            text_to_speech: Needed for spoken replies; closed with the session.
            sink: Where synthesized replies go.

        """
        self._conversation = conversation
        self._workspace_id = workspace_id
        self._speech_to_text = speech_to_text
        self._text_to_speech = text_to_speech
        self._sink = sink
        self._context: Context | None = None
        self._transcript: list[Turn] = []
        self._failed_stage: Stage | None = None

    @property
    def context(self) -> Context | None:
        """Context returned by the last successful message call."""
        return self._context

    @property
    def transcript(self) -> list[Turn]:
        """All turns so far, oldest first."""
        return list(self._transcript)

    @property
    def failed_stage(self) -> Stage | None:
        """Stage that ended the last turn, or None if it completed."""
        return self._failed_stage

    async def start(self) -> Result[MessageResponse]:
        """Open the dialog with an empty message and keep the returned context."""
        result = await self._conversation.message(self._workspace_id)
        if result.ok:
            self._accept(result.unwrap())
        return result

    async def send_text(self, text: str) -> Result[MessageResponse]:
        """Send one user message, opening the dialog first if needed."""
        self._failed_stage = None
        if self._context is None:
            opening = await self._attempt(Stage.CONVERSE, self.start())
            if not opening.ok:
                return opening
        request = MessageRequest(input=InputData(text=text), context=self._context)
        self._transcript.append(Turn(Speaker.ME, text))
        result = await self._attempt(Stage.CONVERSE, self._conversation.message(self._workspace_id, request))
        if not result.ok:
            return result
        self._accept(result.unwrap())
        return result

    async def speak(self, text: str) -> Result[bytes]:
        """Synthesize text and hand the audio to the sink."""
        self._failed_stage = None
        tts = self._need(self._text_to_speech, "text_to_speech")
        audio = await self._attempt(Stage.SYNTHESIZE, tts.synthesize(text))
        if not audio.ok:
            return audio
        if self._sink is not None:
            logger.info("Playing %d bytes of audio", len(audio.unwrap()))
            self._sink.play(audio.unwrap())
        return audio

    async def voice_turn(self, audio: bytes, *, content_type: str = DEFAULT_AUDIO_TYPE) -> Result[VoiceReply]:
        """Run one full turn: recording in, spoken reply out."""
        self._failed_stage = None
        stt = self._need(self._speech_to_text, "speech_to_text")

        logger.info("Stage %s", Stage.TRANSCRIBE)
        recognized = await self._attempt(Stage.TRANSCRIBE, stt.recognize(audio, content_type=content_type))
        if not recognized.ok:
            return Result(ok=False, error=recognized.error)
        transcript = recognized.unwrap().best_transcript

        logger.info("Stage %s", Stage.CONVERSE)
        response = await self.send_text(transcript)
        if not response.ok:
            return Result(ok=False, error=response.error)
        reply = response.unwrap().reply

        logger.info("Stage %s", Stage.SYNTHESIZE)
        spoken = await self.speak(reply)
        if not spoken.ok:
            return Result(ok=False, error=spoken.error)
        return Result.success(VoiceReply(transcript=transcript, reply=reply, audio=spoken.unwrap()))

    async def aclose(self) -> None:
        """Close every owned service client."""
        await self._conversation.aclose()
        if self._speech_to_text is not None:
            await self._speech_to_text.aclose()
        if self._text_to_speech is not None:
            await self._text_to_speech.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        await self.aclose()

    def _accept(self, response: MessageResponse) -> None:
        self._context = response.context
        if response.reply:
            self._transcript.append(Turn(Speaker.WATSON, response.reply))

    async def _attempt[T](self, stage: Stage, call: Awaitable[Result[T]]) -> Result[T]:
        """Await one stage call, recording the stage when it fails or raises."""
        try:
            result = await call
        except WatsonError as e:
            self._stop(stage, e)
            raise
        if result.error is not None:
            self._stop(stage, result.error)
        return result

    def _stop(self, stage: Stage, error: WatsonError) -> None:
        self._failed_stage = stage
        logger.warning("Chat stopped at %s: %s", stage, error)

    @staticmethod
    def _need[S](service: S | None, name: str) -> S:
        if service is None:
            msg = f"ChatSession was created without {name}."
            raise RuntimeError(msg)
        return service


def describe_failure(error: WatsonError, stage: Stage | None) -> str:
    """Human-readable failure line for a stopped turn."""
    where = f" during {stage}" if stage is not None else ""
    return f"Chat stopped{where}: {error}"
