"""Tests for ChatSession: context threading and stage short-circuiting."""

import json

import httpx
import pytest

from clarety.conversation import Conversation
from clarety.pipeline import ChatSession, FileSink, Speaker, Stage, Turn, describe_failure
from clarety.speech import SpeechToText, TextToSpeech
from clarety.watson.client import ErrorPolicy, RestClient
from clarety.watson.errors import ServiceError, TransportError


class FakeServices:
    """Mock transport routing by path to canned Conversation, STT and TTS replies."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.turn = 0
        self.fail: dict[str, tuple[int, bytes]] = {}

    def count(self, suffix):
        return sum(1 for r in self.requests if r.url.path.endswith(suffix))

    def sent_messages(self):
        return [json.loads(r.content) if r.content else None for r in self.requests if r.url.path.endswith("/message")]

    def __call__(self, request):
        self.requests.append(request)
        for suffix, (status, body) in self.fail.items():
            if request.url.path.endswith(suffix):
                return httpx.Response(status, content=body)
        if request.url.path.endswith("/message"):
            self.turn += 1
            text = [] if self.turn == 1 else [f"reply {self.turn - 1}"]
            context = {"conversation_id": "c1", "system": {"dialog_turn_counter": self.turn}}
            return httpx.Response(200, json={"context": context, "output": {"text": text}})
        if request.url.path.endswith("/recognize"):
            return httpx.Response(200, json={"results": [{"final": True, "alternatives": [{"transcript": "hello"}]}]})
        if request.url.path.endswith("/synthesize"):
            return httpx.Response(200, content=b"RIFFreply")
        return httpx.Response(404)


class RecordingSink:
    """Audio sink that keeps everything it is asked to play."""

    def __init__(self):
        self.played: list[bytes] = []

    def play(self, audio):
        self.played.append(audio)


@pytest.fixture
def services():
    """Mock Watson backend for all three services."""
    return FakeServices()


@pytest.fixture
def sink():
    """Recording audio sink."""
    return RecordingSink()


def build_session(services, sink, error_policy=ErrorPolicy.RETURN):
    transport = httpx.MockTransport(services)

    def client(url, version=None):
        return RestClient(url, "u", "p", version=version, error_policy=error_policy, transport=transport)

    conversation = Conversation(client("https://conv.test/api", "2017-05-26"))
    stt = SpeechToText(client("https://stt.test/api"))
    tts = TextToSpeech(client("https://tts.test/api"))
    return ChatSession(conversation, "w1", speech_to_text=stt, text_to_speech=tts, sink=sink)


@pytest.fixture
def session(services, sink):
    """Session wired to the mock backend."""
    return build_session(services, sink)


@pytest.fixture
def raising_session(services, sink):
    """Session whose clients raise failures instead of returning them."""
    return build_session(services, sink, ErrorPolicy.RAISE)


class TestSendText:
    """Text turns and context threading."""

    @pytest.mark.asyncio
    async def test_first_message_opens_dialog(self, session, services):
        """The first turn sends an empty opening message, then the user's text with its context."""
        result = await session.send_text("hi")
        assert result.unwrap().reply == "reply 1"
        opening, first = services.sent_messages()
        assert opening is None
        assert first["input"] == {"text": "hi"}
        assert first["context"]["system"] == {"dialog_turn_counter": 1}

    @pytest.mark.asyncio
    async def test_context_carried_forward(self, session, services):
        """Each request echoes the context of the previous response."""
        await session.send_text("one")
        await session.send_text("two")
        last = services.sent_messages()[-1]
        assert last["context"] == {"conversation_id": "c1", "system": {"dialog_turn_counter": 2}}
        assert session.context is not None
        assert session.context.system == {"dialog_turn_counter": 3}

    @pytest.mark.asyncio
    async def test_transcript(self, session):
        """Transcript alternates speakers and skips empty replies."""
        await session.send_text("one")
        await session.send_text("two")
        assert session.transcript == [
            Turn(Speaker.ME, "one"),
            Turn(Speaker.WATSON, "reply 1"),
            Turn(Speaker.ME, "two"),
            Turn(Speaker.WATSON, "reply 2"),
        ]

    @pytest.mark.asyncio
    async def test_failure_keeps_context(self, session, services):
        """A failed message leaves the previous context in place."""
        await session.send_text("one")
        before = session.context
        services.fail["/message"] = (500, b'{"error": "Internal error"}')
        result = await session.send_text("two")
        assert isinstance(result.error, ServiceError)
        assert session.failed_stage is Stage.CONVERSE
        assert session.context == before


class TestVoiceTurn:
    """Full transcribe, converse, synthesize chain."""

    @pytest.mark.asyncio
    async def test_complete_turn(self, session, sink):
        """All stages run and the reply audio reaches the sink."""
        result = await session.voice_turn(b"RIFFquestion")
        reply = result.unwrap()
        assert reply.transcript == "hello"
        assert reply.reply == "reply 1"
        assert reply.audio == b"RIFFreply"
        assert sink.played == [b"RIFFreply"]
        assert session.failed_stage is None

    @pytest.mark.asyncio
    async def test_transcribe_failure_stops_chain(self, session, services, sink):
        """A failed transcription runs no later stage."""
        services.fail["/recognize"] = (500, b"")
        result = await session.voice_turn(b"RIFF")
        assert isinstance(result.error, TransportError)
        assert session.failed_stage is Stage.TRANSCRIBE
        assert services.count("/message") == 0
        assert services.count("/synthesize") == 0
        assert sink.played == []

    @pytest.mark.asyncio
    async def test_converse_failure_stops_chain(self, session, services, sink):
        """A failed message skips synthesis."""
        services.fail["/message"] = (404, b'{"error": "Workspace not found"}')
        result = await session.voice_turn(b"RIFF")
        assert not result.ok
        assert session.failed_stage is Stage.CONVERSE
        assert services.count("/synthesize") == 0
        assert sink.played == []

    @pytest.mark.asyncio
    async def test_synthesize_failure(self, session, services, sink):
        """A failed synthesis plays nothing."""
        services.fail["/synthesize"] = (400, b'{"error": "Unknown voice"}')
        result = await session.voice_turn(b"RIFF")
        assert isinstance(result.error, ServiceError)
        assert session.failed_stage is Stage.SYNTHESIZE
        assert sink.played == []

    @pytest.mark.asyncio
    async def test_missing_speech_service(self, services):
        """Voice turns need a Speech to Text client."""
        conversation = Conversation(RestClient("https://conv.test/api", "u", "p", transport=httpx.MockTransport(services)))
        async with ChatSession(conversation, "w1") as session:
            with pytest.raises(RuntimeError, match="speech_to_text"):
                await session.voice_turn(b"RIFF")


class TestRaisePolicy:
    """Stage attribution when clients raise."""

    @pytest.mark.asyncio
    async def test_transcribe_failure_raises(self, raising_session, services, sink):
        """The error propagates, the stage is recorded and no later stage runs."""
        services.fail["/recognize"] = (500, b"")
        with pytest.raises(TransportError):
            await raising_session.voice_turn(b"RIFF")
        assert raising_session.failed_stage is Stage.TRANSCRIBE
        assert services.count("/message") == 0
        assert services.count("/synthesize") == 0
        assert sink.played == []

    @pytest.mark.asyncio
    async def test_converse_failure_raises(self, raising_session, services, sink):
        """A raised message failure is attributed to the converse stage."""
        services.fail["/message"] = (404, b'{"error": "Workspace not found"}')
        with pytest.raises(ServiceError):
            await raising_session.voice_turn(b"RIFF")
        assert raising_session.failed_stage is Stage.CONVERSE
        assert services.count("/synthesize") == 0

    @pytest.mark.asyncio
    async def test_synthesize_failure_raises(self, raising_session, services, sink):
        """A raised synthesis failure is attributed to the synthesize stage."""
        services.fail["/synthesize"] = (400, b'{"error": "Unknown voice"}')
        with pytest.raises(ServiceError):
            await raising_session.voice_turn(b"RIFF")
        assert raising_session.failed_stage is Stage.SYNTHESIZE
        assert sink.played == []

    @pytest.mark.asyncio
    async def test_failure_logged(self, raising_session, services, caplog):
        """The stopped stage is logged before the error propagates."""
        services.fail["/recognize"] = (500, b"")
        with caplog.at_level("WARNING", logger="clarety.pipeline"), pytest.raises(TransportError):
            await raising_session.voice_turn(b"RIFF")
        assert "Chat stopped at transcribe" in caplog.text


class TestFileSink:
    """Writing replies to disk."""

    def test_writes_and_replaces(self, tmp_path):
        """Each reply replaces the previous file without leaving temp files."""
        sink = FileSink(tmp_path / "out" / "reply.wav")
        sink.play(b"first")
        sink.play(b"second")
        assert sink.path.read_bytes() == b"second"
        assert [p.name for p in sink.path.parent.iterdir()] == ["reply.wav"]


class TestDescribeFailure:
    """Failure lines."""

    def test_with_stage(self):
        """The stage is named when known."""
        assert describe_failure(TransportError(status=503), Stage.TRANSCRIBE) == "Chat stopped during transcribe: HTTP 503"

    def test_without_stage(self):
        """No stage, no location."""
        assert describe_failure(TransportError(status=503), None) == "Chat stopped: HTTP 503"
