"""Full voice turn: recording in, spoken reply out."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from clarety.app_context import use_context
from clarety.pipeline import ChatSession, FileSink, Stage, VoiceReply, describe_failure
from clarety.services import ClaretyError
from clarety.speech import audio_type_for
from clarety.watson.result import Result


async def _voice_turn(session: ChatSession, audio: Path) -> tuple[Result[VoiceReply], Stage | None]:
    async with session:
        result = await session.voice_turn(audio.read_bytes(), content_type=audio_type_for(audio))
        return result, session.failed_stage


def chat(
    ctx: typer.Context,
    audio: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Recorded question (wav, flac, mp3, ogg)")],
    out: Annotated[Path, typer.Option("--out", "-o", help="Where to save the spoken reply")] = Path("reply.wav"),
    workspace: Annotated[str | None, typer.Option("--workspace", "-w", help="Workspace ID (default: from config)")] = None,
) -> None:
    """Transcribe a recording, ask the bot, and save the spoken reply."""
    app = use_context(ctx)
    try:
        workspace_id = app.services.workspace_id(workspace)
        app.services.require("conversation", "speech_to_text", "text_to_speech")
    except ClaretyError as e:
        app.out.print_error_and_exit(e.code, str(e))
    session = ChatSession(
        app.services.conversation(),
        workspace_id,
        speech_to_text=app.services.speech_to_text(),
        text_to_speech=app.services.text_to_speech(),
        sink=FileSink(out),
    )
    result, failed_stage = asyncio.run(_voice_turn(session, audio))
    if result.error is not None:
        app.out.print_error_and_exit(result.error.code, describe_failure(result.error, failed_stage), status=result.error.status)
    app.out.print_voice_reply(result.unwrap(), out)
