"""Synthesize text to an audio file."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from clarety.app_context import use_context
from clarety.pipeline import FileSink
from clarety.services import ClaretyError
from clarety.speech import TextToSpeech
from clarety.watson.result import Result


async def _synthesize(tts: TextToSpeech, text: str, voice: str | None) -> Result[bytes]:
    async with tts:
        return await tts.synthesize(text, voice=voice)


def speak(
    ctx: typer.Context,
    text: str,
    out: Annotated[Path, typer.Option("--out", "-o", help="Output WAV file")] = Path("reply.wav"),
    voice: Annotated[str | None, typer.Option(help="Voice name (default: from config)")] = None,
) -> None:
    """Synthesize text to a WAV file."""
    app = use_context(ctx)
    try:
        tts = app.services.text_to_speech()
    except ClaretyError as e:
        app.out.print_error_and_exit(e.code, str(e))
    result = asyncio.run(_synthesize(tts, text, voice))
    if not result.ok:
        app.out.print_watson_error_and_exit(result.error)
    audio = result.unwrap()
    FileSink(out).play(audio)
    app.out.print_audio_saved(out, len(audio))
