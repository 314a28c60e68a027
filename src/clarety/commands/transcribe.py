"""Transcribe an audio file."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from clarety.app_context import use_context
from clarety.services import ClaretyError
from clarety.speech import SpeechRecognitionResults, SpeechToText
from clarety.watson.result import Result


async def _recognize(stt: SpeechToText, audio: Path, model: str | None) -> Result[SpeechRecognitionResults]:
    async with stt:
        return await stt.recognize_file(audio, model=model)


def transcribe(
    ctx: typer.Context,
    audio: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Audio file (wav, flac, mp3, ogg)")],
    model: Annotated[str | None, typer.Option(help="Recognition model, e.g. en-US_NarrowbandModel")] = None,
) -> None:
    """Print the best transcript of an audio file."""
    app = use_context(ctx)
    try:
        stt = app.services.speech_to_text()
    except ClaretyError as e:
        app.out.print_error_and_exit(e.code, str(e))
    result = asyncio.run(_recognize(stt, audio, model))
    if not result.ok:
        app.out.print_watson_error_and_exit(result.error)
    app.out.print_transcript(result.unwrap().best_transcript)
