"""Personality profile of a text sample."""

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from clarety.app_context import use_context
from clarety.personality import PersonalityInsights, Profile
from clarety.services import ClaretyError
from clarety.watson.result import Result


async def _profile(service: PersonalityInsights, text: str) -> Result[Profile]:
    async with service:
        return await service.profile(text)


def profile(
    ctx: typer.Context,
    text_file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Plain text written by the user")],
) -> None:
    """Print Big Five personality percentiles for a text sample."""
    app = use_context(ctx)
    try:
        text = text_file.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        app.out.print_error_and_exit("invalid_text", f"{text_file} is not UTF-8 text.")
    try:
        service = app.services.personality_insights()
    except ClaretyError as e:
        app.out.print_error_and_exit(e.code, str(e))
    result = asyncio.run(_profile(service, text))
    if not result.ok:
        app.out.print_watson_error_and_exit(result.error)
    app.out.print_profile(result.unwrap())
