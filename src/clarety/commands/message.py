"""Send one text message to the bot."""

import asyncio
from typing import Annotated

import typer

from clarety.app_context import use_context
from clarety.conversation import Conversation, MessageResponse
from clarety.pipeline import ChatSession, Turn
from clarety.services import ClaretyError
from clarety.watson.result import Result


async def _converse(conversation: Conversation, workspace_id: str, text: str) -> tuple[Result[MessageResponse], list[Turn]]:
    async with ChatSession(conversation, workspace_id) as session:
        result = await session.send_text(text)
        return result, session.transcript


def message(
    ctx: typer.Context,
    text: str,
    workspace: Annotated[str | None, typer.Option("--workspace", "-w", help="Workspace ID (default: from config)")] = None,
) -> None:
    """Send a text message to the bot and print the dialog."""
    app = use_context(ctx)
    try:
        workspace_id = app.services.workspace_id(workspace)
        conversation = app.services.conversation()
    except ClaretyError as e:
        app.out.print_error_and_exit(e.code, str(e))
    result, turns = asyncio.run(_converse(conversation, workspace_id, text))
    if not result.ok:
        app.out.print_watson_error_and_exit(result.error)
    app.out.print_turns(turns)
