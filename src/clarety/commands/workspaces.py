"""List Conversation workspaces."""

import asyncio
from typing import Annotated

import typer

from clarety.app_context import use_context
from clarety.conversation import Conversation
from clarety.conversation.models import WorkspaceCollection
from clarety.services import ClaretyError
from clarety.watson.result import Result


async def _list(conversation: Conversation, page_limit: int | None, cursor: str | None) -> Result[WorkspaceCollection]:
    async with conversation:
        return await conversation.list_workspaces(page_limit=page_limit, cursor=cursor)


def workspaces(
    ctx: typer.Context,
    page_limit: Annotated[int | None, typer.Option("--page-limit", min=1, help="Workspaces per page")] = None,
    cursor: Annotated[str | None, typer.Option(help="Cursor from a previous page")] = None,
) -> None:
    """List workspaces of the configured Conversation instance."""
    app = use_context(ctx)
    try:
        conversation = app.services.conversation()
    except ClaretyError as e:
        app.out.print_error_and_exit(e.code, str(e))
    result = asyncio.run(_list(conversation, page_limit, cursor))
    if not result.ok:
        app.out.print_watson_error_and_exit(result.error)
    app.out.print_workspaces(result.unwrap())
