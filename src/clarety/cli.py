"""CLI entry point for clarety."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from clarety.app_context import AppContext
from clarety.commands.chat import chat
from clarety.commands.message import message
from clarety.commands.profile import profile
from clarety.commands.speak import speak
from clarety.commands.transcribe import transcribe
from clarety.commands.workspaces import workspaces
from clarety.config import Config
from clarety.log import setup_logging
from clarety.output import Output
from clarety.services import Services

app = TyperPlus(package_name="clarety")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    config_dir: Annotated[Path | None, typer.Option("--config-dir", help="Directory holding config.toml.")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Log every request to the log file.")] = False,
) -> None:
    """Talk to a Watson chatbot by text or voice."""
    cfg = Config.build(config_dir)
    cfg.config_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, debug=debug)
    ctx.obj = AppContext(out=Output(json_mode=json_output), services=Services(cfg), cfg=cfg)


# Chat
app.command(aliases=["m"])(message)
app.command(aliases=["c"])(chat)

# Speech
app.command()(transcribe)
app.command()(speak)

# Workspace admin / insights
app.command()(workspaces)
app.command()(profile)
