"""Application context shared across CLI commands."""

from dataclasses import dataclass

import typer

from clarety.config import Config
from clarety.output import Output
from clarety.services import Services


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    services: Services
    cfg: Config


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result
