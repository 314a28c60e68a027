"""Logging configuration for clarety."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logging(log_path: Path, *, debug: bool = False) -> None:
    """Send clarety and httpx logs to a rotating file.

    Request lines are logged at DEBUG, so they only appear with ``debug=True``.
    Idempotent: skips if the clarety logger already has a handler.
    """
    root = logging.getLogger("clarety")
    if root.handlers:
        return

    handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    handler.setFormatter(logging.Formatter(fmt="%(asctime)s %(levelname)-8s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"))

    root.setLevel(logging.DEBUG if debug else logging.INFO)
    root.addHandler(handler)

    # httpx logs every request URL at INFO; keep only its warnings
    http_logger = logging.getLogger("httpx")
    http_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    http_logger.addHandler(handler)
