"""Logging helpers using Rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED = False


def configure(level: int | str | None = None) -> None:
    """Install a stderr RichHandler once; later calls only adjust the level."""
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(
            level=level or logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        )
        _CONFIGURED = True
    elif level is not None:
        logging.getLogger().setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger routed through the shared RichHandler."""
    configure()
    return logging.getLogger(name)
