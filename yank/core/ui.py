"""Console output helpers shared by the CLI commands.

Stored values and keys go through :func:`emit`, which writes them untouched;
rich would expand tabs and drop control characters. Rich is only used for
status, warning and error lines.
"""

from __future__ import annotations

import sys
from typing import TextIO

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def say(text: str, *, err: bool = False, style: str | None = None) -> None:
    """Print a status line (no markup, highlighting or wrapping)."""
    target = err_console if err else console
    target.print(text, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)


def emit(text: str, stream: TextIO | None = None) -> None:
    """Write *text* plus a newline to stdout exactly as stored."""
    stream = stream or sys.stdout
    try:
        stream.write(text + "\n")
    except UnicodeEncodeError:
        # Lone surrogates from undecodable argv bytes: write the original bytes back.
        encoding = getattr(stream, "encoding", None) or "utf-8"
        try:
            data = (text + "\n").encode(encoding, errors="surrogateescape")
        except UnicodeEncodeError:
            data = (text + "\n").encode(encoding, errors="backslashreplace")
        stream.flush()
        stream.buffer.write(data)
        stream.buffer.flush()
