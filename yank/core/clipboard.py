"""System clipboard access via pyperclip."""

from __future__ import annotations

import pyperclip

from .errors import ClipboardError

INSTALL_HINT = (
    "No clipboard utility found. Please install wl-copy (Wayland), "
    "xclip/xsel (X11), or pbcopy (macOS)"
)


def copy_to_clipboard(text: str) -> None:
    """Copy *text* to the system clipboard or raise :class:`ClipboardError`."""

    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(f"{INSTALL_HINT} ({exc})") from exc
    except UnicodeError as exc:
        raise ClipboardError(f"Value is not valid text for the clipboard ({exc})") from exc
