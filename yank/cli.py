"""yank command-line interface.

Usage::

    yank <KEY>                 copy the value stored under KEY to the clipboard
    yank put <KEY> <VALUE>     store VALUE under KEY
    yank delete <KEY>          remove KEY
    yank ls [--sort] [--json]  list stored keys

Every invocation loads the data file, runs exactly one command and, for
mutating commands, writes the file back before reporting success.

A key or value that starts with ``-`` must follow ``--``, as in
``yank -- -x`` or ``yank put -- -x -1``.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from pathlib import Path

from yank.core import clipboard
from yank.core.config import Settings, load_settings, resolve_data_path
from yank.core.errors import ClipboardError, KeyNotFoundError, YankError
from yank.core.logging import configure, get_logger
from yank.core.store import Store
from yank.core.ui import emit, say

log = get_logger(__name__)

USAGE = (
    "yank <KEY>\n"
    "   or: yank [--path FILE] <COMMAND> [ARGS]\n"
    "   or: yank -- <-KEY>   (keys starting with '-' go after '--')"
)

SAVED_MESSAGES = {
    "put": "Value set successfully!",
    "delete": "Value deleted successfully!",
}


# ---------------------------------------------------------------------------
# Command implementations
# ---------------------------------------------------------------------------


def cmd_get(store: Store, args: argparse.Namespace, settings: Settings) -> int:
    value = store.get(args.key)
    if value is None:
        raise KeyNotFoundError(args.key)

    emit(value)
    if args.no_clipboard or settings.no_clipboard:
        return 0
    try:
        clipboard.copy_to_clipboard(value)
    except ClipboardError as exc:
        # The lookup itself succeeded; a missing clipboard is only a warning.
        log.debug("clipboard copy failed: %r", exc)
        say(f"yank: warning -> {exc}", err=True, style="yellow")
        return 0
    say("Copied to clipboard!", err=True)
    return 0


def cmd_put(store: Store, args: argparse.Namespace, settings: Settings) -> int:
    store.put(args.key, args.value)
    return 0


def cmd_delete(store: Store, args: argparse.Namespace, settings: Settings) -> int:
    store.delete(args.key)
    return 0


def cmd_ls(store: Store, args: argparse.Namespace, settings: Settings) -> int:
    keys = store.list_keys(sort=args.sort)
    if args.json:
        emit(json.dumps(keys, ensure_ascii=True))
        return 0
    if not keys:
        say("No keys stored.")
        return 0
    for key in keys:
        emit(key)
    return 0


COMMANDS: dict[str, Callable[[Store, argparse.Namespace, Settings], int]] = {
    "get": cmd_get,
    "put": cmd_put,
    "delete": cmd_delete,
    "ls": cmd_ls,
}


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yank", usage=USAGE, description="A simple key-value clipboard manager"
    )
    parser.add_argument("--path", help="Path to the data file (default: ~/.yank/data.json)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    get = subparsers.add_parser("get", help="Copy a stored value to the clipboard (default action)")
    get.add_argument("key", help="Key to yank")
    get.add_argument("--no-clipboard", action="store_true", help="Only print the value")

    put = subparsers.add_parser("put", help="Store a value under a key")
    put.add_argument("key", help="The key to store the value under")
    put.add_argument("value", help="The value to store")

    delete = subparsers.add_parser("delete", help="Delete a stored key")
    delete.add_argument("key", help="The key to delete")

    ls = subparsers.add_parser("ls", help="List all stored keys")
    ls.add_argument("--sort", action="store_true", help="Sort keys alphabetically")
    ls.add_argument("--json", action="store_true", help="Emit a JSON array")

    return parser


_OPTIONS_WITH_VALUE = {"--path"}


def route_bare_key(argv: list[str]) -> list[str]:
    """Insert the implicit ``get`` command in front of a bare key.

    ``yank email`` becomes ``yank get email`` and ``yank -- -x`` becomes
    ``yank get -- -x``; known command names and global options are left
    untouched.
    """

    idx = 0
    while idx < len(argv):
        token = argv[idx]
        if token == "--":
            return [*argv[:idx], "get", *argv[idx:]]
        if token in _OPTIONS_WITH_VALUE:
            idx += 2
            continue
        if token.startswith("-") and token != "-":
            idx += 1
            continue
        break
    if idx < len(argv) and argv[idx] not in COMMANDS:
        return [*argv[:idx], "get", *argv[idx:]]
    return list(argv)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(route_bare_key(argv))

    if args.command is None:
        say("No key provided", err=True)
        say(parser.format_usage().rstrip(), err=True)
        return 2

    try:
        settings = load_settings()
        configure("DEBUG" if args.verbose else settings.log_level)
        path: Path = resolve_data_path(args.path, settings)
        store = Store.load(path)
        rc = COMMANDS[args.command](store, args, settings)
        if store.modified:
            store.save()
            say(SAVED_MESSAGES[args.command])
        return rc
    except YankError as exc:
        say(f"yank: error -> {exc}", err=True, style="red")
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
