"""Error hierarchy shared by the store, codec and CLI."""

from __future__ import annotations

from pathlib import Path


class YankError(RuntimeError):
    """Base error for yank failures."""


class DecodeError(YankError):
    """Raised when data file content is not a flat string-to-string JSON object."""


class CorruptStoreError(YankError):
    """Raised when an existing data file cannot be decoded."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Data file {path} is corrupt ({detail}); fix or remove it manually")


class StoreIOError(YankError):
    """Raised when the data file cannot be read or written."""


class InvalidKeyError(YankError):
    """Raised on an attempt to store an empty key."""


class KeyNotFoundError(YankError):
    """Raised when a key is absent from the store."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key not found: {key!r}")


class EnvError(YankError):
    """Raised when the home directory cannot be resolved."""


class ClipboardError(YankError):
    """Raised when no clipboard backend accepts the text."""
