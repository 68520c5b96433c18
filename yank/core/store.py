"""Persistent snippet store.

A :class:`Store` owns the snapshot for one process run: it is loaded from an
explicit path, mutated in memory and written back with an atomic replace.
Concurrent mutating processes are not coordinated; the last save wins.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from . import codec
from .errors import CorruptStoreError, DecodeError, InvalidKeyError, KeyNotFoundError, StoreIOError
from .logging import get_logger

log = get_logger(__name__)


class StoreState(str, Enum):
    LOADED = "loaded"
    MODIFIED = "modified"
    PERSISTED = "persisted"


class Store:
    """In-memory snapshot of the data file with get/put/delete/list."""

    def __init__(self, path: Path, snapshot: codec.Snapshot) -> None:
        self.path = Path(path)
        self._data: codec.Snapshot = dict(snapshot)
        self.state = StoreState.LOADED

    @classmethod
    def load(cls, path: str | Path) -> Store:
        """Read the snapshot at *path*; a missing file yields an empty store."""
        path = Path(path)
        try:
            snapshot = codec.read_snapshot(path)
        except DecodeError as exc:
            raise CorruptStoreError(path, str(exc)) from exc
        except OSError as exc:
            raise StoreIOError(f"Unable to read data file {path}: {exc}") from exc
        log.debug("loaded %d key(s) from %s", len(snapshot), path)
        return cls(path, snapshot)

    @property
    def modified(self) -> bool:
        return self.state is StoreState.MODIFIED

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def put(self, key: str, value: str) -> None:
        """Insert or overwrite *key*; an existing key keeps its position."""
        if not key:
            raise InvalidKeyError("Key must not be empty")
        self._data[key] = value
        self.state = StoreState.MODIFIED

    def delete(self, key: str) -> None:
        if key not in self._data:
            raise KeyNotFoundError(key)
        del self._data[key]
        self.state = StoreState.MODIFIED

    def list_keys(self, *, sort: bool = False) -> list[str]:
        """Return keys in insertion order, or lexicographically with ``sort=True``."""
        keys = list(self._data)
        return sorted(keys) if sort else keys

    def save(self, path: str | Path | None = None) -> None:
        """Atomically replace the data file with the current snapshot."""
        target = Path(path) if path is not None else self.path
        try:
            codec.atomic_write(codec.encode(self._data), target)
        except OSError as exc:
            raise StoreIOError(f"Unable to write data file {target}: {exc}") from exc
        self.state = StoreState.PERSISTED
        log.debug("saved %d key(s) to %s", len(self._data), target)
