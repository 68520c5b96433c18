"""JSON codec for the snippet data file.

The file holds one flat object mapping snippet keys to snippet values::

    {
      "email": "me@example.com",
      "sig": "--\\nSent from my terminal"
    }

Decoding is strict: anything that is not a string-to-string object is
rejected rather than coerced, so a hand-edited file never loses data silently.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Mapping

from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError
from .logging import get_logger

log = get_logger(__name__)

Snapshot = dict[str, str]

_SNAPSHOT = TypeAdapter(Snapshot)


def decode(data: bytes) -> Snapshot:
    """Parse *data* into a snapshot.

    Empty or whitespace-only input decodes to an empty snapshot.
    """

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(f"not valid UTF-8: {exc}") from exc
    if not text.strip():
        return {}
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise DecodeError(f"expected a JSON object, got {type(raw).__name__}")
    try:
        return _SNAPSHOT.validate_python(raw, strict=True)
    except ValidationError as exc:
        bad = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise DecodeError(f"values must be strings (offending keys: {', '.join(bad)})") from exc


def encode(snapshot: Mapping[str, str]) -> bytes:
    """Serialize *snapshot* to pretty-printed ASCII JSON, keys in snapshot order.

    Non-ASCII text, including lone surrogates from undecodable argv bytes, is
    written as ``\\uXXXX`` escapes so every snapshot survives a round-trip.
    """

    text = json.dumps(dict(snapshot), ensure_ascii=True, indent=2)
    return (text + "\n").encode("utf-8")


def read_snapshot(path: Path) -> Snapshot:
    """Load the snapshot stored at *path*; a missing file is an empty snapshot.

    Raises :class:`DecodeError` for unparseable content and lets ``OSError``
    propagate for anything other than a missing file.
    """

    try:
        data = path.read_bytes()
    except FileNotFoundError:
        log.debug("no data file at %s; starting empty", path)
        return {}
    return decode(data)


def atomic_write(data: bytes, path: Path) -> None:
    """Persist ``data`` atomically to ``path``.

    The parent directory is created on first use. Content goes to a temporary
    file in the same directory and is renamed over ``path`` only after it has
    been flushed to disk, so ``path`` holds either the old or the new bytes.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb", dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp", delete=False
        ) as handle:
            tmp_path = handle.name
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path and os.path.exists(tmp_path):
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise
    log.debug("wrote %d bytes to %s", len(data), path)
