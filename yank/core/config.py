from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import EnvError

DATA_DIR_NAME = ".yank"
DATA_FILE_NAME = "data.json"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    # Every field can be set through a YANK_* environment variable or .env.
    home: Path | None = None
    data_file: Path | None = None
    log_level: LogLevel = "WARNING"
    no_clipboard: bool = False
    model_config = SettingsConfigDict(
        env_prefix="YANK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value


def load_settings() -> Settings:
    """Build :class:`Settings`, reporting bad YANK_* values as :class:`EnvError`."""

    try:
        return Settings()
    except ValidationError as exc:
        problems = "; ".join(
            f"YANK_{'.'.join(str(p) for p in err['loc']).upper()}: {err['msg']}" for err in exc.errors()
        )
        raise EnvError(f"Invalid configuration ({problems})") from exc


def home_dir(settings: Settings | None = None) -> Path:
    """Return the user's home directory, honouring ``YANK_HOME``."""

    settings = settings or load_settings()
    if settings.home is not None:
        return settings.home.expanduser()
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise EnvError("Could not find home directory") from exc


def resolve_data_path(override: str | Path | None = None, settings: Settings | None = None) -> Path:
    """Return the effective data file path.

    Preference order:
    1. Explicit argument ``override`` (the ``--path`` flag).
    2. ``YANK_DATA_FILE`` environment variable.
    3. ``<home>/.yank/data.json``.
    """

    settings = settings or load_settings()
    if override:
        return Path(override).expanduser()
    if settings.data_file is not None:
        return settings.data_file.expanduser()
    return home_dir(settings) / DATA_DIR_NAME / DATA_FILE_NAME
