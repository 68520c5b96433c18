from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point yank at a throwaway home so tests never touch ~/.yank."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("YANK_HOME", str(home))
    for var in ("YANK_DATA_FILE", "YANK_NO_CLIPBOARD", "YANK_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "store" / "data.json"
