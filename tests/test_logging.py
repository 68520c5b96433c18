from __future__ import annotations

import logging

from yank.core.logging import configure, get_logger


def test_get_logger_returns_named_logger() -> None:
    log = get_logger("yank.core.store")
    assert log is logging.getLogger("yank.core.store")


def test_configure_adjusts_root_level() -> None:
    root = logging.getLogger()
    before = root.level
    try:
        configure("DEBUG")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(before)
