"""Shared pytest fixtures and configuration for the stardate-cli test suite.

Guidelines
----------
* No test may read or write the real home directory.
* Core tests must be pure — no side effects.
* The clock is pinned wherever output depends on "today".
"""

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from stardate_cli.cli import app as app_module
from stardate_cli.infra.config_store import CONFIG_PATH_ENV, DEFAULT_BASE_YEAR

FIXED_TODAY = dt.date(2025, 2, 21)


class MemoryStore:
    """In-memory stand-in for :class:`FileBaseYearStore`."""

    def __init__(self, year: int = DEFAULT_BASE_YEAR) -> None:
        self.year = year
        self.saved: list[int] = []

    def load(self) -> int:
        return self.year

    def save(self, year: int) -> None:
        self.saved.append(year)
        self.year = year


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config location at a per-test temp file."""
    path = tmp_path / "stardate-config"
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))
    return path


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo the root handler and levels installed by ``configure_logging``."""
    root_logger = logging.getLogger()
    root_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)
    root_logger.setLevel(root_level)
    logging.getLogger("stardate_cli").setLevel(logging.NOTSET)


@pytest.fixture()
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> dt.date:
    monkeypatch.setattr(app_module, "_today", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()
