"""Shared pytest fixtures and test helpers for isolderthan tests."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner
from dateutil import tz

# Zone with DST transitions; None when the host has no tz database.
NEW_YORK = tz.gettz("America/New_York")

requires_tzdata = pytest.mark.skipif(NEW_YORK is None, reason="tz database not available")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_now() -> datetime:
    """A fixed reference instant: 2024-08-31 14:30:15 UTC."""
    return datetime(2024, 8, 31, 14, 30, 15, tzinfo=UTC)


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a file whose mtime is *age_seconds* in the past."""

    def _make(name: str = "sample.log", *, age_seconds: float = 0.0) -> Path:
        path = tmp_path / name
        path.write_text("data", encoding="utf-8")
        mtime = time.time() - age_seconds
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI reconfigures logging on every invocation, pointing handlers at
    the runner's temporary streams.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("isolderthan")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)
