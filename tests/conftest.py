from __future__ import annotations

import logging
import os
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import pytest


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 3, 15, 12, 0, 0)


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Create a file with ``size`` bytes and an optional modification time."""

    def _make(path: Path, size: int = 0, mtime: Optional[datetime] = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x" * size)
        if mtime is not None:
            ts = mtime.timestamp()
            os.utime(path, (ts, ts))
        return path

    return _make


@pytest.fixture
def set_mtime() -> Callable[[Path, datetime], None]:
    def _set(path: Path, mtime: datetime) -> None:
        ts = mtime.timestamp()
        os.utime(path, (ts, ts))

    return _set


@pytest.fixture(autouse=True)
def restore_root_logger():
    """The CLI replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def new_york_tz():
    """Run the test with local time in America/New_York."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    saved = os.environ.get("TZ")
    os.environ["TZ"] = "America/New_York"
    time.tzset()
    yield
    if saved is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = saved
    time.tzset()
