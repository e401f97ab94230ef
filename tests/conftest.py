"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real filesystem: logs,
settings and databases all land under pytest's temporary directories.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

import pytest

from taskdeck.adapters.sqlite.connection import DatabaseConnection
from taskdeck.services.store import Store

# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def isolated_log_dir(tmp_path_factory):
    """Send the rotating log file to a temporary directory."""
    log_dir = str(tmp_path_factory.mktemp("logs"))
    with patch("taskdeck.utils.logger.user_log_dir", return_value=log_dir):
        yield log_dir


@pytest.fixture(autouse=True)
def reset_connection():
    """Close the process-wide SQLite connection around every test."""
    DatabaseConnection.close_connection()
    yield
    DatabaseConnection.close_connection()


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from taskdeck.services.config_service import ConfigService, get_config_service

    tmpdir = str(tmp_path / "settings")
    get_config_service.cache_clear()
    with patch("taskdeck.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("taskdeck.services.config_service.user_data_dir", return_value=tmpdir):
            yield ConfigService()
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------


@pytest.fixture()
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture()
def store(db_path) -> Store:
    """A Store on a fresh temp-file database."""
    return Store(db_path)


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 3, 1, 9, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
