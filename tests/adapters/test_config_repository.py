"""Unit tests for SqliteConfigRepository."""

from __future__ import annotations

import pytest

from taskdeck.adapters.sqlite import DatabaseConnection, SqliteConfigRepository


@pytest.fixture
def config(db_path):
    return SqliteConfigRepository(str(db_path))


class TestConfigRepository:
    def test_missing_key(self, config):
        assert config.get("nope") is None

    def test_set_overwrites(self, config):
        config.set("k", "1")
        config.set("k", "2")
        assert config.get("k") == "2"

    def test_set_many(self, config):
        config.set_many({"a": "1", "b": "2"})
        assert (config.get("a"), config.get("b")) == ("1", "2")

    def test_values_survive_reopen(self, config, db_path):
        config.set("pomodoro.work_duration", "40")
        DatabaseConnection.close_connection()
        assert SqliteConfigRepository(str(db_path)).get("pomodoro.work_duration") == "40"
