"""Unit tests for services/config_service.py.

Uses a real ConfigService pointed at a tmp_path directory.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from taskdeck.models import AppConfig
from taskdeck.services.config_service import ConfigService


class TestLoadAndSave:
    def test_first_load_writes_defaults(self, tmp_config):
        config = tmp_config.load_config()
        assert config == AppConfig()
        assert tmp_config.config_path.exists()
        assert json.loads(tmp_config.config_path.read_text())["reminder_poll_seconds"] == 60

    def test_file_is_owner_only(self, tmp_config):
        tmp_config.load_config()
        assert tmp_config.config_path.stat().st_mode & 0o777 == 0o600

    def test_existing_file_is_read(self, tmp_config):
        tmp_config.config_path.write_text(json.dumps({"notifications": False}))
        assert tmp_config.config.notifications is False

    def test_corrupt_file_raises(self, tmp_config):
        tmp_config.config_path.write_text("{not json")
        with pytest.raises(RuntimeError, match="Failed to load config"):
            tmp_config.load_config()


class TestUpdate:
    def test_update_persists(self, tmp_config):
        tmp_config.update_config(default_work_minutes=50)
        reloaded = ConfigService()
        assert reloaded.config.default_work_minutes == 50

    def test_unknown_key(self, tmp_config):
        with pytest.raises(ValueError, match="Unknown config key"):
            tmp_config.update_config(colour="red")

    def test_invalid_value(self, tmp_config):
        with pytest.raises(ValueError):
            tmp_config.update_config(reminder_poll_seconds=0)
        assert tmp_config.config.reminder_poll_seconds == 60

    def test_reset(self, tmp_config):
        tmp_config.update_config(notifications=False)
        tmp_config.reset_config()
        assert tmp_config.config.notifications is True


class TestResolveDbPath:
    def test_default_in_data_dir(self, tmp_config):
        assert tmp_config.resolve_db_path() == tmp_config.data_dir / "tasks.db"

    def test_configured_path(self, tmp_config, tmp_path):
        tmp_config.update_config(db_path=str(tmp_path / "mine.db"))
        assert tmp_config.resolve_db_path() == tmp_path / "mine.db"

    def test_override_wins(self, tmp_config, tmp_path):
        tmp_config.update_config(db_path=str(tmp_path / "mine.db"))
        assert tmp_config.resolve_db_path("~/other.db") == Path("~/other.db").expanduser()
