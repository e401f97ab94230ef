"""Configuration service for taskdeck application settings.

Settings live in ``config.json`` under the platform config directory and
are modelled by :class:`~taskdeck.models.AppConfig`. Values that change
while the session runs (timer durations) are kept in the store's key/value
table instead; see :mod:`taskdeck.models.focus.timer`.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import ValidationError

from taskdeck.adapters.sqlite.connection import DEFAULT_DB_NAME
from taskdeck.models import AppConfig
from taskdeck.utils.logger import get_logger


class ConfigService:
    """Loads, saves and updates the application settings file."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("taskdeck"))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir("taskdeck"))

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, creating the default file on first run.

        Raises:
            RuntimeError: If the file exists but cannot be parsed
        """
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            get_logger().info("no config at %s, writing defaults", self.config_path)
            self._config = AppConfig()
            self.save_config()
        except (OSError, ValidationError) as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to disk."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
            self.config_path.chmod(0o600)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def update_config(self, **changes: Any) -> AppConfig:
        """Validate and persist a partial settings change.

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        unknown = set(changes) - set(AppConfig.model_fields)
        if unknown:
            raise ValueError(f"Unknown config key(s): {', '.join(sorted(unknown))}")

        data = self.config.model_dump()
        data.update(changes)
        try:
            self._config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(str(e)) from e
        self.save_config()
        return self._config

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        self._config = AppConfig()
        self.save_config()

    def resolve_db_path(self, override: str | Path | None = None) -> Path:
        """Return the database path: CLI override, then config, then default."""
        if override:
            return Path(override).expanduser()
        if self.config.db_path:
            return Path(self.config.db_path).expanduser()
        return self.data_dir / DEFAULT_DB_NAME


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Return the process-wide ConfigService."""
    return ConfigService()
