"""Configuration service for Pomodorable.

ConfigService is the single owner of config.json. It handles:

- Loading and saving config.json (created with defaults on first run)
- Dotted-key access, e.g. ``timer.focus_length``
- Resetting one key or the whole file to defaults
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from pomodorable.models.config_models import AppConfig

_APP_NAME = "pomodorable"


class ConfigService:
    """Service for loading, editing and persisting the application config."""

    def __init__(self, config_dir: Path | None = None):
        """Initialize the config service."""
        self.config_dir = config_dir or Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from disk, writing defaults on first run."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
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

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist.
        """
        value: Any = self.config
        for part in key.split("."):
            if isinstance(value, BaseModel) and part in type(value).model_fields:
                value = getattr(value, part)
            elif isinstance(value, dict) and part in value:
                value = value[part]
            else:
                raise KeyError(key)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        The whole config is re-validated before anything is written.

        Raises:
            KeyError: If the key does not name a setting.
            ValueError: If the value is rejected by validation.
        """
        self.get(key)  # unknown keys fail here

        parts = key.split(".")
        data = self.config.model_dump()
        current = data
        for part in parts[:-1]:
            current = current[part]
        current[parts[-1]] = value

        try:
            new_config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {_first_error(e)}") from e

        self._config = new_config
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset one key, or the entire configuration, to defaults.

        Entries inside ``quotes`` have no default of their own and are
        removed; an emptied ``quotes`` section goes back to None.
        """
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return

        try:
            defaults = ConfigService._from_config(AppConfig(), key)
        except KeyError:
            self._drop_entry(key)
            return
        self.set(key, defaults)

    def _drop_entry(self, key: str) -> None:
        """Remove one entry of a free-form section such as ``quotes.focus``."""
        parent_key, _, entry = key.rpartition(".")
        parent = self.get(parent_key) if parent_key else None
        if not isinstance(parent, dict) or entry not in parent:
            raise KeyError(key)
        remaining = {k: v for k, v in parent.items() if k != entry}
        self.set(parent_key, remaining or None)

    @staticmethod
    def _from_config(config: AppConfig, key: str) -> Any:
        value: Any = config
        for part in key.split("."):
            if isinstance(value, BaseModel) and part in type(value).model_fields:
                value = getattr(value, part)
            else:
                raise KeyError(key)
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value


def _first_error(error: ValidationError) -> str:
    errors = error.errors()
    if not errors:
        return str(error)
    return errors[0].get("msg", str(error))


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
