"""
Configuration for the Billingo CLI.
Uses pydantic-settings for environment variables, layered over a JSON file
written by `billingohu config set`.

Precedence: environment (BILLINGO_*) > stored config file > defaults.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from billingo import Credentials, DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".billingohu.json"

# Store key -> Settings attribute
CONFIG_KEYS: Dict[str, str] = {
    "apiKey": "api_key",
    "baseUrl": "base_url",
}

class ConfigFileError(Exception):
    """The stored config file cannot be read."""


DEFAULTS: Dict[str, str] = {
    "baseUrl": DEFAULT_BASE_URL,
}


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BILLINGO_",
        env_file=".env",
        extra="ignore",
    )

    # Billingo API (empty means "not set in the environment")
    api_key: str = ""
    base_url: str = ""

    # Persisted config written by `config set`
    config_file: Path = CONFIG_FILE

    # Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


class ConfigStore:
    """Reads and writes CLI configuration.

    Usage:
        store = ConfigStore.from_settings()
        store.set("apiKey", "abc123")
        if store.is_configured():
            credentials = store.credentials()
    """

    def __init__(self, path: Optional[Path] = None, settings: Optional[Settings] = None):
        """Initialize ConfigStore.

        Args:
            path: JSON config file. Defaults to settings.config_file
            settings: Environment settings. Defaults to get_settings()
        """
        self.settings = settings or get_settings()
        self.path = Path(path or self.settings.config_file).expanduser()
        self._values: Optional[Dict[str, str]] = None

    @classmethod
    def from_settings(cls) -> "ConfigStore":
        return cls(settings=get_settings())

    def load(self) -> Dict[str, str]:
        """Load stored values from file.

        Raises:
            ConfigFileError: If the file exists but is not a JSON object
        """
        if self._values is None:
            if self.path.exists():
                try:
                    values = json.loads(self.path.read_text() or "{}")
                except json.JSONDecodeError as e:
                    raise ConfigFileError(f"Config file {self.path} is not valid JSON: {e}") from e
                if not isinstance(values, dict):
                    raise ConfigFileError(f"Config file {self.path} must contain a JSON object")
                self._values = values
            else:
                self._values = {}
        return self._values

    def _save(self) -> None:
        """Save stored values to file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self.load(), indent=2, ensure_ascii=False))
        # The file holds an API key
        self.path.chmod(0o600)

    @staticmethod
    def _check_key(key: str) -> str:
        if key not in CONFIG_KEYS:
            raise KeyError(f"Unknown config key: {key}. Available: {list(CONFIG_KEYS)}")
        return key

    def stored(self, key: str) -> Optional[str]:
        """Value from the config file only, ignoring environment and defaults."""
        return self.load().get(self._check_key(key)) or None

    def get(self, key: str) -> Optional[str]:
        """Resolve a config value.

        Args:
            key: "apiKey" or "baseUrl"

        Returns:
            Environment value, else stored value, else default (None if unset)
        """
        from_env = getattr(self.settings, CONFIG_KEYS[self._check_key(key)])
        if from_env:
            return from_env
        return self.stored(key) or DEFAULTS.get(key)

    def set(self, key: str, value: str) -> None:
        """Persist a value to the config file."""
        self.load()[self._check_key(key)] = value
        self._save()
        logger.info(f"Config key {key} updated in {self.path}")

    def unset(self, key: str) -> bool:
        """Remove a stored value.

        Returns:
            True if removed, False if it was not stored
        """
        values = self.load()
        if self._check_key(key) in values:
            del values[key]
            self._save()
            return True
        return False

    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.get("apiKey"))

    def source(self, key: str) -> str:
        """Where the resolved value comes from: env, file, default or unset."""
        if getattr(self.settings, CONFIG_KEYS[self._check_key(key)]):
            return "env"
        if self.stored(key):
            return "file"
        if key in DEFAULTS:
            return "default"
        return "unset"

    def credentials(self) -> Credentials:
        """Build credentials for BillingoClient."""
        return Credentials(
            api_key=self.get("apiKey") or "",
            base_url=self.get("baseUrl") or DEFAULT_BASE_URL,
        )
