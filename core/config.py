"""
Configuration Manager with Environment Variables Support

Usage:
    from core.config import get_config

    config = get_config()
    min_length = config.get_int("PASSGAUGE_MIN_LENGTH", 8)
    words_file = config.get_path("PASSGAUGE_DICTIONARY_FILE")

The instance is read once per process; evaluation results depend only on
their arguments and this snapshot.
"""
import os
import re
import json
import logging
from typing import Any, Optional, Dict
from pathlib import Path

from dotenv import load_dotenv

from constants import ConfigKeys, Scoring
from core.paths import config_path
from core.singleton import SingletonMeta
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Config(metaclass=SingletonMeta):
    """
    Unified configuration manager that supports:
    - Environment variables (.env)
    - JSON configuration file (config/settings.json)
    - Default values
    - Type conversion
    - Validation
    """

    def __init__(self, env_file: Optional[Path] = None, config_file: Optional[Path] = None):
        self._env_loaded = False
        self._config_cache: Dict[str, Any] = {}
        self._env_file_path = Path(env_file) if env_file else Path(".env")
        self._config_file_path = Path(config_file) if config_file else config_path("settings.json")

        self._load_env()
        self._load_json_config()

    def _load_env(self):
        """Load environment variables from .env file"""
        if self._env_file_path.exists():
            load_dotenv(self._env_file_path)
            self._env_loaded = True
            logger.info(f"Environment variables loaded from {self._env_file_path}")
        else:
            logger.debug(".env file not found, using system environment only")

    def _load_json_config(self):
        """Load configuration from JSON file"""
        if self._config_file_path.exists():
            try:
                with open(self._config_file_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:
                raise ConfigurationError(
                    f"Failed to load config file {self._config_file_path}",
                    detail=str(e),
                ) from e
            if not isinstance(data, dict):
                raise ConfigurationError(
                    f"Config file {self._config_file_path} must contain a JSON object"
                )
            self._config_cache = data
            logger.info(f"Configuration loaded from {self._config_file_path}")
        else:
            logger.debug(f"Config file not found: {self._config_file_path}")
            self._config_cache = {}

    def get(
            self,
            key: str,
            default: Any = None,
            required: bool = False,
            from_env: bool = True
    ) -> Any:
        """
        Get configuration value.

        Priority order:
        1. Environment variable (if from_env=True)
        2. JSON config file
        3. Default value

        Raises:
            ConfigurationError: If required=True and key not found
        """
        if from_env:
            env_value = os.getenv(key)
            if env_value is not None:
                return env_value

        if key in self._config_cache:
            return self._config_cache[key]

        if default is not None:
            return default

        if required:
            raise ConfigurationError(
                f"Required configuration '{key}' not found. "
                f"Set it in .env or {self._config_file_path}",
                option=key,
            )

        return None

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value"""
        value = self.get(key, default)

        if isinstance(value, bool):
            return value

        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")

        return bool(value)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value"""
        value = self.get(key, default)

        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid int value for '{key}': {value}, using default")
            return default

    def get_list(self, key: str, default: list = None, separator: str = ",") -> list:
        """
        Get list configuration value.

        Supports:
        - JSON arrays: ["item1", "item2"]
        - Comma-separated strings: "item1,item2,item3"
        """
        if default is None:
            default = []

        value = self.get(key, default)

        if isinstance(value, list):
            return value

        if isinstance(value, str):
            return [item.strip() for item in value.split(separator) if item.strip()]

        return default

    def get_path(self, key: str, default: str = None) -> Optional[Path]:
        """Get Path configuration value (None when unset and no default)"""
        value = self.get(key, default)
        return Path(value) if value else None

    def validate(self, schema: Dict[str, Dict[str, Any]]):
        """
        Validate configuration against schema.

        Example schema:
        {
            "PASSGAUGE_MIN_LENGTH": {
                "required": False,
                "pattern": r"^\\d+$"
            }
        }
        """
        errors = []

        for key, rules in schema.items():
            value = self.get(key)

            if rules.get("required", False) and value is None:
                errors.append(f"Required config '{key}' is missing")
                continue

            if "pattern" in rules and value is not None:
                if not re.match(rules["pattern"], str(value)):
                    errors.append(
                        f"Config '{key}' does not match pattern {rules['pattern']}"
                    )

        if errors:
            raise ConfigurationError(
                "Configuration validation failed:\n" + "\n".join(f"- {e}" for e in errors)
            )


# Convenience functions
def get_config() -> Config:
    """Process-wide configuration instance"""
    return Config.get_instance()


def get_length_defaults() -> tuple:
    """(min_length, max_length) used when the caller's options omit them"""
    config = get_config()
    return (
        config.get_int(ConfigKeys.MIN_LENGTH, Scoring.DEFAULT_MIN_LENGTH),
        config.get_int(ConfigKeys.MAX_LENGTH, Scoring.DEFAULT_MAX_LENGTH),
    )


def get_log_level() -> str:
    """Get logging level"""
    return str(get_config().get(ConfigKeys.LOG_LEVEL, default="INFO")).upper()


# Configuration schema for validation
CONFIG_SCHEMA = {
    ConfigKeys.MIN_LENGTH: {
        "required": False,
        "pattern": r"^[1-9]\d*$",
    },
    ConfigKeys.MAX_LENGTH: {
        "required": False,
        "pattern": r"^[1-9]\d*$",
    },
    ConfigKeys.LOG_LEVEL: {
        "required": False,
        "pattern": r"^(?i:debug|info|warning|error|critical)$",
    },
}


def validate_config():
    """Validate configuration on startup"""
    try:
        get_config().validate(CONFIG_SCHEMA)
        logger.debug("Configuration validated successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
