"""
Configuration manager.

Loads the application configuration in precedence order:

1. Schema defaults
2. JSON configuration file (explicit path or ``SOLID_CONFIG_FILE``)
3. Environment overrides (``SOLID_LOG_LEVEL``, ``SOLID_LOG_DESTINATION``,
   ``SOLID_OUTPUT_FORMAT``)
"""
import json
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from solid_principles.config.env_expansion import expand_env_vars
from solid_principles.config.schemas import AppConfig
from solid_principles.domain.core.exceptions import ConfigurationError

CONFIG_FILE_ENV = "SOLID_CONFIG_FILE"

# env var -> (section, key)
ENV_OVERRIDES = {
    "SOLID_LOG_LEVEL": ("logging", "level"),
    "SOLID_LOG_DESTINATION": ("logging", "destination"),
    "SOLID_LOG_FILE": ("logging", "file_path"),
    "SOLID_OUTPUT_FORMAT": ("output", "format"),
}


class ConfigurationManager:
    """Builds and caches the validated AppConfig."""

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        return self._config_file

    def get_app_config(self) -> AppConfig:
        """Return the validated configuration, loading it on first use."""
        if self._config is None:
            self._config = self._build_config()
        return self._config

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a single value from the loaded configuration."""
        data = self.get_app_config().to_dict()
        return data.get(section, {}).get(key, default)

    def reload(self) -> AppConfig:
        self._config = None
        return self.get_app_config()

    def _build_config(self) -> AppConfig:
        raw: Dict[str, Any] = {}
        if self._config_file:
            raw = self._load_file(self._config_file)
        self._apply_env_overrides(raw)
        raw = expand_env_vars(raw)
        try:
            return AppConfig.model_validate(raw)
        except PydanticValidationError as e:
            fields = [".".join(str(p) for p in err["loc"]) for err in e.errors()]
            raise ConfigurationError(f"Invalid configuration: {e}", fields) from e

    @staticmethod
    def _load_file(path: str) -> Dict[str, Any]:
        path = os.path.expandvars(os.path.expanduser(path))
        if not os.path.isfile(path):
            raise ConfigurationError(f"Configuration file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")
        return data

    @staticmethod
    def _apply_env_overrides(raw: Dict[str, Any]) -> None:
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if not value:
                continue
            section_data = raw.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigurationError(
                    f"Configuration section '{section}' must be an object to apply {env_var}",
                    [section],
                )
            section_data[key] = value
