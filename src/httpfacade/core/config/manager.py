"""
Configuration manager for httpfacade.

Loads the optional TOML file, layers environment overrides on top,
validates the result and pushes it into the global store and the logging
manager.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ...exceptions.config import (
    ConfigurationFileError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from ...logging import LoggingConfig, configure_logging
from .models import FacadeConfig, FacadeSettings
from .store import ConfigStore, config_store


class ConfigManager:
    """Builds a FacadeConfig from a file and the environment, and applies it."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None, store: Optional[ConfigStore] = None):
        self.config_path = Path(config_path) if config_path else None
        self.store = store or config_store
        self._config: Optional[FacadeConfig] = None

    def load_config(self) -> FacadeConfig:
        """Load, merge and validate configuration."""
        data = self._read_file()
        self._apply_env_overrides(data)

        try:
            self._config = FacadeConfig(**data)
        except ValidationError as e:
            errors = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]
            raise ConfigurationValidationError(errors) from e

        return self._config

    def _read_file(self) -> Dict[str, Any]:
        if self.config_path is None or not self.config_path.exists():
            return {}

        try:
            with open(self.config_path, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationFileError(self.config_path, f"invalid TOML: {e}") from e
        except OSError as e:
            raise ConfigurationFileError(self.config_path, str(e)) from e

    def _apply_env_overrides(self, data: Dict[str, Any]) -> None:
        for section in ("http", "logging"):
            value = data.setdefault(section, {})
            if not isinstance(value, dict):
                raise InvalidConfigurationError(section, value, "must be a table")

        settings = FacadeSettings()
        http = data["http"]
        log = data["logging"]

        if settings.httpfacade_timeout is not None:
            http["timeout"] = settings.httpfacade_timeout
        if settings.httpfacade_proxy:
            http["proxy"] = settings.httpfacade_proxy
        if settings.httpfacade_log_level:
            log["level"] = settings.httpfacade_log_level.upper()
        if settings.httpfacade_log_format:
            log["format"] = settings.httpfacade_log_format
        if settings.httpfacade_log_file:
            log["file_path"] = settings.httpfacade_log_file
            log["output"] = sorted(set(log.get("output", ["console"])) | {"file"})

    def get_config(self) -> FacadeConfig:
        if self._config is None:
            return self.load_config()
        return self._config

    def apply(self, config: Optional[FacadeConfig] = None) -> FacadeConfig:
        """Push the configuration into the client store and the logging system."""
        config = config or self.get_config()

        self.store.set_timeout(config.http.timeout)
        self.store.set_proxy(config.http.proxy)

        configure_logging(
            LoggingConfig(
                level=config.logging.level.value,
                format_type=config.logging.format,
                output=list(config.logging.output),
                file_path=config.logging.file_path,
                max_file_size=config.logging.max_file_size,
                backup_count=config.logging.backup_count,
            )
        )
        return config


def load_config(config_path: Optional[Union[str, Path]] = None) -> FacadeConfig:
    """Load configuration from a TOML file and the environment, and apply it globally."""
    manager = ConfigManager(config_path)
    return manager.apply(manager.load_config())
