"""Configuration store, models and manager."""

from .manager import ConfigManager, load_config
from .models import FacadeConfig, FacadeSettings, HttpSettingsConfig, LoggingSettingsConfig
from .store import (
    ClientConfig,
    ConfigStore,
    config_store,
    get_config,
    normalize_timeout,
    reset_config,
    set_proxy,
    set_timeout,
)

__all__ = [
    "ClientConfig",
    "ConfigStore",
    "config_store",
    "get_config",
    "normalize_timeout",
    "reset_config",
    "set_proxy",
    "set_timeout",
    "ConfigManager",
    "load_config",
    "FacadeConfig",
    "FacadeSettings",
    "HttpSettingsConfig",
    "LoggingSettingsConfig",
]
