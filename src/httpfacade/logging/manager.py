"""
Centralized logging configuration and management.

Provides the LoggingManager singleton for configuring and handing out loggers.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List, Optional

from ..constants import SERVICE_NAME
from .config import LoggingConfig
from .formatters import StructuredFormatter, create_console_formatter
from .loggers import FacadeLogger


class LoggingManager:
    """Centralized logging configuration and management.

    Only the ``httpfacade`` logger tree is configured; the root logger is
    left to the host application.
    """

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config: Optional[LoggingConfig] = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    @property
    def package_logger(self) -> logging.Logger:
        return logging.getLogger(SERVICE_NAME)

    def configure(self, config: LoggingConfig):
        """Configure the httpfacade logger tree."""
        self.config = config
        self.reset()

        self.package_logger.setLevel(config.level)

        for output in config.output:
            if output == "console":
                self._add_console_handler(config)
            elif output == "file":
                self._add_file_handler(config)

    def reset(self):
        """Detach and close every handler this manager installed."""
        for handler in self.handlers:
            self.package_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

    def _add_console_handler(self, config: LoggingConfig):
        handler = logging.StreamHandler(sys.stderr)
        if config.format_type == "json":
            handler.setFormatter(StructuredFormatter(config.service_name, config.version))
        else:
            handler.setFormatter(create_console_formatter())
        self._install(handler, config)

    def _add_file_handler(self, config: LoggingConfig):
        """Add file handler with rotation."""
        if not config.file_path:
            config.file_path = Path("logs/httpfacade.log")

        config.file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        if config.format_type == "json":
            handler.setFormatter(StructuredFormatter(config.service_name, config.version))
        else:
            handler.setFormatter(create_console_formatter())
        self._install(handler, config)

    def _install(self, handler: logging.Handler, config: LoggingConfig):
        handler.setLevel(config.level)
        self.package_logger.addHandler(handler)
        self.handlers.append(handler)

    def get_logger(self, name: str, correlation_id: Optional[str] = None) -> FacadeLogger:
        """Get a FacadeLogger instance."""
        return FacadeLogger(name, correlation_id)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig):
    """Configure the global logging system."""
    logging_manager.configure(config)
