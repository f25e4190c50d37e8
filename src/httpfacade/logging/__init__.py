"""
httpfacade logging package.

- config: LoggingConfig for levels, formats and outputs
- formatters: JSON and console formatters
- loggers: FacadeLogger with correlation IDs and context
- manager: LoggingManager singleton and configure_logging()
"""

from .config import LoggingConfig
from .formatters import StructuredFormatter, create_console_formatter
from .loggers import FacadeLogger
from .manager import LoggingManager, configure_logging, logging_manager

get_logger = logging_manager.get_logger

__all__ = [
    "LoggingConfig",
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "FacadeLogger",
    "get_logger",
    "StructuredFormatter",
    "create_console_formatter",
]
