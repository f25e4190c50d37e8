"""
Logger wrapper with correlation IDs and structured context.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional
from uuid import uuid4


class FacadeLogger:
    """Logger that attaches a correlation ID and key/value context to every record."""

    def __init__(self, name: str, correlation_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id or str(uuid4())
        self.extra_context: Dict[str, Any] = {}

    def _log(self, level: int, msg: str, exc_info: bool = False, **kwargs):
        if not self.logger.isEnabledFor(level):
            return

        extra: Dict[str, Any] = {"correlation_id": self.correlation_id}
        context = {**self.extra_context, **kwargs}
        if context:
            extra["extra_context"] = context

        self.logger.log(level, msg, extra=extra, exc_info=exc_info)

    def debug(self, msg: str, **kwargs):
        """Log debug message."""
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs):
        """Log info message."""
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs):
        """Log warning message."""
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs):
        """Log error message."""
        self._log(logging.ERROR, msg, **kwargs)

    def exception(self, msg: str, **kwargs):
        """Log exception with traceback."""
        self._log(logging.ERROR, msg, exc_info=True, **kwargs)

    def add_context(self, **kwargs):
        """Add persistent context to this logger."""
        self.extra_context.update(kwargs)

    def with_context(self, **kwargs) -> "FacadeLogger":
        """Create a copy of this logger with additional context."""
        new_logger = FacadeLogger(self.logger.name, self.correlation_id)
        new_logger.extra_context = {**self.extra_context, **kwargs}
        return new_logger

    @contextmanager
    def temp_context(self, **kwargs):
        """Context manager for temporary context."""
        original_context = self.extra_context.copy()
        self.extra_context.update(kwargs)
        try:
            yield self
        finally:
            self.extra_context = original_context
