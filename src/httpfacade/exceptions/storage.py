"""
Local filesystem exceptions for download and upload paths.
"""

from pathlib import Path
from typing import Union

from .base import ExceptionContext, HttpFacadeError
from .templates import ErrorCodes, ErrorMessageTemplates


class LocalIOError(HttpFacadeError):
    """Raised when a local file cannot be created, written or read."""

    def __init__(self, path: Union[str, Path], operation: str, cause: BaseException):
        self.path = Path(path)
        self.operation = operation
        self.cause = cause

        message = ErrorMessageTemplates.LOCAL_IO_FAILED.format(
            operation=operation, path=self.path, details=cause
        )
        context = ExceptionContext(
            help_text=f"Check permissions and free space for {self.path.parent}",
            error_code=ErrorCodes.STORAGE_IO_ERROR,
            context={"path": str(self.path), "operation": operation},
            technical_details=f"{type(cause).__name__}: {cause}",
        )
        super().__init__(message, context)
