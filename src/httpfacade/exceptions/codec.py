"""
Request and response body codec exceptions.
"""

from .base import ExceptionContext, HttpFacadeError
from .templates import ErrorCodes, ErrorMessageTemplates


class EncodingError(HttpFacadeError):
    """Raised when an outgoing payload cannot be encoded. The request is never sent."""

    def __init__(self, format: str, cause: BaseException):
        self.format = format
        self.cause = cause

        message = ErrorMessageTemplates.ENCODING_FAILED.format(format=format, details=cause)
        context = ExceptionContext(
            help_text=f"Pass a value the {format} encoder can serialize",
            error_code=ErrorCodes.REQUEST_ENCODING,
            context={"format": format},
            technical_details=f"{type(cause).__name__}: {cause}",
        )
        HttpFacadeError.__init__(self, message, context)


class MultipartEncodingError(EncodingError):
    """Raised when a multipart part cannot be built."""

    def __init__(self, field: str, cause: BaseException):
        self.format = "multipart"
        self.field = field
        self.cause = cause

        message = ErrorMessageTemplates.MULTIPART_FAILED.format(field=field, details=cause)
        context = ExceptionContext(
            help_text="Field names, filenames and content types must be single-line text and values bytes",
            error_code=ErrorCodes.REQUEST_MULTIPART,
            context={"format": "multipart", "field": field},
            technical_details=f"{type(cause).__name__}: {cause}",
        )
        HttpFacadeError.__init__(self, message, context)


class DecodingError(HttpFacadeError):
    """Raised when a 200 response body cannot be decoded into the requested target."""

    def __init__(self, format: str, uri: str, cause: BaseException):
        self.format = format
        self.uri = uri
        self.cause = cause

        message = ErrorMessageTemplates.DECODING_FAILED.format(format=format, uri=uri, details=cause)
        context = ExceptionContext(
            help_text=f"Verify that {uri} returns {format} matching the decode target",
            error_code=ErrorCodes.RESPONSE_DECODING,
            context={"format": format, "uri": uri},
            technical_details=f"{type(cause).__name__}: {cause}",
        )
        super().__init__(message, context)
