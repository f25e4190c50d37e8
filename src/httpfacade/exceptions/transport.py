"""
Transport and response exceptions.

Raised when a request cannot be delivered (DNS, connect, TLS, timeout,
proxy resolution) or when the server answers with a status other than 200.
"""

from typing import Optional

from .base import ExceptionContext, HttpFacadeError
from .templates import ErrorCodes, ErrorMessageTemplates


class TransportError(HttpFacadeError):
    """Raised when the request could not be exchanged with the server.

    The underlying exception is available as ``cause`` and is also chained
    as ``__cause__`` by the raising code.
    """

    template = ErrorMessageTemplates.TRANSPORT_FAILED
    code = ErrorCodes.TRANSPORT_FAILED
    help = "Check network connectivity, DNS resolution and proxy settings"

    def __init__(self, uri: str, cause: BaseException, method: str = "GET"):
        self.uri = uri
        self.method = method
        self.cause = cause

        message = self.template.format(method=method, uri=uri, details=cause)
        context = ExceptionContext(
            help_text=self.help,
            error_code=self.code,
            context={"uri": uri, "method": method},
            technical_details=f"{type(cause).__name__}: {cause}",
        )
        super().__init__(message, context)


class RequestTimeoutError(TransportError):
    """Raised when the configured timeout elapses before a response arrives."""

    template = ErrorMessageTemplates.REQUEST_TIMEOUT
    code = ErrorCodes.TRANSPORT_TIMEOUT
    help = "Raise the timeout with set_timeout() or check the server's latency"


class ProxyResolutionError(TransportError):
    """Raised when the configured proxy resolver refuses a request.

    No byte is sent to the network when this is raised.
    """

    template = ErrorMessageTemplates.PROXY_RESOLUTION_FAILED
    code = ErrorCodes.TRANSPORT_PROXY
    help = "Check the resolver installed with set_proxy()"


class UnexpectedStatusError(HttpFacadeError):
    """Raised when the response status is not 200 OK.

    The response body is discarded and never attached to the error.
    """

    def __init__(self, uri: str, status_code: int, method: str = "GET", reason: Optional[str] = None):
        self.uri = uri
        self.status_code = status_code
        self.method = method

        message = ErrorMessageTemplates.UNEXPECTED_STATUS.format(
            method=method.lower(), uri=uri, status_code=status_code
        )
        context = ExceptionContext(
            error_code=ErrorCodes.RESPONSE_UNEXPECTED_STATUS,
            context={"uri": uri, "method": method, "status_code": status_code},
            technical_details=f"HTTP {status_code} {reason}" if reason else None,
        )
        super().__init__(message, context)
