"""
httpfacade: blocking HTTP helpers over a shared, configurable client.

Example:
    >>> import httpfacade
    >>> httpfacade.set_timeout(10)
    >>> data = httpfacade.get_json("https://example.com/api/items")
    >>> httpfacade.download_file("report.pdf", "https://example.com/report.pdf")
"""

from .core.config import (
    ClientConfig,
    ConfigManager,
    get_config,
    load_config,
    reset_config,
    set_proxy,
    set_timeout,
)
from .core.proxy import (
    EnvironmentProxyResolver,
    FunctionProxyResolver,
    ProxyResolver,
    StaticProxyResolver,
)
from .exceptions import (
    ConfigurationError,
    DecodingError,
    EncodingError,
    HttpFacadeError,
    LocalIOError,
    MultipartEncodingError,
    ProxyResolutionError,
    RequestTimeoutError,
    TransportError,
    UnexpectedStatusError,
)
from .infrastructure.http import HttpClient, MultipartField, build_client
from .logging import LoggingConfig, configure_logging, get_logger
from .services import (
    download_file,
    get_body,
    get_json,
    get_xml,
    post_file,
    post_json,
    post_json_into,
    post_multipart_form,
    post_xml_into,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ClientConfig",
    "ConfigManager",
    "get_config",
    "load_config",
    "reset_config",
    "set_proxy",
    "set_timeout",
    # Proxy resolution
    "ProxyResolver",
    "StaticProxyResolver",
    "FunctionProxyResolver",
    "EnvironmentProxyResolver",
    # Client
    "HttpClient",
    "build_client",
    "MultipartField",
    # Helpers
    "get_json",
    "get_xml",
    "get_body",
    "post_json",
    "post_json_into",
    "post_xml_into",
    "post_file",
    "post_multipart_form",
    "download_file",
    # Exceptions
    "HttpFacadeError",
    "TransportError",
    "RequestTimeoutError",
    "ProxyResolutionError",
    "UnexpectedStatusError",
    "EncodingError",
    "MultipartEncodingError",
    "DecodingError",
    "LocalIOError",
    "ConfigurationError",
    # Logging
    "LoggingConfig",
    "configure_logging",
    "get_logger",
]
