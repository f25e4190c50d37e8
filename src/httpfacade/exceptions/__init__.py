"""
httpfacade exception hierarchy.

Exception Hierarchy:
    HttpFacadeError (base)
    ├── TransportError
    │   ├── RequestTimeoutError
    │   └── ProxyResolutionError
    ├── UnexpectedStatusError
    ├── EncodingError
    │   └── MultipartEncodingError
    ├── DecodingError
    ├── LocalIOError
    └── ConfigurationError
        ├── InvalidConfigurationError
        ├── ConfigurationFileError
        └── ConfigurationValidationError
"""

from .base import ExceptionContext, HttpFacadeError

# Body codec exceptions
from .codec import DecodingError, EncodingError, MultipartEncodingError

# Configuration exceptions
from .config import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

# Local filesystem exceptions
from .storage import LocalIOError

# Transport exceptions
from .transport import (
    ProxyResolutionError,
    RequestTimeoutError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    # Base
    "HttpFacadeError",
    "ExceptionContext",
    # Transport
    "TransportError",
    "RequestTimeoutError",
    "ProxyResolutionError",
    "UnexpectedStatusError",
    # Codecs
    "EncodingError",
    "MultipartEncodingError",
    "DecodingError",
    # Storage
    "LocalIOError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationFileError",
    "ConfigurationValidationError",
]
