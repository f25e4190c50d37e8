"""
Standardized error message templates and error codes.

Keeps the wording of httpfacade exceptions consistent so callers and log
readers see the same shape of message for the same failure.
"""


class ErrorMessageTemplates:
    """Standardized error message templates for consistent formatting."""

    # Transport error templates
    TRANSPORT_FAILED = "{method} {uri} failed: {details}"
    REQUEST_TIMEOUT = "{method} {uri} timed out: {details}"
    PROXY_RESOLUTION_FAILED = "Proxy resolution for {uri} failed: {details}"
    UNEXPECTED_STATUS = "http {method} error: uri={uri}, statusCode={status_code}"

    # Codec error templates
    ENCODING_FAILED = "Could not encode request body as {format}: {details}"
    DECODING_FAILED = "Could not decode {format} response from {uri}: {details}"
    MULTIPART_FAILED = "Could not encode multipart field '{field}': {details}"

    # Local file error templates
    LOCAL_IO_FAILED = "Cannot {operation} {path}: {details}"

    # Configuration error templates
    CONFIG_INVALID = "Invalid configuration value for {field}: {value} - {reason}"
    CONFIG_FILE_ERROR = "Configuration file error: {file_path} - {details}"


class ErrorCodes:
    """Standardized error codes for consistent error categorization."""

    # Transport errors (TRANSPORT_xxx)
    TRANSPORT_FAILED = "TRANSPORT_001"
    TRANSPORT_TIMEOUT = "TRANSPORT_002"
    TRANSPORT_PROXY = "TRANSPORT_003"

    # Response errors (RESPONSE_xxx)
    RESPONSE_UNEXPECTED_STATUS = "RESPONSE_001"
    RESPONSE_DECODING = "RESPONSE_002"

    # Request body errors (REQUEST_xxx)
    REQUEST_ENCODING = "REQUEST_001"
    REQUEST_MULTIPART = "REQUEST_002"

    # Storage errors (STORAGE_xxx)
    STORAGE_IO_ERROR = "STORAGE_001"

    # Configuration errors (CONFIG_xxx)
    CONFIG_INVALID = "CONFIG_001"
    CONFIG_FILE_ERROR = "CONFIG_002"
