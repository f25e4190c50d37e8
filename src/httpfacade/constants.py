"""
Library-wide constants for httpfacade.

Default timeouts, content types and transfer sizes shared by the
configuration layer, the client and the request helpers.
"""

# Network constants
DEFAULT_TIMEOUT_SECONDS = 60.0
HTTP_STATUS_OK = 200

# Content types
JSON_CONTENT_TYPE = "application/json;charset=utf-8"
XML_CONTENT_TYPE = "application/xml;charset=utf-8"
DEFAULT_PART_CONTENT_TYPE = "application/octet-stream"

# Transfer constants
BODY_CHUNK_SIZE = 64 * 1024
TEXT_ENCODING = "utf-8"

# Logging constants
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_BACKUP_COUNT = 5
SERVICE_NAME = "httpfacade"
