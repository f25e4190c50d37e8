"""HTTP infrastructure components."""

from .client import Deadline, HttpClient, build_client, wrap_transport_error
from .multipart import MultipartField, build_part, encode_multipart

__all__ = [
    "Deadline",
    "HttpClient",
    "build_client",
    "wrap_transport_error",
    "MultipartField",
    "build_part",
    "encode_multipart",
]
