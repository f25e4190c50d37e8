"""Request helpers built on the HTTP infrastructure."""

from .facade import (
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

__all__ = [
    "get_json",
    "get_xml",
    "get_body",
    "post_json",
    "post_json_into",
    "post_xml_into",
    "post_file",
    "post_multipart_form",
    "download_file",
]
