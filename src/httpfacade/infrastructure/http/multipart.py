"""
multipart/form-data encoding.

Each field becomes one part carrying the original server contract's
Content-Disposition (with a ``filelength`` parameter) and its own
Content-Type. Parts are written in the order given.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from urllib3.fields import RequestField
from urllib3.filepost import encode_multipart_formdata

from ...constants import DEFAULT_PART_CONTENT_TYPE
from ...exceptions import MultipartEncodingError


@dataclass(frozen=True)
class MultipartField:
    """One form field or file of a multipart upload.

    Attributes:
        name: Form field name
        value: Raw bytes of the field
        filename: File name, empty for plain fields
        content_type: Content-Type of this part
    """

    name: str
    value: bytes
    filename: str = ""
    content_type: str = DEFAULT_PART_CONTENT_TYPE

    def content_disposition(self) -> str:
        return f'form-data; name="{self.name}"; filename="{self.filename}"; filelength={len(self.value)}'


def _check_header_text(field_name: str, label: str, text: object) -> None:
    if not isinstance(text, str):
        raise MultipartEncodingError(field_name, TypeError(f"{label} must be str, got {type(text).__name__}"))
    if "\r" in text or "\n" in text:
        raise MultipartEncodingError(field_name, ValueError(f"{label} contains a line break"))


def build_part(field: MultipartField) -> RequestField:
    """Build the urllib3 part for one field.

    Raises:
        MultipartEncodingError: If the value is not bytes or a header would be malformed
    """
    name = field.name if isinstance(field.name, str) else repr(field.name)
    _check_header_text(name, "name", field.name)
    _check_header_text(name, "filename", field.filename)
    _check_header_text(name, "content type", field.content_type)

    if not isinstance(field.value, (bytes, bytearray, memoryview)):
        raise MultipartEncodingError(name, TypeError(f"value must be bytes, got {type(field.value).__name__}"))

    part = RequestField(name=field.name, data=bytes(field.value), filename=field.filename or None)
    part.headers["Content-Disposition"] = field.content_disposition()
    if field.content_type:
        part.headers["Content-Type"] = field.content_type
    return part


def encode_multipart(fields: Sequence[MultipartField], boundary: Optional[str] = None) -> Tuple[bytes, str]:
    """Encode fields into a multipart body.

    Returns:
        The body and its ``multipart/form-data; boundary=...`` content type
    """
    parts = [build_part(field) for field in fields]
    return encode_multipart_formdata(parts, boundary=boundary)
