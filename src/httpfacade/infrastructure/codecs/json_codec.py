"""
JSON request encoding and response decoding.

Encoding matches the wire format servers of this API already accept:
compact separators, raw UTF-8, a trailing newline, U+2028/U+2029 always
escaped and, unless disabled, ``<``, ``>`` and ``&`` escaped as well.
"""

import dataclasses
import json
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel

from ...constants import TEXT_ENCODING
from ...exceptions import DecodingError, EncodingError
from .targets import DecodeTarget, apply_target

_LINE_SEPARATOR_ESCAPES = str.maketrans({"\u2028": "\\u2028", "\u2029": "\\u2029"})
_HTML_ESCAPES = str.maketrans({"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"})


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (bytes, bytearray)):
        raise TypeError("bytes are not JSON serializable; encode them first")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_json(obj: Any, escape_html: bool = True) -> bytes:
    """Encode ``obj`` as a JSON request body.

    Raises:
        EncodingError: If the object cannot be represented as JSON
    """
    try:
        text = json.dumps(obj, default=_default, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
        text = text.translate(_LINE_SEPARATOR_ESCAPES)
        if escape_html:
            text = text.translate(_HTML_ESCAPES)
        return (text + "\n").encode(TEXT_ENCODING)
    except (TypeError, ValueError) as e:
        raise EncodingError("json", e) from e


def decode_json(content: bytes, uri: str, into: Optional[DecodeTarget] = None) -> Any:
    """Decode a JSON response body, optionally into a target.

    Raises:
        DecodingError: If the body is not JSON or the target rejects it
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        raise DecodingError("json", uri, e) from e
    return apply_target(data, into, "json", uri)
