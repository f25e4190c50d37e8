"""
XML request encoding and response decoding.

Outgoing documents are built with ElementTree from an Element, an object
with ``to_xml()``, a pydantic model or dataclass (root tag = class name) or
a single-key mapping (root tag = the key). Inside a mapping, ``@name`` keys
become attributes, ``#text`` the element text, lists repeated elements.

Responses are parsed with defusedxml; ``element_to_dict`` is the inverse
mapping used when the decode target is a pydantic model.
"""

import dataclasses
from typing import Any, Dict, Mapping, Optional
from xml.etree import ElementTree as ET

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as DefusedET
from pydantic import BaseModel

from ...constants import TEXT_ENCODING
from ...exceptions import DecodingError, EncodingError
from .targets import DecodeTarget, apply_target, is_model_target


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _fill(element: ET.Element, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, child in value.items():
            key = str(key)
            if key.startswith("@"):
                element.set(key[1:], _text(child))
            elif key == "#text":
                element.text = _text(child)
            elif isinstance(child, (list, tuple)):
                for item in child:
                    element.append(_build(key, item))
            else:
                element.append(_build(key, child))
    elif isinstance(value, (list, tuple)):
        raise TypeError(f"list under <{element.tag}> needs a key for its items")
    else:
        element.text = _text(value)


def _build(tag: str, value: Any) -> ET.Element:
    element = ET.Element(tag)
    _fill(element, value)
    return element


def to_element(obj: Any) -> ET.Element:
    """Turn a supported object into an Element tree."""
    if ET.iselement(obj):
        return obj
    if hasattr(obj, "to_xml"):
        return to_element(obj.to_xml())
    if isinstance(obj, BaseModel):
        return _build(type(obj).__name__, obj.model_dump(mode="json", by_alias=True))
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _build(type(obj).__name__, dataclasses.asdict(obj))
    if isinstance(obj, Mapping) and len(obj) == 1:
        (tag, value), = obj.items()
        return _build(str(tag), value)
    raise TypeError(f"Cannot determine a root element for {type(obj).__name__}")


def element_to_dict(element: ET.Element) -> Any:
    """Convert an element's content to plain data (text, or a dict of children)."""
    children = list(element)
    if not children and not element.attrib:
        return element.text

    result: Dict[str, Any] = {f"@{name}": value for name, value in element.attrib.items()}
    for child in children:
        value = element_to_dict(child)
        if child.tag in result:
            existing = result[child.tag]
            if not isinstance(existing, list):
                result[child.tag] = [existing]
            result[child.tag].append(value)
        else:
            result[child.tag] = value

    text = (element.text or "").strip()
    if text:
        result["#text"] = text
    return result


def encode_xml(obj: Any) -> bytes:
    """Encode ``obj`` as an XML request body, without an XML declaration.

    Raises:
        EncodingError: If no document can be built from the object
    """
    try:
        element = to_element(obj)
        return ET.tostring(element, encoding="unicode").encode(TEXT_ENCODING)
    except (TypeError, ValueError) as e:
        raise EncodingError("xml", e) from e


def decode_xml(content: bytes, uri: str, into: Optional[DecodeTarget] = None) -> Any:
    """Parse an XML response body, optionally into a target.

    Without a target the root Element is returned. A pydantic model target
    is validated from ``element_to_dict(root)``; any other callable receives
    the root Element.

    Raises:
        DecodingError: If the body is not well-formed, forbidden, or rejected by the target
    """
    try:
        root = DefusedET.fromstring(content)
    except (ET.ParseError, DefusedXmlException) as e:
        raise DecodingError("xml", uri, e) from e

    if is_model_target(into):
        return apply_target(element_to_dict(root), into, "xml", uri)
    return apply_target(root, into, "xml", uri)
