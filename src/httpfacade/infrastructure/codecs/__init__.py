"""Body codecs for JSON and XML payloads."""

from .json_codec import decode_json, encode_json
from .targets import DecodeTarget, apply_target
from .xml_codec import decode_xml, element_to_dict, encode_xml, to_element

__all__ = [
    "DecodeTarget",
    "apply_target",
    "decode_json",
    "encode_json",
    "decode_xml",
    "encode_xml",
    "element_to_dict",
    "to_element",
]
