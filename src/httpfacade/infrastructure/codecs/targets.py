"""
Conversion of decoded bodies into caller-supplied targets.
"""

from typing import Any, Callable, Optional, Type, Union

from pydantic import BaseModel

from ...exceptions import DecodingError

DecodeTarget = Union[Type[BaseModel], Callable[[Any], Any]]


def is_model_target(into: Any) -> bool:
    return isinstance(into, type) and issubclass(into, BaseModel)


def apply_target(data: Any, into: Optional[DecodeTarget], format: str, uri: str) -> Any:
    """Validate ``data`` into a pydantic model or pass it to a callable.

    Raises:
        DecodingError: If the target rejects the data or fails on it
    """
    if into is None:
        return data

    try:
        if is_model_target(into):
            return into.model_validate(data)
        return into(data)
    except Exception as e:
        raise DecodingError(format, uri, e) from e
