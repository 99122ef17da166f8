"""JSON conversion helpers.

Output matches JavaScript JSON.stringify: compact separators,
non-ASCII kept as-is, object fields in declaration order,
NaN and infinities written as null.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from enum import Enum
from typing import Any, TypeVar

from selectorkit.domain.exceptions.serialization import SerializationError

logger = logging.getLogger(__name__)

_SEPARATORS = (",", ":")

T = TypeVar("T")


def _to_json_value(obj: object) -> object:
    """Convert obj to plain JSON values.

    Non-finite floats become None (null), as in JSON.stringify.
    Dataclasses and plain objects become field mappings, enum members
    their value. Unknown types are left for json.dumps to reject.
    """
    match obj:
        case bool() | int() | str() | None:
            return obj
        case float():
            return obj if math.isfinite(obj) else None
        case Enum():
            return _to_json_value(obj.value)
        case dict():
            return {key: _to_json_value(value) for key, value in obj.items()}
        case list() | tuple():
            return [_to_json_value(item) for item in obj]

    if isinstance(obj, type) or callable(obj):
        raise TypeError(f"{type(obj).__name__} {obj!r} is not JSON serializable")
    if dataclasses.is_dataclass(obj):
        return {f.name: _to_json_value(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__"):
        return {key: _to_json_value(value) for key, value in vars(obj).items()}
    return obj


def get_json(obj: object) -> str:
    """Return JSON representation of obj.

    Example:
        get_json([1, 2, 3])                 # '[1,2,3]'
        get_json(Rectangle(10, 20))         # '{"width":10,"height":20}'

    Args:
        obj: JSON-compatible value, dataclass instance or plain object

    Returns:
        Compact JSON string

    Raises:
        SerializationError: If obj (or a nested value) cannot be serialized
    """
    try:
        return json.dumps(
            _to_json_value(obj), separators=_SEPARATORS, ensure_ascii=False, allow_nan=False
        )
    except (TypeError, ValueError) as e:
        logger.debug("Failed to serialize %s: %s", type(obj).__name__, e)
        raise SerializationError(str(e)) from e


def from_json(cls: type[T], text: str) -> T:
    """Create instance of cls from JSON representation.

    Object values are passed to the constructor positionally in
    document order, array items likewise. A scalar is passed as the
    only argument.

    Example:
        from_json(Rectangle, '{"width":10,"height":20}')  # Rectangle(10, 20)

    Args:
        cls: Class to instantiate
        text: JSON document

    Returns:
        New instance of cls

    Raises:
        TypeError: If cls is not a class or text is not str
        SerializationError: If text is not valid JSON or does not fit cls
    """
    if not isinstance(cls, type):
        raise TypeError(f"cls must be a class, got {type(cls).__name__}")
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Invalid JSON for %s: %s", cls.__name__, e)
        raise SerializationError(f"invalid JSON: {e}") from e

    match data:
        case dict():
            args = tuple(data.values())
        case list():
            args = tuple(data)
        case _:
            args = (data,)

    try:
        return cls(*args)
    except (TypeError, ValueError) as e:
        logger.debug("Cannot build %s from %r: %s", cls.__name__, args, e)
        raise SerializationError(f"cannot create {cls.__name__}: {e}") from e
