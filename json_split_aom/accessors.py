from __future__ import annotations

from typing import Any, List

from .errors import IdNotStringError, InvalidKeyError, NotAnArrayError, NotAnObjectError
from .paths import split_path


def json_kind(value: Any) -> str:
    """Name the JSON type of a decoded value."""
    if value is None:
        return 'null'
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__


def descend(path: str, data: Any) -> Any:
    """Retrieve a value from nested objects using a dot-notation path.

    Each segment is an object key, applied left to right. The empty path
    returns `data` itself. Lists are not traversed.
    """
    val = data
    for key in split_path(path):
        if not isinstance(val, dict):
            raise NotAnObjectError(key, json_kind(val))
        if key not in val:
            raise InvalidKeyError(key)
        val = val[key]
    return val


def as_array(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise NotAnArrayError(path, json_kind(value))
    return value


def as_string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise IdNotStringError(path, value)
    return value
