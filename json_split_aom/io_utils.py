from __future__ import annotations

import json
import math
import os

from .errors import JsonParseError, SplitIOError
from .serialization import to_json


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text):
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_json_text(content, source='<input>'):
    """Parse JSON text strictly.

    NaN, Infinity, out-of-range numbers, lone surrogate escapes and nesting
    past the interpreter recursion limit are all refused.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode('utf-8')
        except UnicodeDecodeError as e:
            raise JsonParseError(source, e) from e
    try:
        data = json.loads(content, parse_constant=_reject_constant, parse_float=_finite_float)
        # lone surrogate escapes such as "\ud800" decode but cannot be written as UTF-8
        to_json(data).encode('utf-8')
    except RecursionError as e:
        raise JsonParseError(source, 'nesting too deep') from e
    except ValueError as e:
        raise JsonParseError(source, e) from e
    return data


def read_json_file(path):
    """Read and parse one input file."""
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except OSError as e:
        raise SplitIOError(path, e.strerror or e) from e
    return parse_json_text(content, path)


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        return parse_json_text(file_obj.read(), getattr(file_obj, 'name', '<upload>'))

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    return read_json_file(path)


def write_text(path, text: str):
    """Write UTF-8 text. Nothing is created or truncated if the text cannot be encoded."""
    try:
        data = text.encode('utf-8')
        with open(path, 'wb') as f:
            f.write(data)
    except UnicodeEncodeError as e:
        raise SplitIOError(path, e.reason) from e
    except OSError as e:
        raise SplitIOError(path, e.strerror or e) from e


def ensure_dir(path):
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise SplitIOError(path, e.strerror or e) from e
