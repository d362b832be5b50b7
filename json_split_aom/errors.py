"""Errors raised while splitting. Every one of them ends the run."""
from __future__ import annotations


class SplitError(Exception):
    """Base class for all fatal splitting errors."""


class SplitIOError(SplitError):
    """An input file could not be read or an output file could not be written."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class JsonParseError(SplitError, ValueError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"{self.path}: invalid JSON: {reason}")


class InvalidKeyError(SplitError, LookupError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Invalid key: {key!r}")


class NotAnObjectError(SplitError, TypeError):
    def __init__(self, key: str, kind: str):
        self.key = key
        self.kind = kind
        super().__init__(f"Value is not an object (found {kind} while looking up {key!r})")


class NotAnArrayError(SplitError, TypeError):
    def __init__(self, path: str, kind: str):
        self.path = path
        self.kind = kind
        super().__init__(f"Value at {path!r} is not an array (found {kind})")


class IdNotStringError(SplitError, TypeError):
    def __init__(self, path: str, value):
        self.path = path
        self.value = value
        super().__init__(f"ID value at {path!r} is not a string: {value!r}")


class IdCollisionError(SplitError, ValueError):
    def __init__(self, element_id: str):
        self.element_id = element_id
        super().__init__(f"ID collision: {element_id!r}")
