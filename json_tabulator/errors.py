"""Error types raised while turning JSON documents into a table.

Everything the converter raises on purpose derives from `TabulateError`, so
callers can report a failed run with a single `except`. I/O failures are left
as the built-in `OSError`.
"""
from __future__ import annotations

from typing import Any, Optional


def json_type_name(value: Any) -> str:
    """Name a parsed JSON value the way JSON itself does."""
    if value is None:
        return 'null'
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


class TabulateError(Exception):
    pass


class UsageError(TabulateError, ValueError):
    """Bad command-line or UI settings, detected before any input is read."""


class ParseError(TabulateError, ValueError):
    def __init__(self, source: str, reason: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        self.source = source
        self.reason = reason
        self.lineno = lineno
        self.colno = colno
        where = f" (line {lineno}, column {colno})" if lineno is not None else ""
        super().__init__(f"{source}: invalid JSON{where}: {reason}")


class NavigationError(TabulateError, LookupError):
    """A skip step could not be applied to the document."""

    def __init__(self, message: str, step: Optional[str] = None, value: Any = None):
        self.step = step
        self.type_name = json_type_name(value)
        super().__init__(message)


class IndexStepError(NavigationError, TypeError):
    """A skip step applied to an array is not a valid index for it."""

    def __init__(self, step: str, value: list):
        if step.isascii() and step.isdigit():
            reason = f"index {step} out of range for array of length {len(value)}"
        else:
            reason = f"step {step!r} is not an array index"
        super().__init__(f"cannot skip into array: {reason}", step, value)


class UnskippableTypeError(NavigationError, TypeError):
    def __init__(self, step: str, value: Any):
        super().__init__(
            f"type {json_type_name(value)} isn't skippable by {step!r}",
            step,
            value,
        )


class ShapeError(NavigationError, TypeError):
    """The value the skip steps lead to is not an array."""

    def __init__(self, value: Any, prefix: str = ''):
        self.prefix = prefix
        location = f"value at {prefix!r}" if prefix else "top-level value"
        super().__init__(
            f"{location} is of type {json_type_name(value)}, expected array",
            None,
            value,
        )


class FlattenError(TabulateError, TypeError):
    def __init__(self, path: str, value: Any, reason: Optional[str] = None):
        self.path = path
        self.value = value
        if reason is None:
            reason = f"{value!r} ({type(value).__name__})"
        super().__init__(f"cannot flatten leaf node at {path!r}: {reason}")


TypeMismatchError = ShapeError
UnflattenableTypeError = FlattenError
