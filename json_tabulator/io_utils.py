from __future__ import annotations

import json
import math
import sys
from contextlib import contextmanager
from typing import Any, BinaryIO, Iterator, Union

from .errors import ParseError

STDIN_NAME = '-'


def source_name(source) -> str:
    if source is None or source == STDIN_NAME:
        return '<stdin>'
    if isinstance(source, str):
        return source
    return str(getattr(source, 'name', None) or repr(source))


@contextmanager
def open_source(source) -> Iterator[BinaryIO]:
    """Open an input source for reading.

    `source` is a path, '-' / None for standard input, an open file object,
    or an uploaded file exposing `.name`. Files opened here are closed on
    exit; standard input and caller-owned file objects are left open.
    """
    if source is None or source == STDIN_NAME:
        yield sys.stdin.buffer
        return

    if hasattr(source, 'read'):
        if hasattr(source, 'seek') and getattr(source, 'seekable', lambda: True)():
            source.seek(0)
        yield source
        return

    path = source.name if hasattr(source, 'name') else source
    with open(path, 'rb') as f:
        yield f


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _parse_number(text: str) -> float:
    # JSON numbers are doubles; literals like 1e400 do not fit one.
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} out of range")
    return value


def parse_json(content: Union[bytes, str], source: str = '<input>') -> Any:
    """Parse one complete JSON document, raising ParseError on bad input."""
    try:
        return json.loads(
            content,
            parse_constant=_reject_constant,
            parse_float=_parse_number,
            parse_int=_parse_number,
        )
    except json.JSONDecodeError as exc:
        raise ParseError(source, exc.msg, exc.lineno, exc.colno) from exc
    except (ValueError, UnicodeDecodeError) as exc:
        raise ParseError(source, str(exc)) from exc
    except RecursionError as exc:
        raise ParseError(source, "document nested too deeply") from exc


def read_json_content(source) -> Any:
    """Read a whole source and parse it as JSON.

    The source is closed before parsing starts.
    """
    with open_source(source) as f:
        content = f.read()
    return parse_json(content, source_name(source))
