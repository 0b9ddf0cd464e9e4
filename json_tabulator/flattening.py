from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

from .errors import FlattenError
from .paths import join_index, join_key


def format_number(number: Any) -> str:
    """Render a JSON number as the shortest positional decimal text.

    Numbers are doubles, integers included. `repr` gives the shortest text
    that parses back to the same float, which is re-expressed without
    exponent and without trailing zeros ('1.0' -> '1').
    """
    return format(Decimal(repr(float(number))).normalize(), 'f')


def render_scalar(value: Any) -> Optional[str]:
    """String form of a JSON scalar, or None when `value` is not a scalar."""
    # bool is an int subclass, test it first.
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return value
    if value is None:
        return 'null'
    return None


def flatten(prefix: str, value: Any, target: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """Expand `value` into {column path: rendered leaf} entries.

    Object members extend the path with '.key' (bare 'key' at the root),
    array elements with '[i]'. Entries are written into `target` when given;
    on a path collision the entry written last wins.
    """
    if target is None:
        target = {}

    if isinstance(value, dict):
        for key, inner in value.items():
            flatten(join_key(prefix, key), inner, target)
        return target

    if isinstance(value, list):
        for idx, inner in enumerate(value):
            flatten(join_index(prefix, idx), inner, target)
        return target

    try:
        rendered = render_scalar(value)
    except OverflowError as exc:
        raise FlattenError(prefix, value, "number out of range") from exc
    if rendered is None:
        raise FlattenError(prefix, value)
    target[prefix] = rendered
    return target
