from __future__ import annotations

from typing import List

ROOT_LABEL = '(root)'


def join_key(prefix: str, key: str) -> str:
    """Column path for object member `key` below `prefix`."""
    return f"{prefix}.{key}" if prefix else key


def join_index(prefix: str, index: int) -> str:
    """Column path for array element `index` below `prefix`."""
    return f"{prefix}[{index}]"


def join_step(prefix: str, step: str) -> str:
    # Skip prefixes are dotted for keys and indices alike.
    return f"{prefix}.{step}" if prefix else step


def escape_path_segment(segment: str) -> str:
    """Escape a single skip step for dot-path representation.

    - Dots are escaped as '\\.' so keys like 'gpt-3.5-turbo' remain one step.
    - Backslashes are escaped as '\\\\' to preserve round-tripping.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace('\\', '\\\\').replace('.', '\\.')


def unescape_path_segment(segment: str) -> str:
    if segment is None:
        return ''
    out: List[str] = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == '\\' and i + 1 < len(segment):
            out.append(segment[i + 1])
            i += 2
        else:
            out.append(ch)
            i += 1
    return ''.join(out)


def split_skip_path(path: str) -> List[str]:
    """Split a dotted skip path on unescaped '.' into skip steps.

    `None`, the empty string and '(root)' mean "no steps". Empty segments
    (as in 'a..b') are dropped.
    """
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)
    path = path.strip()
    if path in ('', ROOT_LABEL):
        return []

    parts: List[str] = []
    buf: List[str] = []
    escaping = False

    for ch in path:
        if escaping:
            # Keep the escape pair so unescape_path_segment can process it.
            buf.append('\\')
            buf.append(ch)
            escaping = False
            continue

        if ch == '\\':
            escaping = True
            continue
        if ch == '.':
            parts.append(unescape_path_segment(''.join(buf)))
            buf = []
            continue
        buf.append(ch)

    if escaping:
        # Trailing backslash; treat as literal.
        buf.append('\\')

    parts.append(unescape_path_segment(''.join(buf)))
    return [p for p in parts if p != '']
