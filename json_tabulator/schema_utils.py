from __future__ import annotations

from typing import Any, List, Tuple

from .paths import ROOT_LABEL, escape_path_segment


def find_array_paths(data: Any, parent_key: str = '', sep: str = '.') -> List[str]:
    """Find skip paths that lead to an array.

    Objects are searched recursively. Arrays are not descended into, so
    every path returned is a plain chain of object keys ('(root)' for a
    top-level array).
    """
    paths: List[str] = []
    if isinstance(data, dict):
        for k, v in data.items():
            escaped_k = escape_path_segment(k)
            current_key = f"{parent_key}{sep}{escaped_k}" if parent_key else escaped_k
            if isinstance(v, list):
                paths.append(current_key)
            elif isinstance(v, dict):
                paths.extend(find_array_paths(v, current_key, sep))
    elif isinstance(data, list):
        if not parent_key:
            paths.append(ROOT_LABEL)
    return sorted(paths)


def default_skip_path(data: Any) -> Tuple[List[str], str]:
    """Array paths of `data` and the one to preselect."""
    paths = find_array_paths(data)
    if not paths:
        return [ROOT_LABEL], ROOT_LABEL
    return paths, ROOT_LABEL if ROOT_LABEL in paths else paths[0]
