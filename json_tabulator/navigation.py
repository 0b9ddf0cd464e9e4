from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Tuple

from .errors import IndexStepError, ShapeError, UnskippableTypeError
from .paths import join_step

logger = logging.getLogger(__name__)

INDEX_RE = re.compile(r'[0-9]+')


def navigate(root: Any, steps: Iterable[str]) -> Tuple[Any, str]:
    """Descend into `root` along skip steps.

    Returns the value found there and the dotted prefix of the consumed
    steps. A key missing from an object yields None rather than an error;
    a step that follows it then fails as unskippable.
    """
    value = root
    prefix = ''
    for step in steps:
        if isinstance(value, dict):
            value = value.get(step)
        elif isinstance(value, list):
            if not INDEX_RE.fullmatch(step):
                raise IndexStepError(step, value)
            index = int(step)
            if index >= len(value):
                raise IndexStepError(step, value)
            value = value[index]
        else:
            raise UnskippableTypeError(step, value)
        prefix = join_step(prefix, step)
    return value, prefix


def navigate_to_array(root: Any, steps: Iterable[str]) -> Tuple[List[Any], str]:
    """Like `navigate`, but the value found must be an array."""
    steps = list(steps)
    value, prefix = navigate(root, steps)
    if not isinstance(value, list):
        raise ShapeError(value, prefix)
    logger.debug("skip steps %s lead to an array of %d elements", steps, len(value))
    return value, prefix
