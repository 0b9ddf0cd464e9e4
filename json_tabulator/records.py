from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Sequence

from .errors import FlattenError
from .flattening import flatten
from .io_utils import read_json_content, source_name
from .navigation import navigate_to_array

logger = logging.getLogger(__name__)

Record = Dict[str, str]


def records_from_document(document: Any, skip: Sequence[str] = (), keep_prefix: bool = True) -> List[Record]:
    """Flatten every element of the array the skip steps lead to.

    Column paths start from the skip prefix, so skipping into '_data' turns
    a member 'x' of each element into the column '_data.x'. With
    `keep_prefix=False` the column is just 'x'.
    """
    items, prefix = navigate_to_array(document, skip)
    if not keep_prefix:
        prefix = ''
    records: List[Record] = []
    for idx, item in enumerate(items):
        try:
            records.append(flatten(prefix, item))
        except RecursionError as exc:
            raise FlattenError(prefix, item, f"element {idx} is nested too deeply") from exc
    return records


def read_records(source, skip: Sequence[str] = (), keep_prefix: bool = True) -> List[Record]:
    document = read_json_content(source)
    records = records_from_document(document, skip, keep_prefix)
    logger.debug("read %d records from %s", len(records), source_name(source))
    return records


def collect_records(sources: Iterable[Any], skip: Sequence[str] = (), keep_prefix: bool = True) -> List[Record]:
    """Read all sources in order and concatenate their records.

    Each source is fully read and closed before the next one is opened.
    The first failing source aborts the whole collection.
    """
    skip = list(skip)
    records: List[Record] = []
    for source in sources:
        records.extend(read_records(source, skip, keep_prefix))
    return records
