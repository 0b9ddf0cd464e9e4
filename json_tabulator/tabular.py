"""Turn flattened records into a rectangular table.

Columns are the sorted union of all record keys, so records with different
shapes line up and the output does not depend on dict ordering.
"""
from __future__ import annotations

import csv
import logging
from typing import Dict, Iterable, Iterator, List, Sequence, TextIO

from .errors import UsageError

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = '\t'
INVALID_SEPARATORS = ('"', '\r', '\n', '\0')


def validate_separator(separator) -> str:
    """Return `separator` if it can delimit fields, else raise UsageError."""
    if not isinstance(separator, str) or len(separator) != 1:
        raise UsageError(f"invalid separator: {separator!r} (must be exactly one character)")
    if separator in INVALID_SEPARATORS:
        raise UsageError(f"invalid separator: {separator!r}")
    return separator


def column_set(records: Iterable[Dict[str, str]]) -> List[str]:
    columns = set()
    for record in records:
        columns.update(record)
    return sorted(columns)


def table_rows(records: Sequence[Dict[str, str]], columns: Sequence[str]) -> Iterator[List[str]]:
    """Yield the header, then one row per record ('' for missing keys)."""
    yield list(columns)
    for record in records:
        yield [record.get(column, '') for column in columns]


def tabularize(records: Sequence[Dict[str, str]], sink) -> List[str]:
    """Write the table through `sink.writerow` and return its columns."""
    columns = column_set(records)
    logger.debug("writing %d records in %d columns", len(records), len(columns))
    for row in table_rows(records, columns):
        sink.writerow(row)
    return columns


def write_table(records: Sequence[Dict[str, str]], stream: TextIO, separator: str = DEFAULT_SEPARATOR) -> List[str]:
    writer = csv.writer(stream, delimiter=validate_separator(separator), lineterminator='\n')
    columns = tabularize(records, writer)
    stream.flush()
    return columns
