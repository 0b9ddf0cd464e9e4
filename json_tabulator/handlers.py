from __future__ import annotations

import os
import tempfile
from typing import Any, List, Tuple

import gradio as gr

from .errors import TabulateError
from .io_utils import read_json_content, source_name
from .paths import ROOT_LABEL, split_skip_path
from .records import Record, collect_records
from .schema_utils import default_skip_path
from .tabular import column_set, table_rows, validate_separator, write_table

PREVIEW_LIMIT = 5
UI_SEPARATOR = ','
SEPARATOR_CHOICES = [',', ';', '|', '\\t']


def normalize_files(files) -> List[Any]:
    if files is None:
        return []
    if isinstance(files, (list, tuple)):
        return [f for f in files if f is not None]
    return [files]


def build_records(files, skip_path: str, keep_prefix: bool = True) -> Tuple[List[Record], List[str]]:
    files = normalize_files(files)
    if not files:
        raise ValueError("No file uploaded.")
    records = collect_records(files, split_skip_path(skip_path), keep_prefix)
    return records, column_set(records)


def handle_upload(files):
    files = normalize_files(files)
    if not files:
        return gr.update(choices=[ROOT_LABEL], value=ROOT_LABEL), "No file uploaded."

    try:
        data = read_json_content(files[0])
    except (TabulateError, OSError) as e:
        return gr.update(choices=[ROOT_LABEL], value=ROOT_LABEL), f"Error reading JSON: {str(e)}"

    paths, default = default_skip_path(data)
    message = f"Loaded {len(files)} file(s). Found {len(paths)} array location(s) in {os.path.basename(source_name(files[0]))}."
    return gr.update(choices=paths, value=default), message


def preview_handler(files, skip_path, keep_prefix=True):
    """Header and first rows of the table, plus a record count and status."""
    try:
        records, columns = build_records(files, skip_path or ROOT_LABEL, keep_prefix)
    except (TabulateError, OSError, ValueError) as e:
        return gr.update(value=None), "", f"Error: {str(e)}"

    if not columns:
        return gr.update(value=None), f"Records: {len(records)}", "No columns found."

    rows = table_rows(records[:PREVIEW_LIMIT], columns)
    header = next(rows)
    return (
        gr.update(value=list(rows), headers=header),
        f"Records: {len(records)} | Columns: {len(columns)}",
        f"Previewing first {min(len(records), PREVIEW_LIMIT)} row(s).",
    )


def parse_ui_separator(separator) -> str:
    """Map the escaped '\\t' the dropdown shows to a real tab."""
    if separator is None or separator == '':
        return UI_SEPARATOR
    if separator == '\\t':
        return '\t'
    return separator


def export_handler(files, skip_path, keep_prefix=True, separator=UI_SEPARATOR, file_name=None):
    try:
        separator = validate_separator(parse_ui_separator(separator))
        records, _ = build_records(files, skip_path or ROOT_LABEL, keep_prefix)
    except (TabulateError, OSError, ValueError) as e:
        return None, f"Error: {str(e)}"

    if not file_name or not file_name.strip():
        file_name = "output"
    file_name = file_name.strip()
    if not os.path.splitext(file_name)[1]:
        file_name += ".tsv" if separator == '\t' else ".csv"

    path = os.path.join(tempfile.gettempdir(), file_name)

    try:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            columns = write_table(records, f, separator)
    except OSError as e:
        return None, f"Error during export: {str(e)}"

    return path, f"Export successful! {len(records)} rows, {len(columns)} columns saved to {path}"
