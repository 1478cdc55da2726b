"""
apps.rate_tables.services.form_parser
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Turns a submitted rate tables editor form into a :class:`RateTableSet`.

Field layout for a table whose prefix is ``cert``::

    cert_column_key[]          one per column, in display order
    cert_column_label[]        parallel to cert_column_key[]
    cert_rows[<i>][<key>]      one per cell; <i> groups cells into rows
    cert_rows[<i>][]           hidden marker, so a row with no cells survives

The payload is read from a :class:`~django.http.QueryDict` (or anything with
``getlist`` and ordered ``keys``), so submission order is preserved.
"""
from __future__ import annotations

import re
from collections.abc import Iterator

import structlog

from apps.rate_tables.domain import (
    TABLE_DEFINITIONS,
    RateTable,
    RateTableSet,
    TableDefinition,
    build_rate_table,
)
from .sanitize import sanitize_text_field

logger = structlog.get_logger(__name__)


def column_key_field(prefix: str) -> str:
    return f"{prefix}_column_key[]"


def column_label_field(prefix: str) -> str:
    return f"{prefix}_column_label[]"


def cell_field(prefix: str, row_index: int | str, column_key: str) -> str:
    return f"{prefix}_rows[{row_index}][{column_key}]"


def row_marker_field(prefix: str, row_index: int | str) -> str:
    return cell_field(prefix, row_index, "")


def parse_rate_table_form(data) -> RateTableSet:
    """
    Build a complete :class:`RateTableSet` from submitted form *data*.

    Every registered table is rebuilt; a table with no submitted fields comes
    back empty.  The result is meant to replace the stored set wholesale.
    """
    return RateTableSet(
        tables={
            definition.name: parse_table(data, definition)
            for definition in TABLE_DEFINITIONS
        }
    )


def parse_table(data, definition: TableDefinition) -> RateTable:
    """
    Rebuild one table column-first.

    Column pairs are zipped by position; a key without a matching label is
    passed on with ``label=None`` so that :func:`build_rate_table` skips it.
    """
    keys = data.getlist(column_key_field(definition.prefix))
    labels = data.getlist(column_label_field(definition.prefix))

    column_pairs = [
        (
            sanitize_text_field(key),
            sanitize_text_field(labels[position]) if position < len(labels) else None,
        )
        for position, key in enumerate(keys)
    ]
    row_maps = [
        {sanitize_text_field(key): sanitize_text_field(value) for key, value in cells.items()}
        for cells in _iter_submitted_rows(data, definition.prefix)
    ]

    table = build_rate_table(column_pairs, row_maps)
    if len(table.columns) != len(column_pairs):
        logger.info(
            "rate_form_columns_skipped",
            table=definition.name,
            submitted=len(column_pairs),
            kept=len(table.columns),
        )
    return table


def _iter_submitted_rows(data, prefix: str) -> Iterator[dict[str, str]]:
    """
    Yield one ``{column_key: raw_value}`` dict per submitted row.

    Rows come out in order of first appearance of their index.  Indices are
    only used for grouping, so gaps left by rows removed in the browser are
    harmless.  The key runs to the final ``]`` so it may itself contain
    brackets; the marker's empty key is dropped by the rebuild.
    """
    pattern = re.compile(
        rf"^{re.escape(prefix)}_rows\[(?P<index>[^\]]*)\]\[(?P<key>.*)\]$"
    )
    rows: dict[str, dict[str, str]] = {}
    for field_name in data.keys():
        match = pattern.match(field_name)
        if match is None:
            continue
        cells = rows.setdefault(match["index"], {})
        cells[match["key"]] = data.get(field_name, "")
    yield from rows.values()
