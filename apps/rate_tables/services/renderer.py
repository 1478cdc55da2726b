"""
apps.rate_tables.services.renderer
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
HTML for the admin editor and for public, read-only tables.

Both renderers depend only on the :class:`RateTableSet` they are given (plus
the request, for the CSRF token); neither reads the store.
"""
from __future__ import annotations

from dataclasses import dataclass

from django.template.loader import render_to_string

from apps.rate_tables.domain import (
    TABLE_DEFINITIONS,
    RateTableSet,
    TableDefinition,
    select_definitions,
)
from .form_parser import cell_field, column_key_field, column_label_field, row_marker_field


@dataclass(frozen=True)
class Notice:
    """Banner shown above the editor.  ``level`` is ``"success"`` or ``"error"``."""

    level: str
    message: str


def _editor_context(definition: TableDefinition, rate_set: RateTableSet) -> dict:
    table = rate_set.table(definition.name)
    return {
        "definition": definition,
        "columns": table.columns,
        "column_key_field": column_key_field(definition.prefix),
        "column_label_field": column_label_field(definition.prefix),
        "rows": [
            {
                "marker": row_marker_field(definition.prefix, index),
                "cells": [
                    {"name": cell_field(definition.prefix, index, key), "value": row.get(key)}
                    for key in table.column_keys
                ],
            }
            for index, row in enumerate(table.rows)
        ],
    }


def render_editable(rate_set: RateTableSet, *, request=None, notice: Notice | None = None) -> str:
    """
    Render the full editor page for every registered table.

    Row inputs are named ``<prefix>_rows[<position>][<column key>]`` so that
    submitting the page unchanged rebuilds the same set.
    """
    return render_to_string(
        "rate_tables/admin_page.html",
        {
            "notice": notice,
            "editors": [_editor_context(d, rate_set) for d in TABLE_DEFINITIONS],
        },
        request=request,
    )


def render_public(rate_set: RateTableSet, selector: str) -> str:
    """
    Render read-only tables picked by *selector*.

    Unknown selectors render nothing (empty string) rather than failing.
    """
    definitions = select_definitions(selector)
    if not definitions:
        return ""

    tables = []
    for definition in definitions:
        table = rate_set.table(definition.name)
        tables.append(
            {
                "title": definition.title,
                "selector": definition.selector,
                "labels": [column.label for column in table.columns],
                "rows": [table.project(row) for row in table.rows],
            }
        )
    return render_to_string("rate_tables/public_tables.html", {"tables": tables})
