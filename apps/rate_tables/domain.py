"""
apps.rate_tables.domain
~~~~~~~~~~~~~~~~~~~~~~~
In-memory model for dynamically-shaped rate tables.

This module is **pure Python**: it has zero Django view, serializer, or ORM
imports and can be exercised in plain ``pytest`` tests without any Django
setup.

A table is an ordered list of :class:`Column` plus an ordered list of
:class:`Row`.  Rows are keyed by column key; the column list is always the
source of truth for which keys a row carries.

Public API
----------
Column, Row, RateTable, RateTableSet   – Dataclasses
TableDefinition, TABLE_DEFINITIONS     – Registry of the named tables
build_rate_table(column_pairs, row_maps) – Column-first rebuild
default_rate_table_set()               – Seed data for first activation
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

import structlog

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Table registry
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TableDefinition:
    """
    Static description of one named rate table.

    Attributes:
        name: Key of the table inside the persisted set
            (e.g. ``"certificate_rates"``).
        prefix: Form-field prefix used by the admin editor (e.g. ``"cert"``).
        selector: Value of the embed directive's ``type`` that selects this
            table on public pages (e.g. ``"certificates"``).
        title: Heading shown above the table.
        row_noun: Label of the admin "add row" button.
    """

    name: str
    prefix: str
    selector: str
    title: str
    row_noun: str


#: Registered tables in display order.  ``"all"`` renders them in this order.
TABLE_DEFINITIONS: tuple[TableDefinition, ...] = (
    TableDefinition(
        name="certificate_rates",
        prefix="cert",
        selector="certificates",
        title="Certificate Rates",
        row_noun="Certificate Rate",
    ),
    TableDefinition(
        name="savings_rates",
        prefix="savings",
        selector="savings",
        title="Savings Rates",
        row_noun="Savings Rate",
    ),
)

#: Selector value that picks every registered table.
SELECT_ALL = "all"


def select_definitions(selector: str) -> tuple[TableDefinition, ...]:
    """
    Return the table definitions picked by an embed *selector*.

    ``"all"`` yields every table; a table's own selector yields that table;
    any other value yields nothing.
    """
    if selector == SELECT_ALL:
        return TABLE_DEFINITIONS
    return tuple(d for d in TABLE_DEFINITIONS if d.selector == selector)


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Column:
    """One field of every row: ``key`` identifies it, ``label`` is displayed."""

    key: str
    label: str

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "label": self.label}


@dataclass
class Row:
    """
    One record, mapping column key to string value.

    ``values`` keeps insertion order.  Keys belonging to removed columns may
    be present after loading old data; they are ignored when rendering and
    dropped on the next rebuild.
    """

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        return self.values.get(key, "")

    def to_dict(self) -> dict[str, str]:
        return dict(self.values)


@dataclass
class RateTable:
    """Ordered columns plus ordered rows."""

    columns: list[Column] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)

    @property
    def column_keys(self) -> list[str]:
        return [column.key for column in self.columns]

    def project(self, row: Row) -> list[str]:
        """Return *row*'s values in column order, ``""`` for missing cells."""
        return [row.get(column.key) for column in self.columns]

    def to_dict(self) -> dict:
        return {
            "columns": [column.to_dict() for column in self.columns],
            "rows": [row.to_dict() for row in self.rows],
        }

    @classmethod
    def from_dict(cls, data: object) -> RateTable:
        """
        Build a table from its persisted shape, tolerating damaged input.

        Non-dict column or row entries are dropped, a missing ``label``
        becomes ``""`` and every cell value is coerced to :class:`str`.
        Column keys are not re-validated here; stored data is trusted to
        have gone through :func:`build_rate_table` when it was written.
        """
        if not isinstance(data, Mapping):
            return cls()

        columns = [
            Column(key=str(raw.get("key", "")), label=str(raw.get("label", "")))
            for raw in data.get("columns") or []
            if isinstance(raw, Mapping)
        ]
        rows = [
            Row(values={str(k): _as_text(v) for k, v in raw.items()})
            for raw in data.get("rows") or []
            if isinstance(raw, Mapping)
        ]
        return cls(columns=columns, rows=rows)


@dataclass
class RateTableSet:
    """
    Every registered table, keyed by table name.

    Tables missing from ``tables`` read as empty; use :meth:`table` rather
    than indexing ``tables`` directly.
    """

    tables: dict[str, RateTable] = field(default_factory=dict)

    def table(self, name: str) -> RateTable:
        return self.tables.get(name) or RateTable()

    def to_dict(self) -> dict:
        return {
            definition.name: self.table(definition.name).to_dict()
            for definition in TABLE_DEFINITIONS
        }

    @classmethod
    def empty(cls) -> RateTableSet:
        return cls(tables={d.name: RateTable() for d in TABLE_DEFINITIONS})

    @classmethod
    def from_dict(cls, data: object) -> RateTableSet:
        """Build a set from the persisted layout; unknown tables are ignored."""
        source = data if isinstance(data, Mapping) else {}
        return cls(
            tables={
                d.name: RateTable.from_dict(source.get(d.name))
                for d in TABLE_DEFINITIONS
            }
        )


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return str(value)


# ---------------------------------------------------------------------------
# Column-first rebuild
# ---------------------------------------------------------------------------

def build_rate_table(
    column_pairs: Iterable[tuple[str, str | None]],
    row_maps: Iterable[Mapping[str, str]],
) -> RateTable:
    """
    Rebuild a table from submitted columns and rows.

    **Algorithm**

    1. Walk *column_pairs* in order.  Skip a pair whose key is empty, whose
       label is ``None`` (absent), or whose key repeats an earlier kept key.
    2. Walk *row_maps* in order.  Each new row holds, for every column kept
       in step 1, the value under that column's key or ``""``.

    Keys present in a row map but not among the kept columns are dropped, so
    rows always line up with the columns submitted alongside them.

    Inputs are expected to be sanitised already; see
    :func:`apps.rate_tables.services.sanitize.sanitize_text_field`.

    Args:
        column_pairs: ``(key, label)`` tuples in submission order.
        row_maps: One mapping per row, column key to cell value.

    Returns:
        A new :class:`RateTable`.
    """
    columns: list[Column] = []
    seen: set[str] = set()
    for key, label in column_pairs:
        if not key or label is None:
            logger.debug("rate_table_column_skipped", key=key, reason="incomplete")
            continue
        if key in seen:
            logger.debug("rate_table_column_skipped", key=key, reason="duplicate_key")
            continue
        seen.add(key)
        columns.append(Column(key=key, label=label))

    rows = [
        Row(values={column.key: _as_text(row_map.get(column.key, "")) for column in columns})
        for row_map in row_maps
    ]
    return RateTable(columns=columns, rows=rows)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

def default_rate_table_set() -> RateTableSet:
    """Return the built-in tables written on first activation."""
    certificates = RateTable(
        columns=[
            Column("term", "Term"),
            Column("rate", "Rate (%)"),
            Column("min_deposit", "Minimum Deposit"),
        ],
        rows=[
            Row({"term": "6 Months", "rate": "4.50", "min_deposit": "1000"}),
            Row({"term": "12 Months", "rate": "5.00", "min_deposit": "1000"}),
            Row({"term": "24 Months", "rate": "5.25", "min_deposit": "1000"}),
            Row({"term": "36 Months", "rate": "5.50", "min_deposit": "1000"}),
        ],
    )
    savings = RateTable(
        columns=[
            Column("type", "Account Type"),
            Column("rate", "Rate (%)"),
            Column("min_balance", "Minimum Balance"),
        ],
        rows=[
            Row({"type": "Regular Savings", "rate": "2.00", "min_balance": "100"}),
            Row({"type": "Money Market", "rate": "3.50", "min_balance": "2500"}),
            Row({"type": "High-Yield Savings", "rate": "4.00", "min_balance": "10000"}),
        ],
    )
    return RateTableSet(
        tables={"certificate_rates": certificates, "savings_rates": savings}
    )
