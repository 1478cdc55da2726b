"""
apps.rate_tables.services.rate_service
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
All business logic for the Rate Tables application.

Views, template tags and signal handlers call only these functions.  Every
function takes the :class:`~apps.settings_store.store.SettingsStore` it works
against, so tests can pass an in-memory double.

Responsibilities
----------------
- Loading the stored :class:`RateTableSet` (empty tables when absent).
- Seeding the default tables on first activation.
- Replacing the stored set from an editor submission or an API payload.
"""
from __future__ import annotations

import structlog
from django.conf import settings

from apps.rate_tables.domain import (
    RateTableSet,
    build_rate_table,
    default_rate_table_set,
)
from apps.settings_store.store import ModelSettingsStore, SettingsStore
from .form_parser import parse_rate_table_form
from .sanitize import sanitize_text_field

logger = structlog.get_logger(__name__)


def get_store() -> SettingsStore:
    """Return the store used in production code paths."""
    return ModelSettingsStore()


def settings_key() -> str:
    return settings.RATE_TABLES_SETTINGS_KEY


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------

def load_rate_tables(store: SettingsStore) -> RateTableSet:
    """
    Return the stored :class:`RateTableSet`.

    If nothing is stored yet (the initializer never ran), every registered
    table is returned empty instead of raising.
    """
    raw = store.read(settings_key())
    if raw is None:
        logger.warning("rate_tables_missing", key=settings_key())
        return RateTableSet.empty()
    return RateTableSet.from_dict(raw)


# ---------------------------------------------------------------------------
# Seeding
# ---------------------------------------------------------------------------

def initialize_default_rates(store: SettingsStore) -> bool:
    """
    Write the default tables unless an entry already exists.

    Returns:
        ``True`` if the defaults were written, ``False`` if the store already
        held rate tables (user edits are never overwritten).
    """
    key = settings_key()
    if store.exists(key):
        return False

    store.write(key, default_rate_table_set().to_dict())
    logger.info("rate_tables_seeded", key=key)
    return True


# ---------------------------------------------------------------------------
# Replacing
# ---------------------------------------------------------------------------

def replace_rate_tables(store: SettingsStore, rate_set: RateTableSet) -> RateTableSet:
    """
    Overwrite the stored set with *rate_set* in a single write.

    Raises:
        common.exceptions.StoreWriteError: If the store rejects the write;
            the previously stored set is then left as it was.
    """
    store.write(settings_key(), rate_set.to_dict())
    logger.info(
        "rate_tables_updated",
        key=settings_key(),
        tables={
            name: {"columns": table.column_keys, "rows": len(table.rows)}
            for name, table in rate_set.tables.items()
        },
    )
    return rate_set


def submit_rate_form(store: SettingsStore, data) -> RateTableSet:
    """
    Rebuild the whole set from editor form *data* and store it.

    Anti-forgery checking happens before this is reached (CSRF middleware);
    by the time it runs the request is trusted.
    """
    return replace_rate_tables(store, parse_rate_table_form(data))


def normalize_rate_table_set(payload: dict) -> RateTableSet:
    """
    Pass a structured payload (``{table: {columns, rows}}``) through the same
    sanitising and column-first rebuild the editor form uses.

    Args:
        payload: Validated API data; each table holds ``columns`` as a list
            of ``{"key", "label"}`` dicts and ``rows`` as a list of dicts.
    """
    source = RateTableSet.from_dict(payload)
    return RateTableSet(
        tables={
            name: build_rate_table(
                (
                    (sanitize_text_field(column.key), sanitize_text_field(column.label))
                    for column in table.columns
                ),
                (
                    {sanitize_text_field(k): sanitize_text_field(v) for k, v in row.values.items()}
                    for row in table.rows
                ),
            )
            for name, table in source.tables.items()
        }
    )
