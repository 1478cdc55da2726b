"""
apps.settings_store.store
~~~~~~~~~~~~~~~~~~~~~~~~~
Read/write access to key-value settings.

Callers depend on the :class:`SettingsStore` protocol rather than on the ORM
so that services can be exercised against an in-memory double.

Public API
----------
SettingsStore        – Protocol: ``read`` / ``write`` / ``exists``
ModelSettingsStore   – Database-backed implementation over :class:`SettingsEntry`
"""
from __future__ import annotations

from typing import Any, Protocol

import structlog
from django.db import DatabaseError, transaction

from common.exceptions import StoreWriteError
from .models import SettingsEntry

logger = structlog.get_logger(__name__)


class SettingsStore(Protocol):
    """Minimal key-value contract consumed by the rate tables services."""

    def read(self, key: str) -> Any | None:
        """Return the value stored under *key*, or ``None`` when absent."""

    def write(self, key: str, value: Any) -> None:
        """Replace the value under *key*.  Raises :class:`StoreWriteError`."""

    def exists(self, key: str) -> bool:
        """Return ``True`` if an entry is stored under *key*."""


class ModelSettingsStore:
    """
    :class:`SettingsStore` backed by the ``settings_store_settingsentry``
    table.

    Writes are a full overwrite of the entry (upsert), never a merge.  No row
    locking is performed: concurrent writers resolve as last-writer-wins.
    """

    def read(self, key: str) -> Any | None:
        entry = SettingsEntry.objects.filter(key=key).only("value").first()
        if entry is None:
            return None
        return entry.value

    def write(self, key: str, value: Any) -> None:
        try:
            with transaction.atomic():
                SettingsEntry.objects.update_or_create(
                    key=key,
                    defaults={"value": value},
                )
        except DatabaseError as exc:
            logger.error("settings_write_failed", key=key, error=str(exc))
            raise StoreWriteError(f"Could not save settings entry '{key}'.") from exc

        logger.debug("settings_written", key=key)

    def exists(self, key: str) -> bool:
        return SettingsEntry.objects.filter(key=key).exists()
