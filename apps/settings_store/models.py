"""
apps.settings_store.models
~~~~~~~~~~~~~~~~~~~~~~~~~~
SettingsEntry – one JSON value stored under a unique string key.
"""
from django.db import models


class SettingsEntry(models.Model):
    """
    A single key-value settings record.

    The ``value`` is opaque to this app; callers own its shape.  Writes always
    replace the whole value, there is no partial update.
    """

    key = models.CharField(
        max_length=191,
        unique=True,
        help_text="Settings key, e.g. 'credit_union_rates'.",
    )
    value = models.JSONField(
        help_text="Stored value, serialised as JSON.",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["key"]
        verbose_name = "Settings Entry"
        verbose_name_plural = "Settings Entries"

    def __str__(self) -> str:
        return self.key
