"""
apps.settings_store.admin
"""
from django.contrib import admin

from .models import SettingsEntry


@admin.register(SettingsEntry)
class SettingsEntryAdmin(admin.ModelAdmin):
    list_display = ["key", "updated_at"]
    search_fields = ["key"]
    readonly_fields = ["id", "created_at", "updated_at"]
    ordering = ["key"]
