"""
apps.settings_store.apps
"""
from django.apps import AppConfig


class SettingsStoreConfig(AppConfig):
    name = "apps.settings_store"
    label = "settings_store"
    verbose_name = "Settings Store"
