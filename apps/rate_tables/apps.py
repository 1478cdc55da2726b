"""
apps.rate_tables.apps
"""
from django.apps import AppConfig, apps
from django.db.models.signals import post_migrate


class RateTablesConfig(AppConfig):
    name = "apps.rate_tables"
    label = "rate_tables"
    verbose_name = "Rate Tables"

    def ready(self) -> None:
        from .signals import seed_default_rates  # noqa: PLC0415

        # This app has no models of its own, so it never receives
        # post_migrate; hook the store app it persists through instead.
        post_migrate.connect(
            seed_default_rates,
            sender=apps.get_app_config("settings_store"),
            dispatch_uid="rate_tables.seed_default_rates",
        )
