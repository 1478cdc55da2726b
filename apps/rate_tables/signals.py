"""
apps.rate_tables.signals
~~~~~~~~~~~~~~~~~~~~~~~~
Seeds the default rate tables the first time migrations run.
"""
import structlog

from apps.rate_tables.services import get_store, initialize_default_rates

logger = structlog.get_logger(__name__)


def seed_default_rates(sender, **kwargs) -> None:
    """
    ``post_migrate`` receiver.  Safe to run on every migrate: an existing
    entry, including one edited by an administrator, is left alone.
    """
    if kwargs.get("using", "default") != "default":
        return
    seeded = initialize_default_rates(get_store())
    logger.debug("rate_tables_seed_checked", seeded=seeded)
