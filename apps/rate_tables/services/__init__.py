"""
apps.rate_tables.services package.
"""
from .rate_service import (  # noqa: F401
    get_store,
    initialize_default_rates,
    load_rate_tables,
    normalize_rate_table_set,
    replace_rate_tables,
    submit_rate_form,
)
