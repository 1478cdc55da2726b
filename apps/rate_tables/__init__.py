"""
apps.rate_tables – editable certificate and savings rate tables.
"""
