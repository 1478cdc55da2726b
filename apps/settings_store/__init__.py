"""
apps.settings_store – generic key-value settings persistence.
"""
