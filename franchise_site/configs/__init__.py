"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
Each concern (database, storage, email, captcha, auth, site) has its own
settings class with an environment variable prefix.
"""

from franchise_site.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
