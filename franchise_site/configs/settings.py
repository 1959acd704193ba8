"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from franchise_site.configs.base import BaseSettings
from franchise_site.configs.database import DatabaseSettings
from franchise_site.configs.integrations import CaptchaSettings, EmailSettings, WebhookSettings
from franchise_site.configs.site import AuthSettings, SiteSettings
from franchise_site.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    debug: bool = Field(default=False, description="Enable uvicorn auto-reload")
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    storage: StorageSettings = StorageSettings()
    email: EmailSettings = EmailSettings()
    captcha: CaptchaSettings = CaptchaSettings()
    webhooks: WebhookSettings = WebhookSettings()
    site: SiteSettings = SiteSettings()
    auth: AuthSettings = AuthSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from franchise_site.configs import get_settings
        settings = get_settings()
    """
    return Settings()
