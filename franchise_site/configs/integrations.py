"""
Third-party integration settings.

Transactional email (Resend), CAPTCHA (Cloudflare Turnstile) and outbound
webhook settings.

Dependencies: pydantic_settings
System role: Integration configuration for lead delivery
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from franchise_site.configs.base import BaseSettings


class EmailSettings(BaseSettings):
    """Resend transactional email configuration."""

    model_config = SettingsConfigDict(env_prefix="RESEND_")

    api_key: str | None = Field(default=None, description="Resend API key")
    api_url: str = Field(
        default="https://api.resend.com/emails",
        description="Resend send-email endpoint",
    )
    from_email: str = Field(
        default="onboarding@resend.dev",
        description="Sender address for all outgoing mail",
    )
    main_contact_email: str = Field(
        default="info@futurefranchiseowners.com",
        description="Inbox that receives every lead and contact submission",
    )
    timeout_seconds: float = Field(default=20.0, description="HTTP timeout for sends")


class CaptchaSettings(BaseSettings):
    """Cloudflare Turnstile configuration."""

    model_config = SettingsConfigDict(env_prefix="TURNSTILE_")

    site_key: str | None = Field(default=None, description="Public widget site key")
    secret_key: str | None = Field(
        default=None,
        description="Server-side secret; verification is skipped when unset",
    )
    verify_url: str = Field(
        default="https://challenges.cloudflare.com/turnstile/v0/siteverify",
        description="Turnstile siteverify endpoint",
    )

    @property
    def enabled(self) -> bool:
        """Verification runs only with a configured secret."""
        return bool(self.secret_key)


class WebhookSettings(BaseSettings):
    """Outbound agent webhook configuration."""

    model_config = SettingsConfigDict(env_prefix="WEBHOOK_")

    timeout_seconds: float = Field(default=10.0, description="HTTP timeout for webhook posts")
    enabled: bool = Field(default=True, description="Deliver leads to agent webhooks")
