"""
Site and authentication settings.

Public site identity (base URL, organisation name) and admin authentication
(token signing, cookie names, internal admin allow-list, preview secret).

Dependencies: pydantic_settings
System role: Site identity and admin auth configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from franchise_site.configs.base import BaseSettings


class SiteSettings(BaseSettings):
    """Public site identity."""

    model_config = SettingsConfigDict(env_prefix="SITE_")

    base_url: str = Field(
        default="https://futurefranchiseowners.com",
        description="Canonical public URL (no trailing slash)",
    )
    name: str = Field(default="Future Franchise Owners", description="Organisation name")
    description: str = Field(
        default=(
            "Expert franchise consulting services helping entrepreneurs find and "
            "invest in the perfect franchise opportunity."
        ),
        description="Organisation description for structured data",
    )
    logo_path: str = Field(default="/logo.png", description="Logo path relative to base URL")
    support_email: str = Field(
        default="info@futurefranchiseowners.com",
        description="Address shown to visitors in confirmation emails",
    )
    support_phone: str = Field(default="(555) 123-4567", description="Phone shown to visitors")

    @property
    def root_url(self) -> str:
        return self.base_url.rstrip("/")


class AuthSettings(BaseSettings):
    """Admin authentication configuration."""

    model_config = SettingsConfigDict(env_prefix="AUTH_")

    secret_key: str = Field(
        default="change-me-in-production",
        description="HS256 signing secret for admin tokens and the preview link",
    )
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    token_ttl_minutes: int = Field(default=60 * 12, description="Admin token lifetime")
    cookie_name: str = Field(default="admin-token", description="Admin token cookie")
    cookie_secure: bool = Field(default=True, description="Mark auth cookies Secure")
    draft_cookie_name: str = Field(default="draft-mode", description="Preview mode cookie")
    internal_admin_emails: list[str] = Field(
        default_factory=list,
        description="Users allowed to manage other users",
    )
    internal_admin_domains: list[str] = Field(
        default_factory=list,
        description="Email domains whose users are internal admins",
    )
    login_path: str = Field(default="/admin/login", description="Redirect target for the gate")
    preview_secret: str | None = Field(
        default=None,
        description="Shared secret for /api/preview links; falls back to secret_key",
    )

    @property
    def effective_preview_secret(self) -> str:
        return self.preview_secret or self.secret_key
