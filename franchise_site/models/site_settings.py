"""
Site settings global schemas.

Each section maps to one JSON column of the site_settings singleton.
Defaults here are the values a fresh install starts with.

Dependencies: pydantic
System role: Site settings API contracts and persisted shape
"""

from typing import Literal
import uuid

from pydantic import BaseModel, Field

Visibility = Literal["all", "include", "exclude"]

SocialPlatform = Literal[
    "facebook",
    "twitter",
    "instagram",
    "linkedin",
    "youtube",
    "tiktok",
    "pinterest",
    "reddit",
    "discord",
    "slack",
    "github",
    "gitlab",
    "twitch",
    "whatsapp",
    "telegram",
    "mail",
    "globe",
]


class NavLink(BaseModel):
    label: str
    url: str
    open_in_new_tab: bool = False


class CtaButton(BaseModel):
    enabled: bool = True
    label: str = "Get Started"
    url: str = "/contact"


class NavbarSettings(BaseModel):
    """Site-wide navbar."""

    published: bool = True
    visibility: Visibility = "all"
    pages: list[str] = Field(default_factory=list, description="Page slugs for include/exclude")
    logo_id: uuid.UUID | None = None
    logo_text: str = "Future Franchise Owners"
    links: list[NavLink] = Field(default_factory=list)
    cta_button: CtaButton = Field(default_factory=CtaButton)


class SocialLink(BaseModel):
    platform: SocialPlatform
    url: str


class FooterColumn(BaseModel):
    heading: str
    links: list[NavLink] = Field(default_factory=list)


class BottomLink(BaseModel):
    label: str
    url: str


class FooterSettings(BaseModel):
    """Site-wide footer."""

    published: bool = True
    visibility: Visibility = "all"
    pages: list[str] = Field(default_factory=list)
    company_name: str = "Future Franchise Owners"
    tagline: str = "Your partner in franchise success"
    copyright_text: str | None = None
    show_social_links: bool = True
    social_links: list[SocialLink] = Field(default_factory=list)
    columns: list[FooterColumn] = Field(default_factory=list)
    bottom_links: list[BottomLink] = Field(default_factory=list)
    background_color: str = "#0F172A"
    text_color: str = "#F1F5F9"
    background_image_id: uuid.UUID | None = None
    background_blur: int = Field(0, ge=0, le=50)
    overlay_color: str = "#000000"
    overlay_opacity: float = Field(0.6, ge=0, le=1)


class TickerLink(BaseModel):
    url: str | None = None
    open_in_new_tab: bool = False


class TickerSettings(BaseModel):
    """Announcement bar above the navbar."""

    enabled: bool = False
    text: str = "Special Offer: Contact us today!"
    background_color: str = "#2563eb"
    text_color: str = "#ffffff"
    font_size: int = Field(14, ge=8, le=48)
    font_weight: Literal["300", "400", "500", "600", "700", "800"] = "400"
    is_moving: bool = True
    speed: int = Field(30, ge=1, le=300, description="Seconds per scroll cycle")
    text_align: Literal["left", "center", "right"] = "center"
    link: TickerLink = Field(default_factory=TickerLink)
    dismissible: bool = True


class GeneralSettings(BaseModel):
    """Site identity and feature toggles."""

    enable_cart: bool = True
    show_wishlist_button: bool = True
    show_cart_button: bool = True
    site_name: str = "Future Franchise Owners"
    site_description: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None


class SeoSettings(BaseModel):
    """Default metadata for pages without their own."""

    default_title: str = "Future Franchise Owners - Find Your Perfect Franchise"
    default_description: str = Field(
        "Discover your next franchise opportunity with expert guidance. Browse top "
        "franchises across industries and connect with seasoned consultants.",
        max_length=160,
    )
    keywords: str = (
        "franchise opportunities, buy a franchise, franchise business, franchise "
        "consultant, franchise investment, best franchises"
    )
    og_image_id: uuid.UUID | None = None
    twitter_handle: str | None = None
    facebook_app_id: str | None = None
    google_site_verification: str | None = None
    bing_site_verification: str | None = None


class SiteSettingsData(BaseModel):
    """Complete site settings document."""

    navbar: NavbarSettings = Field(default_factory=NavbarSettings)
    footer: FooterSettings = Field(default_factory=FooterSettings)
    ticker: TickerSettings = Field(default_factory=TickerSettings)
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    seo: SeoSettings = Field(default_factory=SeoSettings)


class UpdateSiteSettingsRequest(BaseModel):
    """Partial update: only the sections provided are replaced."""

    navbar: NavbarSettings | None = None
    footer: FooterSettings | None = None
    ticker: TickerSettings | None = None
    general: GeneralSettings | None = None
    seo: SeoSettings | None = None
