"""
Public site page rendering.

Turns stored page layouts into block models and renders the site shell,
CMS pages, the franchise catalog and franchise detail pages.

Dependencies: jinja2, pydantic, franchise_site.core.seo_schema
System role: Server-side HTML rendering for the public site
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlencode

from pydantic import ValidationError as PydanticValidationError

from franchise_site.configs.site import SiteSettings
from franchise_site.core.seo_schema import (
    breadcrumb_schema,
    franchise_schema,
    organization_schema,
    to_json_ld,
    webpage_schema,
)
from franchise_site.core.visibility import should_show_on_page
from franchise_site.models.blocks import Block, block_adapter
from franchise_site.models.catalog import CatalogPage, FilterState, FranchiseCard
from franchise_site.models.site_settings import SiteSettingsData
from franchise_site.rendering.environment import get_environment

logger = logging.getLogger(__name__)


def parse_layout(raw_layout: list[Any] | None, draft: bool = False) -> list[Block]:
    """
    Validate stored blocks for rendering.

    Blocks of unknown type or with invalid data are skipped, as are
    unpublished blocks outside draft mode.

    Args:
        raw_layout: Stored layout JSON
        draft: Preview mode (keeps unpublished blocks)

    Returns:
        list[Block]: Renderable blocks in layout order
    """
    blocks: list[Block] = []
    for index, raw in enumerate(raw_layout or []):
        try:
            block = block_adapter.validate_python(raw)
        except PydanticValidationError as e:
            block_type = raw.get("blockType") if isinstance(raw, dict) else None
            logger.warning(
                "Skipping invalid block",
                extra={"block_index": index, "block_type": block_type, "error_count": e.error_count()},
            )
            continue
        if block.published or draft:
            blocks.append(block)
    return blocks


@dataclass
class SiteChrome:
    """Everything the site shell needs around page content."""

    settings: SiteSettingsData
    current_slug: str | None = None
    media: dict[str, str] = field(default_factory=dict)
    draft: bool = False
    captcha_site_key: str | None = None

    @property
    def show_navbar(self) -> bool:
        navbar = self.settings.navbar
        return navbar.published and should_show_on_page(
            navbar.visibility, navbar.pages, self.current_slug
        )

    @property
    def show_footer(self) -> bool:
        footer = self.settings.footer
        return footer.published and should_show_on_page(
            footer.visibility, footer.pages, self.current_slug
        )

    @property
    def show_ticker(self) -> bool:
        return self.settings.ticker.enabled and bool(self.settings.ticker.text.strip())


class PageRenderer:
    """Renders public HTML pages."""

    def __init__(self, site: SiteSettings) -> None:
        self.site = site
        self.env = get_environment()

    def _organization(self, chrome: SiteChrome) -> dict[str, Any]:
        same_as = [link.url for link in chrome.settings.footer.social_links]
        return organization_schema(
            self.site.root_url,
            self.site.name,
            self.site.description,
            self.site.logo_path,
            same_as,
        )

    def _render(self, template: str, chrome: SiteChrome, json_ld: list[dict], **context: Any) -> str:
        return self.env.get_template(template).render(
            site=self.site,
            chrome=chrome,
            settings=chrome.settings,
            media=chrome.media,
            year=datetime.now(timezone.utc).year,
            json_ld=[to_json_ld(item) for item in json_ld],
            **context,
        )

    def render_page(
        self,
        page: Any,
        blocks: list[Block],
        chrome: SiteChrome,
        grid_cards: dict[int, list[FranchiseCard]] | None = None,
    ) -> str:
        """
        Render a CMS page.

        Args:
            page: Page record (title, slug, description, timestamps)
            blocks: Blocks from parse_layout
            chrome: Site shell state
            grid_cards: Cards for each franchise grid keyed by block index

        Returns:
            str: HTML document
        """
        path = "/" if page.slug == "homepage" else f"/{page.slug}"
        title = page.title if page.slug != "homepage" else chrome.settings.seo.default_title
        description = page.description or chrome.settings.seo.default_description
        json_ld = [
            webpage_schema(
                title,
                description,
                f"{self.site.root_url}{path}",
                date_published=page.created_at.isoformat() if page.created_at else None,
                date_modified=page.updated_at.isoformat() if page.updated_at else None,
            ),
            self._organization(chrome),
        ]
        return self._render(
            "site/page.html",
            chrome,
            json_ld,
            page=page,
            title=title,
            description=description,
            canonical=f"{self.site.root_url}{path}",
            blocks=blocks,
            grid_cards=grid_cards or {},
        )

    def render_catalog(
        self,
        catalog: CatalogPage,
        state: FilterState,
        chrome: SiteChrome,
    ) -> str:
        """Render the /franchises listing with its filter form and pagination."""
        query = {
            "search": state.search,
            "max_cash": state.max_cash or "",
            "sort_by": state.sort_by.value,
        }
        base_query = urlencode(
            [(k, v) for k, v in query.items() if v]
            + [("category", c) for c in state.categories if c != "all"]
            + [(flag, "true") for flag in ("featured", "sponsored", "top_pick")
               if getattr(state, f"only_{flag}")]
        )
        json_ld = [
            breadcrumb_schema(
                [("Home", self.site.root_url), ("Franchises", f"{self.site.root_url}/franchises")]
            ),
            self._organization(chrome),
        ]
        return self._render(
            "site/catalog.html",
            chrome,
            json_ld,
            title=f"Browse Franchises | {self.site.name}",
            description=chrome.settings.seo.default_description,
            canonical=f"{self.site.root_url}/franchises",
            catalog=catalog,
            state=state,
            base_query=base_query,
        )

    def render_franchise(self, franchise: Any, card: FranchiseCard, chrome: SiteChrome) -> str:
        """Render a published franchise detail page."""
        url = f"{self.site.root_url}/franchises/{franchise.id}"
        json_ld = [
            franchise_schema(self.site.root_url, str(franchise.id), card.name, card.logo_url),
            breadcrumb_schema(
                [
                    ("Home", self.site.root_url),
                    ("Franchises", f"{self.site.root_url}/franchises"),
                    (card.name, url),
                ]
            ),
        ]
        return self._render(
            "site/franchise.html",
            chrome,
            json_ld,
            title=f"{card.name} Franchise | {self.site.name}",
            description=card.description[:160],
            canonical=url,
            franchise=franchise,
            card=card,
        )

    def render_not_found(self, chrome: SiteChrome) -> str:
        return self._render(
            "site/not_found.html",
            chrome,
            [],
            title=f"Page Not Found | {self.site.name}",
            description=chrome.settings.seo.default_description,
            canonical=self.site.root_url,
        )

    def render_admin_login(self, chrome: SiteChrome, redirect: str) -> str:
        return self._render(
            "site/admin_login.html",
            chrome,
            [],
            title=f"Admin Login | {self.site.name}",
            description=chrome.settings.seo.default_description,
            canonical=f"{self.site.root_url}/admin/login",
            redirect=redirect,
            noindex=True,
        )

    def render_import(self, chrome: SiteChrome) -> str:
        return self._render(
            "site/import.html",
            chrome,
            [],
            title=f"Import Franchises | {self.site.name}",
            description=chrome.settings.seo.default_description,
            canonical=f"{self.site.root_url}/import",
            noindex=True,
        )
