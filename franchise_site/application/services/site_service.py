"""
Public site service.

Loads everything a public page needs (site settings, page layout, franchise
grid cards and media URLs) and hands it to the page renderer.

Dependencies: franchise_site.rendering, franchise_site.application.services
System role: Public page assembly
"""

import logging
from typing import Any, Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.franchise_service import FranchiseService, to_card
from franchise_site.application.services.media_service import resolve_media_url
from franchise_site.application.services.page_service import HOMEPAGE_SLUG, PageService
from franchise_site.application.services.site_settings_service import SiteSettingsService
from franchise_site.boundary.aws.s3_client import S3MediaClient
from franchise_site.boundary.db.CRUD.media_crud import media_crud
from franchise_site.models.blocks import Block, FranchiseGridBlock
from franchise_site.models.catalog import FilterState
from franchise_site.models.site_settings import SiteSettingsData
from franchise_site.rendering.pages import PageRenderer, SiteChrome, parse_layout

logger = logging.getLogger(__name__)


def _block_media_ids(block: Block) -> Iterable[UUID]:
    for attr in ("image_id", "background_image_id"):
        value = getattr(block, attr, None)
        if value is not None:
            yield value
    logo = getattr(block, "logo", None)
    if logo is not None and getattr(logo, "image_id", None) is not None:
        yield logo.image_id


def _settings_media_ids(settings: SiteSettingsData) -> Iterable[UUID]:
    for value in (
        settings.navbar.logo_id,
        settings.footer.background_image_id,
        settings.seo.og_image_id,
    ):
        if value is not None:
            yield value


class PublicSiteService:
    """Assembles and renders public pages."""

    def __init__(
        self,
        db: AsyncSession,
        renderer: PageRenderer,
        storage: S3MediaClient | None = None,
        captcha_site_key: str | None = None,
    ) -> None:
        """
        Initialize public site service.

        Args:
            db: Async SQLAlchemy session
            renderer: HTML page renderer
            storage: Media bucket client for image URLs
            captcha_site_key: Turnstile widget key rendered into forms
        """
        self.db = db
        self.renderer = renderer
        self.storage = storage
        self.captcha_site_key = captcha_site_key
        self.franchises = FranchiseService(db, storage=storage)

    async def _chrome(
        self,
        current_slug: str | None,
        draft: bool = False,
        extra_media_ids: Iterable[UUID] = (),
    ) -> SiteChrome:
        settings = await SiteSettingsService(self.db).get_settings()
        ids = list(dict.fromkeys([*_settings_media_ids(settings), *extra_media_ids]))
        media = await media_crud.get_by_ids(self.db, ids)
        urls = {str(m.id): resolve_media_url(m, self.storage) for m in media}
        return SiteChrome(
            settings=settings,
            current_slug=current_slug,
            media={key: url for key, url in urls.items() if url},
            draft=draft,
            captcha_site_key=self.captcha_site_key,
        )

    async def render_page(self, slug: str = HOMEPAGE_SLUG, draft: bool = False) -> str:
        """
        Render a CMS page by slug.

        Args:
            slug: Page slug ("homepage" for /)
            draft: Preview mode (unpublished blocks and franchises visible)

        Returns:
            str: HTML document

        Raises:
            NotFoundError: No page with this slug
        """
        page = await PageService(self.db).get_by_slug(slug)
        blocks = parse_layout(page.layout, draft=draft)

        grid_cards: dict[int, Any] = {}
        for index, block in enumerate(blocks):
            if isinstance(block, FranchiseGridBlock):
                grid_cards[index] = await self.franchises.grid_cards(block, draft=draft)

        media_ids = [media_id for block in blocks for media_id in _block_media_ids(block)]
        chrome = await self._chrome(slug, draft, media_ids)
        logger.debug(
            "Rendering page",
            extra={"page_slug": slug, "block_count": len(blocks), "draft": draft},
        )
        return self.renderer.render_page(page, blocks, chrome, grid_cards)

    async def render_catalog(self, state: FilterState, page: int = 1, per_page: int = 12) -> str:
        catalog = await self.franchises.catalog(state, page, per_page)
        chrome = await self._chrome("franchises")
        return self.renderer.render_catalog(catalog, state, chrome)

    async def render_franchise(self, franchise_id: UUID) -> str:
        """Render a published franchise; NotFoundError otherwise."""
        franchise = await self.franchises.get_published(franchise_id)
        card = to_card(franchise, self.storage)
        chrome = await self._chrome("franchises")
        return self.renderer.render_franchise(franchise, card, chrome)

    async def render_not_found(self) -> str:
        chrome = await self._chrome(None)
        return self.renderer.render_not_found(chrome)

    async def render_admin_login(self, redirect: str = "/import") -> str:
        return self.renderer.render_admin_login(await self._chrome(None), redirect)

    async def render_import(self) -> str:
        return self.renderer.render_import(await self._chrome(None))
