"""
SEO service.

Builds sitemap.xml from pages and published franchises, and robots.txt.

Dependencies: franchise_site.boundary.db.CRUD
System role: Search engine discovery documents
"""

import logging
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.page_service import HOMEPAGE_SLUG
from franchise_site.boundary.db.CRUD.franchise_crud import franchise_crud
from franchise_site.boundary.db.CRUD.page_crud import page_crud
from franchise_site.boundary.db.models.franchise_model import FranchiseStatus

logger = logging.getLogger(__name__)

SITEMAP_CACHE_CONTROL = "public, max-age=3600, s-maxage=3600"

ROBOTS_DISALLOW = ("/admin/", "/api/", "/import/")


def _url_entry(loc: str, lastmod: datetime | None, changefreq: str, priority: str) -> str:
    lastmod = lastmod or datetime.now(timezone.utc)
    return (
        "  <url>\n"
        f"    <loc>{escape(loc)}</loc>\n"
        f"    <lastmod>{lastmod.isoformat()}</lastmod>\n"
        f"    <changefreq>{changefreq}</changefreq>\n"
        f"    <priority>{priority}</priority>\n"
        "  </url>"
    )


def _urlset(entries: list[str]) -> str:
    body = "\n".join(entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{body}\n"
        "</urlset>\n"
    )


class SeoService:
    """Sitemap and robots.txt generation."""

    def __init__(self, db: AsyncSession, base_url: str) -> None:
        """
        Initialize SEO service.

        Args:
            db: Async SQLAlchemy session
            base_url: Canonical site URL
        """
        self.db = db
        self.base_url = base_url.rstrip("/")

    async def sitemap_xml(self) -> str:
        """
        Build the sitemap.

        The homepage maps to the base URL with priority 1.0, other pages are
        weekly at 0.8 and published franchises monthly at 0.6. A database
        failure yields a minimal sitemap holding only the base URL.

        Returns:
            str: Sitemap XML document
        """
        try:
            pages = await page_crud.list_by_title(self.db)
            franchises = await franchise_crud.list_franchises(
                self.db, status=FranchiseStatus.PUBLISHED
            )
        except SQLAlchemyError as e:
            logger.error("Failed to build sitemap", extra={"error": str(e)})
            return _urlset([_url_entry(self.base_url, None, "daily", "1.0")])

        entries = []
        has_homepage = False
        for page in pages:
            if page.slug == HOMEPAGE_SLUG:
                has_homepage = True
                entries.insert(0, _url_entry(self.base_url, page.updated_at, "daily", "1.0"))
            else:
                entries.append(
                    _url_entry(f"{self.base_url}/{page.slug}", page.updated_at, "weekly", "0.8")
                )
        if not has_homepage:
            entries.insert(0, _url_entry(self.base_url, None, "daily", "1.0"))

        entries.append(_url_entry(f"{self.base_url}/franchises", None, "daily", "0.9"))
        for franchise in franchises:
            entries.append(
                _url_entry(
                    f"{self.base_url}/franchises/{franchise.id}",
                    franchise.updated_at,
                    "monthly",
                    "0.6",
                )
            )
        return _urlset(entries)

    def robots_txt(self) -> str:
        lines = ["User-agent: *", "Allow: /"]
        lines += [f"Disallow: {path}" for path in ROBOTS_DISALLOW]
        lines += ["", f"Sitemap: {self.base_url}/sitemap.xml", ""]
        return "\n".join(lines)
