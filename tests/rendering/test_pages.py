"""
Tests for public page rendering.

System role: Verification of layout parsing, site chrome and HTML output
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from franchise_site.configs.site import SiteSettings
from franchise_site.models.blocks import HeroBlock, RibbonBlock
from franchise_site.models.catalog import CatalogPage, FilterState, FranchiseCard
from franchise_site.models.site_settings import NavbarSettings, SiteSettingsData, TickerSettings
from franchise_site.rendering.pages import PageRenderer, SiteChrome, parse_layout


@pytest.fixture
def renderer() -> PageRenderer:
    return PageRenderer(SiteSettings(base_url="https://example.com"))


@pytest.fixture
def chrome() -> SiteChrome:
    return SiteChrome(settings=SiteSettingsData(), current_slug="about")


def make_page(**overrides) -> SimpleNamespace:
    now = datetime(2025, 1, 2, tzinfo=timezone.utc)
    fields = {
        "title": "About Us",
        "slug": "about",
        "description": "Who we are",
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestParseLayout:
    def test_skips_unknown_and_invalid_blocks(self) -> None:
        raw = [
            {"blockType": "hero", "heading": "Welcome"},
            {"blockType": "carousel", "slides": []},
            {"blockType": "ribbon"},
            "not a block",
            {"blockType": "ribbon", "text": "Sale"},
        ]

        blocks = parse_layout(raw)

        assert [type(b) for b in blocks] == [HeroBlock, RibbonBlock]

    def test_unpublished_blocks_only_in_draft(self) -> None:
        raw = [
            {"blockType": "hero", "heading": "Live"},
            {"blockType": "hero", "heading": "Hidden", "published": False},
        ]

        assert [b.heading for b in parse_layout(raw)] == ["Live"]
        assert [b.heading for b in parse_layout(raw, draft=True)] == ["Live", "Hidden"]

    def test_empty_layout(self) -> None:
        assert parse_layout(None) == []


class TestSiteChrome:
    @pytest.mark.parametrize(
        ("visibility", "pages", "expected"),
        [
            ("all", [], True),
            ("include", ["about"], True),
            ("include", ["contact"], False),
            ("exclude", ["about"], False),
        ],
    )
    def test_navbar_visibility(self, visibility, pages, expected) -> None:
        settings = SiteSettingsData(navbar=NavbarSettings(visibility=visibility, pages=pages))

        assert SiteChrome(settings=settings, current_slug="about").show_navbar is expected

    def test_unpublished_navbar_is_hidden(self) -> None:
        settings = SiteSettingsData(navbar=NavbarSettings(published=False))

        assert SiteChrome(settings=settings).show_navbar is False

    def test_ticker_needs_text(self) -> None:
        assert SiteChrome(SiteSettingsData(ticker=TickerSettings(enabled=True, text="  "))).show_ticker is False
        assert SiteChrome(SiteSettingsData(ticker=TickerSettings(enabled=True, text="Sale"))).show_ticker is True


class TestPageRenderer:
    def test_render_page_blocks_and_metadata(self, renderer, chrome) -> None:
        blocks = parse_layout(
            [
                {"blockType": "hero", "heading": "Own <your> future"},
                {"blockType": "ribbon", "text": "Limited offer", "link": {"url": "/offers"}},
            ]
        )

        html = renderer.render_page(make_page(), blocks, chrome)

        assert "<title>About Us</title>" in html
        assert '<link rel="canonical" href="https://example.com/about">' in html
        assert "Own &lt;your&gt; future" in html
        assert 'href="/offers"' in html
        assert '"@type": "WebPage"' in html
        assert 'content="noindex"' not in html
        assert "Preview mode" not in html
        assert "site-navbar" in html

    def test_homepage_uses_default_seo_title(self, renderer, chrome) -> None:
        html = renderer.render_page(make_page(slug="homepage", title="Home"), [], chrome)

        assert f"<title>{chrome.settings.seo.default_title}</title>" in html
        assert '<link rel="canonical" href="https://example.com/">' in html

    def test_draft_page_is_noindex_with_banner(self, renderer) -> None:
        chrome = SiteChrome(settings=SiteSettingsData(), current_slug="about", draft=True)

        html = renderer.render_page(make_page(), [], chrome)

        assert '<meta name="robots" content="noindex">' in html
        assert "Preview mode" in html

    def test_franchise_grid_renders_cards(self, renderer, chrome) -> None:
        blocks = parse_layout([{"blockType": "franchiseGrid", "heading": "Top picks"}])
        card = FranchiseCard(name="Iron Gym", category="Fitness", cash_required="$50,000")

        html = renderer.render_page(make_page(), blocks, chrome, grid_cards={0: [card]})

        assert "Top picks" in html
        assert "Iron Gym" in html
        assert "Cash required: $50,000" in html

    def test_catalog_counts(self, renderer, chrome) -> None:
        catalog = CatalogPage(
            items=[FranchiseCard(name="Iron Gym")],
            total=1,
            total_unfiltered=4,
            page=1,
            per_page=12,
            pages=1,
            has_more=False,
            categories=["all", "Fitness"],
        )

        html = renderer.render_catalog(catalog, FilterState(search="gym"), chrome)

        assert "Showing 1 of 4 franchises" in html
        assert "Iron Gym" in html

    def test_not_found_and_admin_pages(self, renderer, chrome) -> None:
        assert "Page not found" in renderer.render_not_found(chrome)

        login = renderer.render_admin_login(chrome, redirect="/import")
        assert '<meta name="robots" content="noindex">' in login
        assert "/import" in login
