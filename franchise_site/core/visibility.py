"""
Navbar and footer page visibility rules.

Dependencies: None (pure domain layer)
System role: Decides whether site-wide chrome is shown on a page
"""

from typing import Any, Iterable


def _page_slug(entry: Any) -> str | None:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        return entry.get("slug")
    return getattr(entry, "slug", None)


def should_show_on_page(
    visibility: str | None,
    selected_pages: Iterable[Any] | None,
    current_slug: str | None,
) -> bool:
    """
    Check whether the navbar/footer is visible on the current page.

    Args:
        visibility: "all", "include" or "exclude" (None behaves like "all")
        selected_pages: Page slugs, or objects carrying a ``slug``
        current_slug: Slug of the page being rendered

    Returns:
        bool: True when the element should render
    """
    if not visibility or visibility == "all":
        return True

    if not current_slug:
        return True

    slugs = [slug for slug in (_page_slug(p) for p in (selected_pages or [])) if slug]
    if not slugs:
        # include with nothing selected hides everywhere
        return visibility != "include"

    if visibility == "include":
        return current_slug in slugs
    if visibility == "exclude":
        return current_slug not in slugs
    return True
