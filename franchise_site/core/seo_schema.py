"""
Schema.org structured data builders.

Produces JSON-LD dictionaries embedded in rendered pages so search engines
understand the organisation, franchise listings and page hierarchy.

Dependencies: None (pure domain layer)
System role: SEO structured data
"""

import json
from typing import Any, Iterable

SCHEMA_CONTEXT = "https://schema.org"


def organization_schema(
    base_url: str,
    name: str,
    description: str,
    logo_path: str = "/logo.png",
    same_as: Iterable[str] = (),
) -> dict[str, Any]:
    """Organization schema for the brokerage itself."""
    base_url = base_url.rstrip("/")
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": name,
        "url": base_url,
        "logo": f"{base_url}{logo_path}",
        "description": description,
        "contactPoint": {
            "@type": "ContactPoint",
            "contactType": "Customer Service",
            "availableLanguage": "English",
        },
        "sameAs": list(same_as),
    }


def franchise_schema(
    base_url: str,
    franchise_id: str,
    business_name: str,
    image_url: str | None = None,
) -> dict[str, Any]:
    """LocalBusiness schema for a single franchise detail page."""
    schema: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "LocalBusiness",
        "name": business_name,
        "url": f"{base_url.rstrip('/')}/franchises/{franchise_id}",
    }
    if image_url:
        schema["image"] = image_url
    return schema


def breadcrumb_schema(items: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """
    BreadcrumbList schema.

    Args:
        items: ``(name, url)`` pairs from the root down

    Returns:
        dict: Schema with list item positions starting at 1
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {"@type": "ListItem", "position": index, "name": name, "item": url}
            for index, (name, url) in enumerate(items, start=1)
        ],
    }


def webpage_schema(
    title: str,
    description: str,
    url: str,
    date_published: str | None = None,
    date_modified: str | None = None,
) -> dict[str, Any]:
    """WebPage schema; publication dates are included only when known."""
    schema: dict[str, Any] = {
        "@context": SCHEMA_CONTEXT,
        "@type": "WebPage",
        "name": title,
        "description": description,
        "url": url,
    }
    if date_published:
        schema["datePublished"] = date_published
    if date_modified:
        schema["dateModified"] = date_modified
    return schema


def to_json_ld(schema: dict[str, Any]) -> str:
    """Serialise a schema for a ``<script type="application/ld+json">`` tag."""
    # "</" would terminate the script element early
    return json.dumps(schema, ensure_ascii=False).replace("</", "<\\/")
