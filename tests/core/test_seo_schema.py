"""Tests for schema.org JSON-LD builders."""

import json

from franchise_site.core.seo_schema import (
    breadcrumb_schema,
    franchise_schema,
    organization_schema,
    to_json_ld,
    webpage_schema,
)


def test_organization_schema_trims_base_url() -> None:
    schema = organization_schema("https://example.com/", "FFO", "Franchise brokers", same_as=["https://x.com/ffo"])

    assert schema["url"] == "https://example.com"
    assert schema["logo"] == "https://example.com/logo.png"
    assert schema["sameAs"] == ["https://x.com/ffo"]
    assert schema["@type"] == "Organization"


def test_franchise_schema_image_is_optional() -> None:
    without = franchise_schema("https://example.com", "abc", "Acme")
    with_image = franchise_schema("https://example.com", "abc", "Acme", "https://cdn/x.png")

    assert without["url"] == "https://example.com/franchises/abc"
    assert "image" not in without
    assert with_image["image"] == "https://cdn/x.png"


def test_breadcrumb_positions_start_at_one() -> None:
    schema = breadcrumb_schema([("Home", "https://e.com/"), ("Franchises", "https://e.com/franchises")])

    assert [item["position"] for item in schema["itemListElement"]] == [1, 2]
    assert schema["itemListElement"][1]["name"] == "Franchises"


def test_webpage_schema_dates() -> None:
    schema = webpage_schema("About", "About us", "https://e.com/about", date_modified="2026-01-02")

    assert schema["dateModified"] == "2026-01-02"
    assert "datePublished" not in schema


def test_to_json_ld_escapes_script_close() -> None:
    payload = to_json_ld({"name": "</script><b>"})

    assert "</script>" not in payload
    assert json.loads(payload) == {"name": "</script><b>"}
