"""
Tests for slug, filename and display text helpers.

System role: Verification of string normalisation rules
"""

import pytest

from franchise_site.core.text_utils import (
    filename_from_url,
    format_currency,
    format_investment_range,
    html_to_text,
    humanize_field_name,
    sanitize_filename,
    to_slug,
)


class TestToSlug:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Food & Beverage", "food-beverage"),
            ("  Home Services  ", "home-services"),
            ("Health/Fitness--2024", "health-fitness-2024"),
            ("!!!", ""),
        ],
    )
    def test_to_slug(self, value: str, expected: str) -> None:
        assert to_slug(value) == expected


class TestSanitizeFilename:
    def test_keeps_extension_and_appends_timestamp(self) -> None:
        assert sanitize_filename("My Logo (Final).PNG", 1700000000000) == "my-logo-final-1700000000000.png"

    def test_empty_base_becomes_file(self) -> None:
        assert sanitize_filename("###.jpg", 5) == "file-5.jpg"

    def test_no_extension(self) -> None:
        assert sanitize_filename("README", 7) == "readme-7"

    def test_strips_accents(self) -> None:
        assert sanitize_filename("Café Menu.pdf", 1) == "cafe-menu-1.pdf"

    def test_timestamp_defaults_to_now(self) -> None:
        name = sanitize_filename("photo.jpg")
        stamp = name.removeprefix("photo-").removesuffix(".jpg")
        assert stamp.isdigit()


def test_filename_from_url_uses_last_segment() -> None:
    assert filename_from_url("https://cdn.example.com/a/b/Brand Logo.svg?x=1", 3) == "brand-logo-3.svg"


def test_filename_from_url_without_path() -> None:
    assert filename_from_url("https://cdn.example.com", 3) == "remote-asset-3"


@pytest.mark.parametrize(
    ("key", "label"),
    [("companyName", "Company Name"), ("city", "City"), ("preferredContactTime", "Preferred Contact Time"), ("", "")],
)
def test_humanize_field_name(key: str, label: str) -> None:
    assert humanize_field_name(key) == label


def test_html_to_text_strips_tags_and_entities() -> None:
    assert html_to_text("<p>Own a <strong>franchise</strong> &amp; grow</p>\n<p>today</p>") == (
        "Own a franchise & grow today"
    )
    assert html_to_text(None) == ""


def test_format_currency() -> None:
    assert format_currency(50000) == "$50,000"
    assert format_currency(1234.6) == "$1,235"
    assert format_currency(None) == ""


def test_format_investment_range() -> None:
    assert format_investment_range(50000, 90000) == "$50,000 - $90,000"
    assert format_investment_range(50000, None) == "$50,000"
    assert format_investment_range(None, 90000) == "$90,000"
    assert format_investment_range(None, None) == ""
