"""
Text helpers shared by collections, forms and templates.

Slug generation, upload filename sanitising, form field labelling and
HTML-to-text conversion for rich text fields.

Dependencies: None (pure domain layer)
System role: String normalisation for persistence and presentation
"""

import html
import re
import time
import unicodedata
from urllib.parse import urlparse

_SLUG_INVALID = re.compile(r"[^a-z0-9]+")
_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def to_slug(value: str) -> str:
    """
    Build a URL-friendly slug.

    Lower-cases the value, collapses every run of non-alphanumerics into a
    single hyphen and strips leading/trailing hyphens.

    Args:
        value: Source text (usually a record name)

    Returns:
        str: Slug, possibly empty when the value has no alphanumerics

    Example:
        >>> to_slug("Food & Beverage")
        'food-beverage'
    """
    return _SLUG_INVALID.sub("-", value.lower()).strip("-")


def _ascii_fold(value: str) -> str:
    return unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")


def sanitize_filename(filename: str, timestamp_ms: int | None = None) -> str:
    """
    Make an uploaded filename safe and unique for object storage.

    The base name keeps only letters, digits, dot, underscore and hyphen
    (everything else becomes a hyphen, runs collapse, edges are trimmed,
    lower-cased, "file" when empty). The extension keeps only alphanumerics.
    A millisecond timestamp is appended to the base.

    Args:
        filename: Original filename from the client
        timestamp_ms: Override for the timestamp (tests)

    Returns:
        str: ``<safe-base>-<epoch-ms>.<ext>`` or ``<safe-base>-<epoch-ms>``
    """
    trimmed = filename.strip()
    base, dot, ext = trimmed.rpartition(".")
    if not dot:
        base, ext = trimmed, ""

    safe_base = _ascii_fold(base)
    safe_base = re.sub(r"\s+", "-", safe_base)
    safe_base = re.sub(r"[^a-zA-Z0-9._-]", "-", safe_base)
    safe_base = re.sub(r"-+", "-", safe_base).strip("-").lower() or "file"

    safe_ext = re.sub(r"[^a-zA-Z0-9]", "", _ascii_fold(ext)).lower()

    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if safe_ext:
        return f"{safe_base}-{timestamp_ms}.{safe_ext}"
    return f"{safe_base}-{timestamp_ms}"


def filename_from_url(url: str, timestamp_ms: int | None = None) -> str:
    """
    Derive a sanitised filename from an external media URL.

    Uses the last non-empty path segment, falling back to ``remote-asset``
    when the URL has no path or cannot be parsed.
    """
    try:
        path = urlparse(url).path
    except ValueError:
        path = ""
    segments = [segment for segment in path.split("/") if segment]
    basename = segments[-1] if segments else "remote-asset"
    return sanitize_filename(basename, timestamp_ms)


def humanize_field_name(key: str) -> str:
    """
    Turn a camelCase form key into a display label.

    The first letter is upper-cased and a space is inserted before every
    capital letter ("companyName" -> "Company Name").
    """
    if not key:
        return key
    spaced = re.sub(r"([A-Z])", r" \1", key)
    return (spaced[0].upper() + spaced[1:]).strip()


def html_to_text(value: str | None) -> str:
    """Strip markup from a rich text HTML string and collapse whitespace."""
    if not value:
        return ""
    text = html.unescape(_TAG_RE.sub(" ", value))
    return _WHITESPACE_RE.sub(" ", text).strip()


def format_currency(amount: float | int | None) -> str:
    """Format a dollar amount without cents ("$50,000")."""
    if amount is None:
        return ""
    return f"${amount:,.0f}"


def format_investment_range(minimum: float | None, maximum: float | None) -> str:
    """
    Render an investment range for cards and emails.

    Returns ``$min - $max`` when both are present, a single amount when only
    one is set, and an empty string otherwise.
    """
    if minimum is not None and maximum is not None:
        return f"{format_currency(minimum)} - {format_currency(maximum)}"
    if minimum is not None:
        return format_currency(minimum)
    if maximum is not None:
        return format_currency(maximum)
    return ""
