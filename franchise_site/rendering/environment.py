"""
Jinja2 environment.

Templates ship inside the package under rendering/templates. HTML templates
are autoescaped; plain-text email bodies are not.

Dependencies: jinja2
System role: Template loading and shared filters
"""

from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from franchise_site.core.text_utils import format_currency, html_to_text

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _format_datetime(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.astimezone(timezone.utc).strftime("%B %d, %Y at %I:%M %p UTC")


@lru_cache
def get_environment() -> Environment:
    """
    Build the shared template environment.

    Returns:
        Environment: Cached Jinja2 environment with site filters registered
    """
    env = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["currency"] = format_currency
    env.filters["plain_text"] = html_to_text
    env.filters["datetime"] = _format_datetime
    return env
