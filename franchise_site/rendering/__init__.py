"""Server-side HTML and email rendering."""

from .environment import get_environment
from .emails import EmailRenderer
from .pages import PageRenderer, parse_layout

__all__ = ["EmailRenderer", "PageRenderer", "get_environment", "parse_layout"]
