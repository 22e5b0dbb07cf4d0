"""Run listing renderers."""

from .console import render_listing
from .html import render_listing_html

__all__ = ["render_listing", "render_listing_html"]
