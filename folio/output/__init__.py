"""
Output rendering.

This package renders article views into a static HTML site or a
markdown digest.
"""

from .renderer import format_date, page_filename, render_html, render_markdown

__all__ = ["render_html", "render_markdown", "format_date", "page_filename"]
