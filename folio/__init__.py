"""
Folio - content toolkit for a personal portfolio blog.

This package fetches articles and projects from the portfolio REST backend,
turns raw article Markdown into preview excerpts and reading-time estimates,
selects related articles, and renders a static list/detail site.

Main entry point is the CLI via the `folio` command.

Example:
    $ folio list --query react
    $ folio build -o site/
"""

__all__ = [
    "__version__",
    "Article",
    "ContentType",
    "Excerpt",
    "build_excerpt",
    "estimate_reading_minutes",
    "filter_articles",
    "normalize_markdown",
    "select_related",
]
__version__ = "0.1.0"

from .core.excerpt import build_excerpt
from .core.related import select_related
from .core.search import filter_articles
from .core.text import estimate_reading_minutes, normalize_markdown
from .core.types import Article, ContentType, Excerpt
