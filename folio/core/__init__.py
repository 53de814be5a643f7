"""
Core domain models and text logic.

This package contains the article types and the pure functions that
derive excerpts, reading times, related sets and filtered listings.
"""

from .types import Article, ArticleView, ContentType, Excerpt, Project, SiteStats
from .text import estimate_reading_minutes, format_reading_time, normalize_markdown
from .excerpt import build_excerpt
from .related import select_related
from .search import filter_articles, filter_projects, list_categories

__all__ = [
    "Article",
    "ArticleView",
    "ContentType",
    "Excerpt",
    "Project",
    "SiteStats",
    "normalize_markdown",
    "estimate_reading_minutes",
    "format_reading_time",
    "build_excerpt",
    "select_related",
    "filter_articles",
    "filter_projects",
    "list_categories",
]
