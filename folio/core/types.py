"""
Core data types for the portfolio blog.

This module defines the records exchanged with the backend and the values
derived from them:
- Article: A blog post as served by the backend
- Excerpt: Preview text and reading time derived from an article
- Project: A portfolio project card
- SiteStats: Dashboard counters
- ArticleView: An article with its excerpt and related cards
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .text import format_reading_time


UNCATEGORIZED = "Uncategorized"


class ContentType(str, Enum):
    """Body format of an article.

    Only two formats exist. Missing values mean Markdown; any other value
    is treated as pre-rendered HTML, including case variants of "markdown".
    """

    MARKDOWN = "markdown"
    HTML = "html"

    @classmethod
    def from_wire(cls, value: str | None) -> "ContentType":
        if isinstance(value, cls):
            return value
        if not value:
            return cls.MARKDOWN
        if value == cls.MARKDOWN.value:
            return cls.MARKDOWN
        return cls.HTML


@dataclass
class Article:
    """Represents a blog article owned by the backend.

    Attributes:
        id: Opaque backend identifier
        slug: URL-safe unique key used for detail lookups
        title: Display title
        content: Raw body, Markdown or HTML depending on content_type
        content_type: Body format tag
        category: Optional category name
        tags: Optional comma-separated labels
        created_at: ISO 8601 creation timestamp
        updated_at: ISO 8601 update timestamp
    """
    slug: str
    title: str
    content: str = ""
    content_type: ContentType = ContentType.MARKDOWN
    category: str | None = None
    tags: str | None = None
    id: str | int | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @property
    def display_category(self) -> str:
        return self.category or UNCATEGORIZED

    @property
    def tag_list(self) -> list[str]:
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]

    @property
    def is_markdown(self) -> bool:
        return self.content_type is ContentType.MARKDOWN


@dataclass(frozen=True)
class Excerpt:
    """Preview derived from an article at render time.

    Attributes:
        preview_text: Normalized, possibly truncated preview string
        reading_minutes: Estimated reading time, always at least 1
    """
    preview_text: str
    reading_minutes: int

    @property
    def reading_label(self) -> str:
        return format_reading_time(self.reading_minutes)


@dataclass
class Project:
    """Portfolio project shown on the projects page.

    Attributes:
        title: Project name
        description: Short description
        category: Optional grouping label
        technologies: Technology names, decoded from the wire JSON string
        thumbnail_url: Optional preview image
        github_url: Optional source link
        live_url: Optional demo link
        id: Opaque backend identifier
    """
    title: str
    description: str = ""
    category: str | None = None
    technologies: list[str] = field(default_factory=list)
    thumbnail_url: str | None = None
    github_url: str | None = None
    live_url: str | None = None
    id: str | int | None = None


@dataclass
class SiteStats:
    total_articles: int = 0
    total_categories: int = 0
    total_views: int = 0


@dataclass
class ArticleView:
    """An article assembled for list and detail pages.

    Attributes:
        article: The article itself
        excerpt: List-card excerpt
        related: Related articles paired with their card excerpts
    """
    article: Article
    excerpt: Excerpt
    related: list[tuple[Article, Excerpt]] = field(default_factory=list)
