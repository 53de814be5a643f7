"""Search and category filtering over article listings."""

from __future__ import annotations

from typing import Iterable

from .types import Article, Project


ALL_CATEGORIES = "all"


def filter_articles(
    articles: Iterable[Article],
    query: str = "",
    category: str = ALL_CATEGORIES,
) -> list[Article]:
    """Filter articles by category and a case-insensitive text query.

    An article matches when the category is "all" or equals the article's
    category, and the query is empty or found in the title or body. No
    ranking is applied; matches keep their original order.
    """
    needle = (query or "").lower()
    matches: list[Article] = []
    for article in articles:
        if category != ALL_CATEGORIES and article.category != category:
            continue
        if needle and not _contains(article, needle):
            continue
        matches.append(article)
    return matches


def filter_projects(
    projects: Iterable[Project],
    category: str = ALL_CATEGORIES,
) -> list[Project]:
    """Keep projects whose category equals `category`, or all for "all"."""
    if category == ALL_CATEGORIES:
        return list(projects)
    return [project for project in projects if project.category == category]


def list_categories(articles: Iterable[Article]) -> list[str]:
    """Return "all" followed by distinct non-empty categories, first seen first."""
    categories = [ALL_CATEGORIES]
    seen: set[str] = set()
    for article in articles:
        if not article.category or article.category in seen:
            continue
        seen.add(article.category)
        categories.append(article.category)
    return categories


def _contains(article: Article, needle: str) -> bool:
    title = (article.title or "").lower()
    content = (article.content or "").lower()
    return needle in title or needle in content
