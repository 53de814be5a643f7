"""
Related-article selection for detail views.

Related articles share the reference article's category exactly. Two
uncategorized articles are never related to each other.
"""

from __future__ import annotations

from typing import Iterable

from .types import Article


DEFAULT_RELATED_LIMIT = 3


def select_related(
    articles: Iterable[Article],
    reference: Article,
    limit: int = DEFAULT_RELATED_LIMIT,
) -> list[Article]:
    """Select same-category siblings of a reference article.

    The filter is stable: matches keep their order from the collection.
    Callers must only invoke this once the reference article is loaded.

    Args:
        articles: Full article collection, in display order
        reference: The article being viewed
        limit: Maximum number of related articles to return

    Returns:
        Up to limit articles with reference.category, excluding reference.slug
    """
    category = reference.category
    if not category or limit <= 0:
        return []

    related: list[Article] = []
    for article in articles:
        if article.slug == reference.slug:
            continue
        if article.category != category:
            continue
        related.append(article)
        if len(related) >= limit:
            break
    return related
