"""Excerpt building for list and related-article cards."""

from __future__ import annotations

from .text import WORDS_PER_MINUTE, estimate_reading_minutes, normalize_markdown
from .types import Article, Excerpt


ELLIPSIS = "..."
LIST_PREVIEW_LENGTH = 150
RELATED_PREVIEW_LENGTH = 100


def truncate_preview(text: str, max_length: int) -> str:
    """Cut text to exactly max_length characters and mark the cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + ELLIPSIS


def build_excerpt(
    article: Article,
    max_length: int = LIST_PREVIEW_LENGTH,
    words_per_minute: int = WORDS_PER_MINUTE,
) -> Excerpt:
    """Build the preview text and reading time for an article.

    The preview is the normalized body, truncated to max_length characters
    plus "..." when longer. Reading time is estimated from the raw body, so
    Markdown punctuation and code tokens still count as words.

    Args:
        article: The article to summarize
        max_length: Preview length before the ellipsis is appended
        words_per_minute: Assumed reading speed

    Returns:
        A new Excerpt; nothing is cached between calls
    """
    preview = truncate_preview(normalize_markdown(article.content), max_length)
    minutes = estimate_reading_minutes(article.content, words_per_minute)
    return Excerpt(preview_text=preview, reading_minutes=minutes)
