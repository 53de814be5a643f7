"""Tests for excerpt building."""

from folio.core.excerpt import build_excerpt, truncate_preview
from folio.core.types import Article


def _article(content, slug="sample"):
    return Article(slug=slug, title="Sample", content=content)


def test_long_preview_is_truncated_with_ellipsis():
    excerpt = build_excerpt(_article("a" * 300), 150)

    assert len(excerpt.preview_text) == 153
    assert excerpt.preview_text.endswith("...")
    assert excerpt.preview_text[:150] == "a" * 150


def test_short_preview_is_unchanged():
    content = "b" * 50
    excerpt = build_excerpt(_article(content), 150)

    assert excerpt.preview_text == content


def test_preview_exactly_at_limit_is_not_truncated():
    excerpt = build_excerpt(_article("c" * 150), 150)
    assert excerpt.preview_text == "c" * 150


def test_preview_is_normalized_before_truncation():
    excerpt = build_excerpt(_article("# Heading\n\n**Bold** statement here"), 12)
    assert excerpt.preview_text == "Heading Bold..."


def test_related_card_length():
    excerpt = build_excerpt(_article("word " * 100), 100)
    assert len(excerpt.preview_text) == 103


def test_reading_time_uses_raw_content():
    # 300 words inside a code fence normalize to "[code]" but still count.
    content = "```\n" + "x " * 300 + "\n```"
    excerpt = build_excerpt(_article(content))

    assert excerpt.preview_text == "[code]"
    assert excerpt.reading_minutes == 2
    assert excerpt.reading_label == "2 min read"


def test_missing_content_gives_empty_preview():
    excerpt = build_excerpt(_article(None))

    assert excerpt.preview_text == ""
    assert excerpt.reading_minutes == 1


def test_truncate_preview_helper():
    assert truncate_preview("abcdef", 3) == "abc..."
    assert truncate_preview("abc", 3) == "abc"
