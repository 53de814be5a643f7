"""
Markdown-to-plain-text normalization and reading-time estimation.

The normalizer strips Markdown syntax in a fixed rule order so article
bodies can be shown as single-line previews. Later rules assume the
earlier ones already ran; reordering changes the output.
"""

from __future__ import annotations

import math
import re


WORDS_PER_MINUTE = 200

# Ordered (pattern, replacement) pairs applied by normalize_markdown
_HEADING_RE = re.compile(r"^#+\s+", re.MULTILINE)              # "## Title"
_BOLD_RE = re.compile(r"\*\*(.*?)\*\*")                         # "**text**"
_ITALIC_RE = re.compile(r"\*(.*?)\*")                           # "*text*"
_CODE_FENCE_RE = re.compile(r"```[\s\S]*?(?:```|\Z)")           # fenced block, open fence runs to end
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")                      # "`code`"
_IMAGE_RE = re.compile(r"!\[.*?\]\(.*?\)")                      # "![alt](url)"
_LINK_RE = re.compile(r"\[(.*?)\]\(.*?\)")                      # "[text](url)"
_BLOCKQUOTE_RE = re.compile(r"^>\s+", re.MULTILINE)             # "> quote"
_RULE_RE = re.compile(r"^---$", re.MULTILINE)                   # "---"
_NEWLINES_RE = re.compile(r"\n+")
_WHITESPACE_RE = re.compile(r"\s+")

_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (_HEADING_RE, ""),
    (_BOLD_RE, r"\1"),
    (_ITALIC_RE, r"\1"),
    (_CODE_FENCE_RE, "[code]"),
    (_INLINE_CODE_RE, r"\1"),
    (_IMAGE_RE, "[image]"),
    (_LINK_RE, r"\1"),
    (_BLOCKQUOTE_RE, ""),
    (_RULE_RE, ""),
    (_NEWLINES_RE, " "),
    (_WHITESPACE_RE, " "),
)


def normalize_markdown(raw: str | None) -> str:
    """Strip Markdown syntax and collapse the result to one line.

    Malformed Markdown degrades to best-effort substitution; an unterminated
    code fence becomes a single "[code]" token covering the rest of the text.
    The result is a fixed point: normalizing it again returns it unchanged.

    Args:
        raw: Raw Markdown text; None or non-string values count as empty

    Returns:
        Single-line plain text with surrounding whitespace trimmed

    Examples:
        >>> normalize_markdown("# Title\\n\\nBody **bold**")
        'Title Body bold'
        >>> normalize_markdown("```js\\ncode\\n```")
        '[code]'
    """
    if not isinstance(raw, str) or not raw:
        return ""

    # Collapsing and trimming can expose new markup ("> > q"), so passes
    # repeat until stable. Each changing pass removes markup characters.
    text = _apply_rules(raw)
    while True:
        again = _apply_rules(text)
        if again == text:
            return text
        text = again


def _apply_rules(text: str) -> str:
    for pattern, replacement in _RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def count_words(raw: str | None) -> int:
    """Count whitespace-separated tokens, markup included."""
    if not isinstance(raw, str):
        return 0
    return len(raw.split())


def estimate_reading_minutes(raw: str | None, words_per_minute: int = WORDS_PER_MINUTE) -> int:
    """Estimate reading time in whole minutes.

    Markdown punctuation and code tokens count as words. Empty input still
    reads as one minute.

    Args:
        raw: Raw article body
        words_per_minute: Assumed reading speed

    Returns:
        ceil(words / words_per_minute), at least 1
    """
    words = count_words(raw)
    if words == 0:
        return 1
    return max(1, math.ceil(words / words_per_minute))


def format_reading_time(minutes: int) -> str:
    """Format reading time for display."""
    return f"{max(1, minutes)} min read"
