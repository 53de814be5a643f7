"""Tests for Markdown normalization and reading-time estimation."""

import pytest

from folio.core.text import (
    count_words,
    estimate_reading_minutes,
    format_reading_time,
    normalize_markdown,
)


def test_heading_and_bold_are_stripped():
    assert normalize_markdown("# Title\n\nBody **bold**") == "Title Body bold"


def test_fenced_code_becomes_placeholder():
    assert normalize_markdown("```js\ncode\n```") == "[code]"


def test_unterminated_fence_consumes_rest_of_text():
    text = "Intro paragraph\n\n```python\nprint('hi')\nmore lines"
    assert normalize_markdown(text) == "Intro paragraph [code]"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("### Deep heading", "Deep heading"),
        ("An *emphasised* word", "An emphasised word"),
        ("Run `pip install folio` first", "Run pip install folio first"),
        ("See ![diagram](https://example.com/d.png) below", "See [image] below"),
        ("Read [the docs](https://example.com/docs) now", "Read the docs now"),
        ("> quoted line\nnext line", "quoted line next line"),
        ("above\n---\nbelow", "above below"),
    ],
)
def test_individual_rules(raw, expected):
    assert normalize_markdown(raw) == expected


def test_image_is_replaced_before_link_unwrapping():
    raw = "[home](https://example.com) ![logo](https://example.com/logo.png)"
    assert normalize_markdown(raw) == "home [image]"


def test_plain_text_only_collapses_whitespace():
    raw = "  plain   text\twith\n\n\nodd   spacing  "
    assert normalize_markdown(raw) == " ".join(raw.split())


@pytest.mark.parametrize("raw", [None, "", 42, ["# list"]])
def test_missing_or_non_string_input_is_empty(raw):
    assert normalize_markdown(raw) == ""


@pytest.mark.parametrize(
    "raw",
    [
        "# Title\n\nBody **bold** and [link](https://x.io) and ![pic](p.png)\n\n```\ncode\n```",
        "> quote\n\n---\n\n*italic* `inline`",
        "Already clean text",
        "[unbalanced link( and **dangling bold",
        " # x",
        "``a``",
        "> > q",
    ],
)
def test_normalization_is_idempotent(raw):
    once = normalize_markdown(raw)
    assert normalize_markdown(once) == once


def test_reading_time_has_floor_of_one_minute():
    assert estimate_reading_minutes("") == 1
    assert estimate_reading_minutes("   \n\t ") == 1
    assert estimate_reading_minutes(None) == 1
    assert estimate_reading_minutes("just a few words") == 1


def test_reading_time_rounds_up_per_200_words():
    assert estimate_reading_minutes(" ".join(["word"] * 200)) == 1
    assert estimate_reading_minutes(" ".join(["word"] * 201)) == 2
    assert estimate_reading_minutes(" ".join(["word"] * 400)) == 2
    assert estimate_reading_minutes(" ".join(["word"] * 401)) == 3


def test_reading_time_respects_custom_speed():
    assert estimate_reading_minutes(" ".join(["word"] * 100), words_per_minute=50) == 2


def test_markup_tokens_count_as_words():
    assert count_words("## Heading **bold** ```") == 4


def test_format_reading_time():
    assert format_reading_time(3) == "3 min read"
    assert format_reading_time(0) == "1 min read"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (" # x", "x"),
        ("``a``", "a"),
        ("> > q", "q"),
        ("  > # nested", "nested"),
    ],
)
def test_markup_exposed_by_trimming_is_stripped(raw, expected):
    assert normalize_markdown(raw) == expected
