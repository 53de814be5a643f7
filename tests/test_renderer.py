from pathlib import Path

from folio.core.excerpt import build_excerpt
from folio.core.types import Article, ArticleView, ContentType
from folio.output.renderer import format_date, page_filename, render_html, render_markdown


def _view(slug, title, category="Web", content="Some body text", related=None, **kwargs):
    article = Article(slug=slug, title=title, content=content, category=category, **kwargs)
    return ArticleView(
        article=article,
        excerpt=build_excerpt(article),
        related=[(item, build_excerpt(item, 100)) for item in (related or [])],
    )


def test_format_date():
    assert format_date("2026-10-19T08:00:00Z") == "October 19, 2026"
    assert format_date("2026-03-05") == "March 5, 2026"
    assert format_date("yesterday") == "yesterday"
    assert format_date(None) == ""


def test_page_filename_is_filesystem_safe():
    assert page_filename("hello-world") == "hello-world.html"
    assert page_filename("../etc/passwd") == "etc-passwd.html"
    assert page_filename("///") == "article.html"


def test_render_html_writes_index_and_detail_pages(tmp_path: Path) -> None:
    sibling = Article(slug="second", title="Second post", content="More words here", category="Web")
    views = [
        _view(
            "first",
            "First <script>alert(1)</script>",
            content="# Heading\n\nParagraph one.\n\nParagraph <b>two</b>.",
            tags="python, web",
            created_at="2026-10-19T08:00:00Z",
            related=[sibling],
        ),
        _view("second", "Second post", content="More words here"),
        _view("loose", "Loose note", category=None),
    ]

    index_path = render_html(views, tmp_path, "Articles")
    index_html = index_path.read_text(encoding="utf-8")

    assert index_path == tmp_path / "index.html"
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in index_html
    assert 'href="articles/first.html"' in index_html
    assert "Heading Paragraph one. Paragraph &lt;b&gt;two&lt;/b&gt;." in index_html
    assert "Uncategorized" in index_html
    assert 'href="#web"' in index_html

    detail = (tmp_path / "articles" / "first.html").read_text(encoding="utf-8")
    assert "<p>Paragraph one.</p>" in detail
    assert "<p>Paragraph &lt;b&gt;two&lt;/b&gt;.</p>" in detail
    assert "October 19, 2026" in detail
    assert "#python" in detail
    assert 'href="second.html"' in detail
    assert "Related Articles" in detail

    assert (tmp_path / "articles" / "loose.html").exists()


def test_render_html_passes_html_bodies_through(tmp_path: Path) -> None:
    view = _view("raw", "Raw", content="<h2>Authored</h2><p>HTML</p>", content_type=ContentType.HTML)

    render_html([view], tmp_path, "Articles")
    detail = (tmp_path / "articles" / "raw.html").read_text(encoding="utf-8")

    assert "<h2>Authored</h2><p>HTML</p>" in detail
    assert "Related Articles" not in detail


def test_render_markdown_groups_by_category(tmp_path: Path) -> None:
    output_path = tmp_path / "articles.md"
    related = Article(slug="b", title="B", category="Web")
    views = [
        _view("a", "A", related=[related]),
        _view("b", "B"),
        _view("c", "C", category=None, tags="misc"),
    ]

    render_markdown(views, output_path, "Digest")
    text = output_path.read_text(encoding="utf-8")

    assert text.startswith("# Digest")
    assert "Total: 3" in text
    assert text.index("## Web") < text.index("## Uncategorized")
    assert "### A" in text
    assert "- Reading time: 1 min read" in text
    assert "- Tags: misc" in text
    assert "  - B" in text
