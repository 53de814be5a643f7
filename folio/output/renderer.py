from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timezone
from pathlib import Path
import re

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from ..core.search import list_categories
from ..core.types import ArticleView


def _slugify(value: str) -> str:
    lowered = value.strip().lower()
    cleaned = []
    last_dash = False
    for ch in lowered:
        if ch.isalnum():
            cleaned.append(ch)
            last_dash = False
        else:
            if not last_dash:
                cleaned.append("-")
                last_dash = True
    slug = "".join(cleaned).strip("-")
    return slug or "section"


def page_filename(slug: str) -> str:
    """Return the detail page filename for an article slug."""
    safe = re.sub(r"[^A-Za-z0-9_-]+", "-", slug).strip("-")
    return f"{safe or 'article'}.html"


def format_date(value: str | None) -> str:
    """Format an ISO 8601 timestamp like "October 19, 2026"."""
    if not value:
        return ""
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def render_body(view: ArticleView) -> Markup:
    """Render the article body for the detail page.

    HTML bodies are emitted as authored by the backend. Markdown bodies are
    escaped and split into paragraphs on blank lines.
    """
    article = view.article
    if not article.is_markdown:
        return Markup(article.content)
    paragraphs = [p.strip() for p in article.content.split("\n\n") if p.strip()]
    return Markup("\n").join(Markup("<p>{}</p>").format(escape(p)) for p in paragraphs)


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )
    env.filters["format_date"] = format_date
    env.filters["page_filename"] = page_filename
    return env


def render_html(views: list[ArticleView], output_dir: Path, title: str) -> Path:
    """Render the index page and one detail page per article.

    Returns:
        Path to index.html
    """
    env = _environment()
    articles_dir = output_dir / "articles"
    articles_dir.mkdir(parents=True, exist_ok=True)
    generated_at = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")

    categories = [
        {"id": _slugify(name), "name": name}
        for name in list_categories(view.article for view in views)
        if name != "all"
    ]
    index_html = env.get_template("index.html").render(
        title=title,
        generated_at=generated_at,
        categories=categories,
        views=views,
        total=len(views),
    )
    index_path = output_dir / "index.html"
    index_path.write_text(index_html, encoding="utf-8")

    detail_template = env.get_template("article.html")
    for view in views:
        html = detail_template.render(
            title=title,
            generated_at=generated_at,
            view=view,
            body=render_body(view),
        )
        (articles_dir / page_filename(view.article.slug)).write_text(html, encoding="utf-8")

    return index_path


def render_markdown(views: list[ArticleView], output_path: Path, title: str) -> None:
    grouped = defaultdict(list)
    for view in views:
        grouped[view.article.display_category].append(view)

    lines = [f"# {title}", "", f"Total: {len(views)}", ""]
    for group, items in sorted(grouped.items(), key=lambda item: (-len(item[1]), item[0].lower())):
        lines.append(f"## {group}")
        lines.append("")
        for view in items:
            art = view.article
            lines.append(f"### {art.title}")
            lines.append(f"- Slug: {art.slug}")
            if art.created_at:
                lines.append(f"- Date: {format_date(art.created_at)}")
            lines.append(f"- Reading time: {view.excerpt.reading_label}")
            if art.tag_list:
                lines.append(f"- Tags: {', '.join(art.tag_list)}")
            if view.excerpt.preview_text:
                lines.append(f"- Preview: {view.excerpt.preview_text}")
            if view.related:
                lines.append("- Related:")
                for related, _ in view.related:
                    lines.append(f"  - {related.title}")
            lines.append("")

    output_path.write_text("\n".join(lines), encoding="utf-8")
