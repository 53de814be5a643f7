"""
List/detail assembly and static site generation.

This module coordinates the workflow behind the CLI:
1. Fetch the article collection (failures degrade to an empty list)
2. Build list excerpts for every article
3. Select related articles and their card excerpts
4. Render the HTML site and optional markdown digest
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
)

from .config import AppConfig, ExcerptConfig
from .core.excerpt import build_excerpt
from .core.related import select_related
from .core.types import Article, ArticleView
from .errors import FolioError
from .fetch.client import ApiClient
from .output.renderer import render_html, render_markdown
from .utils.logging import log_event, setup_logging


def load_articles_safe(client: ApiClient, logger: logging.Logger | None = None) -> list[Article]:
    """Fetch all articles, substituting an empty list on failure."""
    try:
        return client.get_articles()
    except (FolioError, httpx.HTTPError, ValueError) as exc:
        if logger is not None:
            logger.warning(
                f"Could not load articles: {exc}",
                extra={"event": "articles_load_failed", "error": str(exc)},
            )
        return []


def build_view(article: Article, articles: list[Article], cfg: ExcerptConfig) -> ArticleView:
    """Assemble the list excerpt and related cards for one article."""
    related = select_related(articles, article, cfg.related_limit)
    return ArticleView(
        article=article,
        excerpt=build_excerpt(article, cfg.list_max_length, cfg.words_per_minute),
        related=[
            (item, build_excerpt(item, cfg.related_max_length, cfg.words_per_minute))
            for item in related
        ],
    )


def article_detail(
    client: ApiClient,
    slug: str,
    cfg: AppConfig,
    logger: logging.Logger | None = None,
) -> ArticleView | None:
    """Load one article and its related set.

    The reference article is fetched before the collection so related
    selection never runs against an unknown category.

    Returns:
        The assembled view, or None when the slug does not exist
    """
    article = client.get_article(slug)
    if article is None:
        log_event(logger, "Article not found", event="article_not_found", slug=slug)
        return None
    articles = load_articles_safe(client, logger)
    return build_view(article, articles, cfg.excerpt)


def build_site(
    output_dir: Path,
    cfg: AppConfig,
    client: ApiClient | None = None,
    show_progress: bool = True,
    console: Console | None = None,
) -> Path:
    """Generate the static article site.

    Args:
        output_dir: Directory for index.html and the articles/ folder
        cfg: Application configuration
        client: API client (built from cfg.api when None)
        show_progress: Whether to display a progress bar
        console: Rich console for output (creates default if None)

    Returns:
        Path to index.html, or to the markdown digest when format is "markdown"
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logging(cfg.logging, output_dir)
    client = client or ApiClient(cfg.api, logger=logger)
    console = console or Console()

    log_event(logger, "Build start", event="build_start", output=str(output_dir))
    articles = load_articles_safe(client, logger)

    views: list[ArticleView] = []
    if show_progress and articles:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Assembling articles", total=len(articles))
            for article in articles:
                views.append(build_view(article, articles, cfg.excerpt))
                progress.advance(task)
    else:
        views = [build_view(article, articles, cfg.excerpt) for article in articles]

    title = cfg.output.site_title
    markdown_path = output_dir / "articles.md"
    if cfg.output.format == "markdown":
        render_markdown(views, markdown_path, title)
        result = markdown_path
    else:
        result = render_html(views, output_dir, title)
        if cfg.output.include_markdown:
            render_markdown(views, markdown_path, title)

    log_event(
        logger,
        "Build complete",
        event="build_complete",
        articles=len(views),
        output=str(result),
    )
    return result
