"""
Command-line interface for Folio.

Uses Typer to expose the article listing, detail and site build commands,
plus the admin commands that replace the dashboard (login, article and
project CRUD). Supports loading .env files for the admin token.
"""

from __future__ import annotations

from functools import wraps
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .auth import AuthSession, create_token_store
from .config import AppConfig, get_env_token, load_config
from .core.excerpt import build_excerpt
from .core.search import filter_articles, filter_projects, list_categories
from .core.types import ContentType, Project
from .errors import AuthRequiredError, FolioError
from .fetch.client import ApiClient
from .input.json_parser import parse_technologies
from .runner import article_detail, build_site, load_articles_safe
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False)
console = Console()


def _handle_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AuthRequiredError:
            console.print("[red]Not logged in.[/red] Run `folio login` first.")
            raise typer.Exit(code=1)
        except FolioError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=1)

    return wrapper


def _load(config: Path | None, log_level: str | None = None) -> AppConfig:
    load_dotenv()
    cfg = load_config(str(config) if config else None)
    if log_level:
        cfg.logging.level = log_level
    return cfg


def _session(cfg: AppConfig) -> AuthSession:
    try:
        store = create_token_store(cfg.auth)
    except ValueError as exc:
        raise FolioError(str(exc)) from exc
    return AuthSession(store, cfg.auth.storage_key, token=get_env_token(cfg.auth))


def _client(cfg: AppConfig, session: AuthSession | None = None) -> ApiClient:
    logger = setup_logging(cfg.logging)
    token = session.current_token() if session is not None else None
    return ApiClient(cfg.api, token=token, logger=logger)


def _read_body(path: Path) -> str:
    return path.read_text(encoding="utf-8")


@app.command("list")
@_handle_errors
def list_articles(
    query: str = typer.Option("", "--query", "-q", help="Case-insensitive text search."),
    category: str = typer.Option("all", "--category", help="Category name, or 'all'."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """List articles with their previews and reading times."""
    cfg = _load(config, log_level)
    client = _client(cfg)
    articles = filter_articles(load_articles_safe(client, client.logger), query, category)
    if not articles:
        console.print("No articles found.")
        return

    table = Table(show_lines=False)
    table.add_column("Slug", style="green")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Read")
    table.add_column("Preview")
    for article in articles:
        excerpt = build_excerpt(article, cfg.excerpt.list_max_length, cfg.excerpt.words_per_minute)
        table.add_row(
            escape(article.slug),
            escape(article.title),
            escape(article.display_category),
            excerpt.reading_label,
            escape(excerpt.preview_text),
        )
    console.print(table)


@app.command()
@_handle_errors
def categories(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """List the categories available for filtering."""
    cfg = _load(config, log_level)
    client = _client(cfg)
    for name in list_categories(load_articles_safe(client, client.logger)):
        console.print(escape(name))


@app.command()
@_handle_errors
def show(
    slug: str = typer.Argument(..., help="Article slug."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Show one article's metadata, preview and related articles."""
    cfg = _load(config, log_level)
    client = _client(cfg)
    view = article_detail(client, slug, cfg, client.logger)
    if view is None:
        console.print(f"[red]Article not found:[/red] {escape(slug)}")
        raise typer.Exit(code=1)

    article = view.article
    console.print(f"[bold green]{escape(article.title)}[/bold green]")
    console.print(f"{escape(article.display_category)} · {view.excerpt.reading_label}")
    if article.tag_list:
        console.print(escape(" ".join(f"#{tag}" for tag in article.tag_list)))
    console.print()
    console.print(escape(view.excerpt.preview_text))
    if view.related:
        console.print()
        console.print("[bold]Related Articles[/bold]")
        for related, excerpt in view.related:
            console.print(escape(f"- {related.title} ({related.slug}): {excerpt.preview_text}"))


@app.command()
@_handle_errors
def build(
    output: Path = typer.Option(Path("site"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    output_format: str | None = typer.Option(
        None, "--format", help="Output format: html or markdown."
    ),
    include_markdown: bool | None = typer.Option(
        None, "--markdown/--no-markdown", help="Also write the markdown digest."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Build the static article site.

    Args:
        output: Directory for the generated site
        config: Optional path to YAML config file
        progress: Whether to show progress bar
        output_format: Output format (html, markdown)
        include_markdown: Also write articles.md next to the HTML
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    cfg = _load(config, log_level)

    # Override with CLI options
    if output_format:
        cfg.output.format = output_format
    if include_markdown is not None:
        cfg.output.include_markdown = include_markdown
    if log_file is not None:
        cfg.logging.file = log_file

    output_path = build_site(output, cfg, show_progress=progress, console=console)
    console.print(f"Site generated: {output_path}")


@app.command()
@_handle_errors
def login(
    username: str = typer.Option(..., "--username", "-u", prompt=True),
    password: str = typer.Option(..., "--password", "-p", prompt=True, hide_input=True),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Log in as admin and store the session token."""
    cfg = _load(config, log_level)
    session = _session(cfg)
    token = _client(cfg).login(username, password)
    session.login(token)
    console.print("Logged in.")


@app.command()
@_handle_errors
def logout(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Forget the stored session token."""
    cfg = _load(config, log_level)
    _session(cfg).logout()
    console.print("Logged out.")


@app.command()
@_handle_errors
def whoami(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Report whether an admin session is active."""
    cfg = _load(config, log_level)
    session = _session(cfg)
    if session.is_authenticated:
        console.print("Authenticated")
    else:
        console.print("Anonymous")


@app.command()
@_handle_errors
def stats(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Show dashboard counters."""
    cfg = _load(config, log_level)
    site_stats = _client(cfg).get_stats()
    console.print(f"Articles: {site_stats.total_articles}")
    console.print(f"Categories: {site_stats.total_categories}")
    console.print(f"Views: {site_stats.total_views}")


@app.command("create-article")
@_handle_errors
def create_article(
    title: str = typer.Option(..., "--title", "-t"),
    body: Path = typer.Option(..., "--body", "-b", exists=True, readable=True),
    category: str | None = typer.Option(None, "--category"),
    tags: str | None = typer.Option(None, "--tags", help="Comma-separated tags."),
    content_type: str = typer.Option("markdown", "--content-type", help="markdown or html."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Create an article from a Markdown or HTML file."""
    cfg = _load(config, log_level)
    client = _client(cfg, _session(cfg))
    article = client.create_article(
        title, _read_body(body), ContentType.from_wire(content_type), category, tags
    )
    slug = article.slug if article is not None else "(unknown slug)"
    console.print(f"Created article: {slug}")


@app.command("update-article")
@_handle_errors
def update_article(
    article_id: str = typer.Argument(..., help="Backend article id."),
    title: str = typer.Option(..., "--title", "-t"),
    body: Path = typer.Option(..., "--body", "-b", exists=True, readable=True),
    category: str | None = typer.Option(None, "--category"),
    tags: str | None = typer.Option(None, "--tags", help="Comma-separated tags."),
    content_type: str = typer.Option("markdown", "--content-type", help="markdown or html."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Replace an article's fields."""
    cfg = _load(config, log_level)
    client = _client(cfg, _session(cfg))
    client.update_article(
        article_id, title, _read_body(body), ContentType.from_wire(content_type), category, tags
    )
    console.print(f"Updated article: {article_id}")


@app.command("delete-article")
@_handle_errors
def delete_article(
    article_id: str = typer.Argument(..., help="Backend article id."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Delete an article."""
    cfg = _load(config, log_level)
    client = _client(cfg, _session(cfg))
    if not yes:
        typer.confirm(f"Delete article {article_id}?", abort=True)
    client.delete_article(article_id)
    console.print(f"Deleted article: {article_id}")


@app.command("upload-image")
@_handle_errors
def upload_image(
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Upload an image and print its URL for use in article bodies."""
    cfg = _load(config, log_level)
    url = _client(cfg, _session(cfg)).upload_image(path)
    console.print(url)


@app.command()
@_handle_errors
def projects(
    category: str = typer.Option("all", "--category", help="Category name, or 'all'."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """List portfolio projects."""
    cfg = _load(config, log_level)
    items = filter_projects(_client(cfg).get_projects(), category)
    if not items:
        console.print("No projects found.")
        return

    table = Table()
    table.add_column("Id")
    table.add_column("Title", style="green")
    table.add_column("Category")
    table.add_column("Technologies")
    for project in items:
        table.add_row(
            str(project.id or ""),
            escape(project.title),
            escape(project.category or ""),
            escape(", ".join(project.technologies)),
        )
    console.print(table)


@app.command("create-project")
@_handle_errors
def create_project(
    title: str = typer.Option(..., "--title", "-t"),
    description: str = typer.Option("", "--description", "-d"),
    category: str | None = typer.Option(None, "--category"),
    technologies: str = typer.Option("", "--technologies", help="Comma-separated names."),
    thumbnail_url: str | None = typer.Option(None, "--thumbnail-url"),
    github_url: str | None = typer.Option(None, "--github-url"),
    live_url: str | None = typer.Option(None, "--live-url"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Create a portfolio project."""
    cfg = _load(config, log_level)
    client = _client(cfg, _session(cfg))
    project = Project(
        title=title,
        description=description,
        category=category,
        technologies=parse_technologies(technologies),
        thumbnail_url=thumbnail_url,
        github_url=github_url,
        live_url=live_url,
    )
    client.create_project(project)
    console.print(f"Created project: {title}")


@app.command("update-project")
@_handle_errors
def update_project(
    project_id: str = typer.Argument(..., help="Backend project id."),
    title: str | None = typer.Option(None, "--title", "-t"),
    description: str | None = typer.Option(None, "--description", "-d"),
    category: str | None = typer.Option(None, "--category"),
    technologies: str | None = typer.Option(None, "--technologies", help="Comma-separated names."),
    thumbnail_url: str | None = typer.Option(None, "--thumbnail-url"),
    github_url: str | None = typer.Option(None, "--github-url"),
    live_url: str | None = typer.Option(None, "--live-url"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Edit a portfolio project; options left out keep their current value."""
    cfg = _load(config, log_level)
    client = _client(cfg, _session(cfg))
    project = client.get_project(project_id)
    if project is None:
        console.print(f"[red]Project not found:[/red] {escape(project_id)}")
        raise typer.Exit(code=1)

    if title is not None:
        project.title = title
    if description is not None:
        project.description = description
    if category is not None:
        project.category = category
    if technologies is not None:
        project.technologies = parse_technologies(technologies)
    if thumbnail_url is not None:
        project.thumbnail_url = thumbnail_url
    if github_url is not None:
        project.github_url = github_url
    if live_url is not None:
        project.live_url = live_url

    client.update_project(project_id, project)
    console.print(f"Updated project: {project_id}")


@app.command("delete-project")
@_handle_errors
def delete_project(
    project_id: str = typer.Argument(..., help="Backend project id."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Delete a portfolio project."""
    cfg = _load(config, log_level)
    client = _client(cfg, _session(cfg))
    if not yes:
        typer.confirm(f"Delete project {project_id}?", abort=True)
    client.delete_project(project_id)
    console.print(f"Deleted project: {project_id}")


if __name__ == "__main__":
    app()
