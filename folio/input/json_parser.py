"""JSON parser for portfolio backend records.

This module converts the JSON payloads served by the backend into typed
records. The article record shape is:
    {
        "id": 7,
        "slug": "learning-react-basics",
        "title": "Learning react basics",
        "content": "# Intro\\n...",
        "content_type": "markdown",
        "category": "Web",
        "tags": "react, javascript",
        "created_at": "2026-10-01T09:30:00Z",
        "updated_at": "2026-10-02T11:00:00Z"
    }

Projects store their technologies as a JSON-encoded array string, e.g.
"[\\"Python\\", \\"FastAPI\\"]".
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ..core.types import Article, ContentType, Project, SiteStats

logger = logging.getLogger(__name__)


def parse_article(item: dict[str, Any]) -> Article | None:
    """Parse a single article record.

    Args:
        item: Decoded JSON object for one article

    Returns:
        An Article, or None when slug or title is missing
    """
    slug = item.get("slug")
    title = item.get("title")
    if not slug or not title:
        article_id = item.get("id", "unknown")
        logger.warning(f"Skipping article {article_id}: missing required fields (slug or title)")
        return None

    return Article(
        id=item.get("id"),
        slug=str(slug),
        title=str(title),
        content=item.get("content") or "",
        content_type=ContentType.from_wire(item.get("content_type")),
        category=item.get("category") or None,
        tags=item.get("tags") or None,
        created_at=item.get("created_at"),
        updated_at=item.get("updated_at"),
    )


def parse_articles(data: Any) -> list[Article]:
    """Parse the article collection returned by GET /articles.

    Raises:
        ValueError: If the payload is not a JSON array
    """
    if not isinstance(data, list):
        raise ValueError("Invalid articles payload: expected a list")

    articles: list[Article] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        article = parse_article(item)
        if article is not None:
            articles.append(article)
    return articles


def article_payload(
    title: str,
    content: str,
    content_type: ContentType | str = ContentType.MARKDOWN,
    category: str | None = None,
    tags: str | None = None,
) -> dict[str, Any]:
    """Build the request body for creating or updating an article."""
    return {
        "title": title,
        "content": content,
        "content_type": ContentType.from_wire(content_type).value,
        "category": category or "",
        "tags": tags or "",
    }


def parse_project(item: dict[str, Any]) -> Project | None:
    title = item.get("title")
    if not title:
        logger.warning(f"Skipping project {item.get('id', 'unknown')}: missing title")
        return None

    return Project(
        id=item.get("id"),
        title=str(title),
        description=item.get("description") or "",
        category=item.get("category") or None,
        technologies=parse_technologies(item.get("technologies")),
        thumbnail_url=item.get("thumbnail_url") or None,
        github_url=item.get("github_url") or None,
        live_url=item.get("live_url") or None,
    )


def parse_projects(data: Any) -> list[Project]:
    """Parse GET /projects; anything other than a list yields no projects."""
    if not isinstance(data, list):
        return []
    projects: list[Project] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        project = parse_project(item)
        if project is not None:
            projects.append(project)
    return projects


def parse_technologies(value: Any) -> list[str]:
    """Decode the technologies field.

    Examples:
        >>> parse_technologies('["Python", "FastAPI"]')
        ['Python', 'FastAPI']
        >>> parse_technologies("Python, FastAPI")
        ['Python', 'FastAPI']
    """
    if not value:
        return []
    if isinstance(value, list):
        return [str(tech).strip() for tech in value if str(tech).strip()]
    try:
        decoded = json.loads(value)
    except (TypeError, ValueError):
        return [tech.strip() for tech in str(value).split(",") if tech.strip()]
    if isinstance(decoded, list):
        return [str(tech).strip() for tech in decoded if str(tech).strip()]
    return []


def project_payload(project: Project) -> dict[str, Any]:
    """Build the request body for creating or updating a project."""
    return {
        "title": project.title,
        "description": project.description,
        "category": project.category or "",
        "technologies": json.dumps(project.technologies),
        "thumbnail_url": project.thumbnail_url or "",
        "github_url": project.github_url or "",
        "live_url": project.live_url or "",
    }


def parse_stats(data: Any) -> SiteStats:
    if not isinstance(data, dict):
        return SiteStats()
    return SiteStats(
        total_articles=_as_int(data.get("total_articles")),
        total_categories=_as_int(data.get("total_categories")),
        total_views=_as_int(data.get("total_views")),
    )


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
