"""Parsers for backend JSON payloads."""

from .json_parser import (
    article_payload,
    parse_article,
    parse_articles,
    parse_project,
    parse_projects,
    parse_stats,
    parse_technologies,
    project_payload,
)

__all__ = [
    "parse_article",
    "parse_articles",
    "parse_project",
    "parse_projects",
    "parse_stats",
    "parse_technologies",
    "article_payload",
    "project_payload",
]
