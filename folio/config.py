"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- ApiConfig: Backend REST API settings
- ExcerptConfig: Preview length, related-article and reading-time settings
- AuthConfig: Admin token storage settings
- OutputConfig: Static site output settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml


@dataclass
class ApiConfig:
    """Configuration for the portfolio backend API.

    Attributes:
        base_url: Base URL of the REST API, including the /api prefix
        timeout_seconds: HTTP request timeout
        retries: Number of retry attempts for transport failures
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    base_url: str = "http://localhost:8080/api"
    timeout_seconds: float = 10.0
    retries: int = 2
    trust_env: bool = True
    user_agent: str = "folio/0.1"


@dataclass
class ExcerptConfig:
    """Configuration for article previews.

    Attributes:
        list_max_length: Preview length on article list cards
        related_max_length: Preview length on related-article cards
        related_limit: Maximum number of related articles per detail page
        words_per_minute: Assumed reading speed for reading-time estimates
    """

    list_max_length: int = 150
    related_max_length: int = 100
    related_limit: int = 3
    words_per_minute: int = 200


@dataclass
class AuthConfig:
    """Configuration for the admin session.

    Attributes:
        store: Token store backend ("file" or "memory")
        token_path: JSON file used by the file store
        storage_key: Key the token is stored under
        token_env: Environment variable that overrides the stored token
    """

    store: str = "file"
    token_path: str = "~/.config/folio/session.json"
    storage_key: str = "adminToken"
    token_env: str = "FOLIO_ADMIN_TOKEN"


@dataclass
class OutputConfig:
    """Configuration for static site generation.

    Attributes:
        format: "html" or "markdown"
        include_markdown: Whether to also write the markdown digest when format is "html"
        site_title: Title shown on the generated index page
    """

    format: str = "html"
    include_markdown: bool = False
    site_title: str = "Articles"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file written next to the output
    """

    level: str = "WARNING"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "folio.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    api: ApiConfig = field(default_factory=ApiConfig)
    excerpt: ExcerptConfig = field(default_factory=ExcerptConfig)
    auth: AuthConfig = field(default_factory=AuthConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "api": {
            "base_url": cfg.api.base_url,
            "timeout_seconds": cfg.api.timeout_seconds,
            "retries": cfg.api.retries,
            "trust_env": cfg.api.trust_env,
            "user_agent": cfg.api.user_agent,
        },
        "excerpt": {
            "list_max_length": cfg.excerpt.list_max_length,
            "related_max_length": cfg.excerpt.related_max_length,
            "related_limit": cfg.excerpt.related_limit,
            "words_per_minute": cfg.excerpt.words_per_minute,
        },
        "auth": {
            "store": cfg.auth.store,
            "token_path": cfg.auth.token_path,
            "storage_key": cfg.auth.storage_key,
            "token_env": cfg.auth.token_env,
        },
        "output": {
            "format": cfg.output.format,
            "include_markdown": cfg.output.include_markdown,
            "site_title": cfg.output.site_title,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        api=ApiConfig(**data["api"]),
        excerpt=ExcerptConfig(**data["excerpt"]),
        auth=AuthConfig(**data["auth"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_env_token(cfg: AuthConfig) -> str | None:
    """Get an admin token from the configured environment variable."""
    return os.getenv(cfg.token_env) or None
