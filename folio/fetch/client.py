"""
HTTP client for the portfolio backend REST API.

Public endpoints (articles, projects, stats) need no credentials. Admin
endpoints under /admin require a bearer token obtained from POST /login.
Transport failures are retried with a linear backoff; HTTP error statuses
are reported immediately as ApiError.
"""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
import time
from typing import Any
from urllib.parse import quote

import httpx

from ..config import ApiConfig
from ..core.types import Article, ContentType, Project, SiteStats
from ..errors import ApiError, AuthRequiredError
from ..input.json_parser import (
    article_payload,
    parse_article,
    parse_articles,
    parse_project,
    parse_projects,
    parse_stats,
    project_payload,
)
from ..utils.logging import get_logger, log_event, redact_token


class ApiClient:
    """Synchronous client for the portfolio backend.

    Attributes:
        cfg: API settings (base URL, timeout, retries)
        token: Bearer token for admin calls, or None when anonymous
        logger: Logger receiving api_request and api_error events
    """

    def __init__(
        self,
        cfg: ApiConfig,
        token: str | None = None,
        transport: httpx.BaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.cfg = cfg
        self.token = token
        self._transport = transport
        self.logger = logger or get_logger("api")

    # Articles

    def get_articles(self) -> list[Article]:
        return parse_articles(self._request("GET", "/articles"))

    def get_article(self, slug: str) -> Article | None:
        """Fetch one article by slug; None when the backend answers 404."""
        data = self._request("GET", f"/articles/{quote(slug, safe='')}", allow_not_found=True)
        if not isinstance(data, dict):
            return None
        return parse_article(data)

    def create_article(
        self,
        title: str,
        content: str,
        content_type: ContentType | str = ContentType.MARKDOWN,
        category: str | None = None,
        tags: str | None = None,
    ) -> Article | None:
        payload = article_payload(title, content, content_type, category, tags)
        data = self._request("POST", "/admin/articles", json=payload, admin=True)
        return parse_article(data) if isinstance(data, dict) else None

    def update_article(
        self,
        article_id: str | int,
        title: str,
        content: str,
        content_type: ContentType | str = ContentType.MARKDOWN,
        category: str | None = None,
        tags: str | None = None,
    ) -> Article | None:
        payload = article_payload(title, content, content_type, category, tags)
        data = self._request("PUT", f"/admin/articles/{article_id}", json=payload, admin=True)
        return parse_article(data) if isinstance(data, dict) else None

    def delete_article(self, article_id: str | int) -> None:
        self._request("DELETE", f"/admin/articles/{article_id}", admin=True)

    # Projects

    def get_projects(self) -> list[Project]:
        return parse_projects(self._request("GET", "/projects"))

    def get_project(self, project_id: str | int) -> Project | None:
        data = self._request("GET", f"/projects/{project_id}", allow_not_found=True)
        if not isinstance(data, dict):
            return None
        return parse_project(data)

    def create_project(self, project: Project) -> Project | None:
        data = self._request("POST", "/admin/projects", json=project_payload(project), admin=True)
        return parse_project(data) if isinstance(data, dict) else None

    def update_project(self, project_id: str | int, project: Project) -> Project | None:
        data = self._request(
            "PUT", f"/admin/projects/{project_id}", json=project_payload(project), admin=True
        )
        return parse_project(data) if isinstance(data, dict) else None

    def delete_project(self, project_id: str | int) -> None:
        self._request("DELETE", f"/admin/projects/{project_id}", admin=True)

    # Misc

    def get_stats(self) -> SiteStats:
        return parse_stats(self._request("GET", "/stats"))

    def login(self, username: str, password: str) -> str:
        """Exchange credentials for a bearer token.

        Raises:
            ApiError: If the backend rejects the credentials or returns no token
        """
        data = self._request("POST", "/login", json={"username": username, "password": password})
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise ApiError("Login response did not contain a token")
        log_event(self.logger, "Login succeeded", event="login", token=redact_token(str(token)))
        return str(token)

    def upload_image(self, path: Path) -> str:
        """Upload an image as multipart field "image" and return its URL.

        Relative URLs from the backend are resolved against the API host so
        they can be pasted into article bodies as-is.
        """
        content = path.read_bytes()
        mime = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        files = {"image": (path.name, content, mime)}
        data = self._request("POST", "/admin/upload", files=files, admin=True)
        url = None
        if isinstance(data, dict):
            url = data.get("url") or data.get("image_url")
        if not url:
            raise ApiError("Upload response did not contain an image URL")
        return str(httpx.URL(self.cfg.base_url).join(str(url)))

    def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        files: dict[str, Any] | None = None,
        admin: bool = False,
        allow_not_found: bool = False,
    ) -> Any:
        """Send a request with retry on transport failures.

        Returns:
            Decoded JSON body, or None for empty bodies and allowed 404s
        """
        headers = {"User-Agent": self.cfg.user_agent, "Accept": "application/json"}
        if admin:
            if not self.token:
                raise AuthRequiredError(f"{method} {path} requires login")
            headers["Authorization"] = f"Bearer {self.token}"

        last_error: str | None = None
        retries = max(0, self.cfg.retries)

        for attempt in range(retries + 1):
            try:
                with httpx.Client(
                    base_url=self.cfg.base_url,
                    timeout=self.cfg.timeout_seconds,
                    trust_env=self.cfg.trust_env,
                    transport=self._transport,
                ) as client:
                    resp = client.request(method, path, json=json, files=files, headers=headers)
            except httpx.TransportError as exc:
                last_error = f"{type(exc).__name__}: {exc}"
                log_event(
                    self.logger,
                    "API transport error",
                    event="api_error",
                    method=method,
                    path=path,
                    attempt=attempt + 1,
                    error=last_error,
                )
                if attempt < retries:
                    # Linear backoff: 0.5s, 1.0s, 1.5s...
                    time.sleep(0.5 * (attempt + 1))
                continue

            log_event(
                self.logger,
                "API request",
                event="api_request",
                method=method,
                path=path,
                status_code=resp.status_code,
            )
            if resp.status_code == 404 and allow_not_found:
                return None
            if resp.is_error:
                raise ApiError(
                    f"{method} {path} failed with HTTP {resp.status_code}",
                    status_code=resp.status_code,
                )
            if not resp.content:
                return None
            try:
                return resp.json()
            except ValueError as exc:
                raise ApiError(f"{method} {path} returned invalid JSON", resp.status_code) from exc

        raise ApiError(f"{method} {path} failed: {last_error}")
