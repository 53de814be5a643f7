"""Exception types raised by the API client and CLI."""

from __future__ import annotations


class FolioError(Exception):
    """Base class for errors reported to the user."""


class ApiError(FolioError):
    """Backend request failed.

    Attributes:
        status_code: HTTP status code, or None for transport-level failures
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class AuthRequiredError(FolioError):
    """An admin call was attempted without a bearer token."""
