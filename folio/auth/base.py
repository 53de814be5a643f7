"""Abstract interface for admin token persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenStore(ABC):
    """Key-value storage for the admin session token."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Persist a value under key."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key; missing keys are ignored."""
        raise NotImplementedError
