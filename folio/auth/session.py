"""
Admin session state.

An AuthSession is built once per process from a TokenStore and carries the
bearer token used for admin API calls. It has two states, anonymous and
authenticated, switched by login() and logout().
"""

from __future__ import annotations

from .base import TokenStore


DEFAULT_STORAGE_KEY = "adminToken"


class AuthSession:
    """Explicit login state backed by a token store."""

    def __init__(self, store: TokenStore, key: str = DEFAULT_STORAGE_KEY, token: str | None = None):
        """Initialize the session.

        Args:
            store: Persistence for the token
            key: Key the token is stored under
            token: Token that takes precedence over the stored one (not persisted)
        """
        self._store = store
        self._key = key
        self._token = token or store.get(key)

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def current_token(self) -> str | None:
        return self._token

    def login(self, token: str) -> None:
        if not token:
            raise ValueError("Cannot log in with an empty token")
        self._token = token
        self._store.set(self._key, token)

    def logout(self) -> None:
        self._token = None
        self._store.delete(self._key)
