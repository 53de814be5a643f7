"""
Admin authentication.

This package holds the session object and the token stores it
persists to.
"""

from .base import TokenStore
from .session import AuthSession
from .stores import FileTokenStore, MemoryTokenStore, available_stores, create_token_store

__all__ = [
    "AuthSession",
    "TokenStore",
    "FileTokenStore",
    "MemoryTokenStore",
    "available_stores",
    "create_token_store",
]
