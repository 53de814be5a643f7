"""
Backend access.

This package wraps the portfolio REST API behind a typed client.
"""

from .client import ApiClient

__all__ = ["ApiClient"]
