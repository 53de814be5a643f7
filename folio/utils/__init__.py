"""
Shared utility functions.

This package contains logging helpers used by the client, runner
and CLI.
"""

from .logging import (
    JsonlFormatter,
    get_logger,
    log_event,
    redact_token,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_event",
    "redact_token",
    "JsonlFormatter",
]
