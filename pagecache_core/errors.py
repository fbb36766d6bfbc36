"""PageCache Errors - Exception Hierarchy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Filesystem failures are not wrapped: they surface as the built-in
``OSError`` family so callers can decide whether to log and continue.
"""

from __future__ import annotations


class PageCacheError(Exception):
    """Base exception for page cache errors."""


class ConfigurationError(PageCacheError):
    """Raised for invalid page cache configuration.

    Also raised when a request-bound cache root is evaluated without a
    request context.
    """


__all__ = ["PageCacheError", "ConfigurationError"]
