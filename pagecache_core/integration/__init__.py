"""Integration module - Hooks for web framework integrations."""

from pagecache_core.integration.request import (
    CACHEABLE_METHODS,
    RequestContext,
    caching_allowed,
)
from pagecache_core.integration.controller import PageCaching

__all__ = [
    "CACHEABLE_METHODS",
    "RequestContext",
    "caching_allowed",
    "PageCaching",
]
