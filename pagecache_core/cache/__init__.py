"""Cache module - Page cache store and keys."""

from pagecache_core.cache.entry import CacheEntry, CacheKey
from pagecache_core.cache.cache import PageCache, PageCacheConfig, USE_CONFIG

__all__ = [
    "CacheEntry",
    "CacheKey",
    "PageCache",
    "PageCacheConfig",
    "USE_CONFIG",
]
