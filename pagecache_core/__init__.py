"""PageCache - Static Page Caching for Web Applications.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Writes the rendered output of a request to a static file so a front-end
web server can serve later identical requests without invoking the
application:
- Request path to file name mapping (extension inference, index pages,
  trailing-slash normalization, optional query-string variants)
- Static or per-request cache roots
- Optional gzip siblings for pre-compressed serving
- Best-effort expiration of pages and their variants
- Write/expire instrumentation

Architecture:
    ┌─────────────────────────────────────────────────────────────────┐
    │                        PageCache System                         │
    ├─────────────────────────────────────────────────────────────────┤
    │  ┌─────────────┐  ┌─────────────┐  ┌─────────────┐             │
    │  │ PageCaching │  │  Request    │  │  caching    │ INTEGRATION │
    │  │ cache/expire│  │  Context    │  │  allowed    │    LAYER    │
    │  └──────┬──────┘  └─────────────┘  └─────────────┘             │
    │         │                                                       │
    │  ┌──────┴────────────────────────────────────────┐             │
    │  │   PageCache  write / expire / variants         │   CACHE     │
    │  └──────┬────────────────┬──────────────┬────────┘   LAYER     │
    │         │                │              │                       │
    │  ┌──────┴──────┐  ┌──────┴──────┐  ┌────┴────────┐             │
    │  │ PathResolver│  │  FileStore  │  │  Metrics    │             │
    │  │ CacheRoot   │  │  plain+.gz  │  │  Collector  │             │
    │  └─────────────┘  └─────────────┘  └─────────────┘             │
    └─────────────────────────────────────────────────────────────────┘

Example Usage:
    from pagecache_core import PageCache, PageCacheConfig

    cache = PageCache(PageCacheConfig(cache_root="/var/www/public", compression="best"))
    cache.write(b"<h1>Lists</h1>", "/lists/show")
    cache.expire("/lists/show")

    # Partition the cache by host
    from pagecache_core import PageCaching, RequestContext

    cache = PageCache(PageCacheConfig(cache_root=lambda ctx: f"/var/cache/{ctx.host}"))
    context = RequestContext(method="GET", path="/about", host="example.com")
    PageCaching(cache, context).cache_page(b"<h1>About</h1>")
"""

__version__ = "1.0.0"
__author__ = "BlackRoad OS"

from pagecache_core.errors import (
    PageCacheError,
    ConfigurationError,
)
from pagecache_core.path.resolver import (
    DEFAULT_EXTENSION,
    PathResolver,
    cache_file,
    resolve,
)
from pagecache_core.path.root import (
    CacheRoot,
    StaticRoot,
    RequestBoundRoot,
    as_cache_root,
)
from pagecache_core.store.compression import (
    BEST_COMPRESSION,
    BEST_SPEED,
    DEFAULT_COMPRESSION,
    resolve_compression,
)
from pagecache_core.store.file import FileStore
from pagecache_core.cache.entry import CacheEntry, CacheKey
from pagecache_core.cache.cache import (
    PageCache,
    PageCacheConfig,
)
from pagecache_core.metrics.collector import (
    MetricsCollector,
    PageCacheMetrics,
    PageEvent,
)
from pagecache_core.integration.request import (
    RequestContext,
    caching_allowed,
)
from pagecache_core.integration.controller import PageCaching

__all__ = [
    # Errors
    "PageCacheError",
    "ConfigurationError",
    # Paths
    "DEFAULT_EXTENSION",
    "PathResolver",
    "cache_file",
    "resolve",
    "CacheRoot",
    "StaticRoot",
    "RequestBoundRoot",
    "as_cache_root",
    # Storage
    "BEST_COMPRESSION",
    "BEST_SPEED",
    "DEFAULT_COMPRESSION",
    "resolve_compression",
    "FileStore",
    # Cache
    "CacheEntry",
    "CacheKey",
    "PageCache",
    "PageCacheConfig",
    # Metrics
    "MetricsCollector",
    "PageCacheMetrics",
    "PageEvent",
    # Integration
    "RequestContext",
    "caching_allowed",
    "PageCaching",
]
