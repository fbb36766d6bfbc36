"""PageCache Cache - Page Cache Store.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from pagecache_core.cache.entry import CacheEntry, CacheKey
from pagecache_core.metrics.collector import EXPIRE_PAGE, WRITE_PAGE, MetricsCollector
from pagecache_core.path.resolver import DEFAULT_EXTENSION, PathResolver, dotted
from pagecache_core.path.root import CacheRoot, as_cache_root
from pagecache_core.store.compression import resolve_compression
from pagecache_core.store.file import FileStore

logger = logging.getLogger(__name__)

KeyLike = Union[CacheKey, str]

# Marks "use the configured compression" so None can mean "no compression"
USE_CONFIG: Any = object()


@dataclass
class PageCacheConfig:
    """Page cache configuration.

    Attributes:
        cache_root: Static directory, callable taking the request context,
            or a CacheRoot. Should be the document root of the web server.
        default_extension: Extension appended to extension-less paths
        compression: Default gzip policy (None, level 0-9, True or alias)
        include_query_string: Cache query-string variants separately
        perform_caching: Master switch; writes and expires are no-ops when off
        name: Cache name for logging
    """

    cache_root: Any = ""
    default_extension: str = DEFAULT_EXTENSION
    compression: Any = None
    include_query_string: bool = False
    perform_caching: bool = True
    name: str = "pagecache"

    def __post_init__(self):
        """Normalize and validate settings."""
        self.cache_root = as_cache_root(self.cache_root)
        self.default_extension = dotted(self.default_extension)
        # Fail at configuration time rather than on the first write
        resolve_compression(self.compression)

    @property
    def dynamic_root(self) -> bool:
        """Check if the cache root depends on the request."""
        return self.cache_root.requires_context


class PageCache:
    """Writes rendered pages to static files a web server can serve.

    Each page is stored at ``{root}/{path}{ext}[?{query}]`` with an optional
    gzip sibling ``{file}.gz``. Pages live until expired or overwritten.

    Filesystem errors are logged and re-raised; caching is advisory and the
    caller decides whether a failed write matters.

    Example:
        cache = PageCache(PageCacheConfig(cache_root="/var/www/public", compression="best"))

        cache.write(b"<h1>Lists</h1>", "/lists/show")
        # /var/www/public/lists/show.html and /var/www/public/lists/show.html.gz

        cache.expire("/lists/show")

        # Partition by host
        cache = PageCache(PageCacheConfig(cache_root=lambda ctx: f"/var/cache/{ctx.host}"))
        cache.write(b"...", "/about", context=request_context)
    """

    def __init__(
        self,
        config: Optional[PageCacheConfig] = None,
        metrics: Optional[MetricsCollector] = None,
        files: Optional[FileStore] = None,
    ):
        """Initialize page cache.

        Args:
            config: Page cache configuration
            metrics: Metrics collector
            files: File store
        """
        self.config = config or PageCacheConfig()
        self.metrics = metrics or MetricsCollector()
        self._files = files or FileStore()

    @property
    def cache_root(self) -> CacheRoot:
        """Get the configured cache root."""
        return self.config.cache_root

    def path_for(self, key: KeyLike, context: Optional[Any] = None) -> Path:
        """Resolve the plain cache file for a key.

        Args:
            key: Cache key or request path
            context: Request context, required for dynamic roots

        Returns:
            Cache file path

        Raises:
            ConfigurationError: If the root needs a context and none is given
        """
        key = CacheKey.coerce(key)
        root = self.config.cache_root.resolve(context)
        resolver = PathResolver(
            default_extension=self.config.default_extension,
            include_query_string=self.config.include_query_string,
        )
        return Path(
            resolver.resolve(
                root,
                key.path,
                extension=key.extension,
                query_string=key.query_string,
                include_query=key.include_query,
            )
        )

    def entry(self, key: KeyLike, context: Optional[Any] = None) -> CacheEntry:
        """Get the on-disk entry for a key."""
        return CacheEntry(self.path_for(key, context))

    def write(
        self,
        content: Union[bytes, str],
        key: KeyLike,
        compression: Any = USE_CONFIG,
        context: Optional[Any] = None,
    ) -> Optional[Path]:
        """Write a page to the cache.

        Missing directories are created. An existing page at the same path
        is replaced. When compression resolves to a level, a gzip copy is
        written next to the page.

        Args:
            content: Rendered page, str is encoded as UTF-8
            key: Cache key or request path
            compression: Per-call compression policy
            context: Request context, required for dynamic roots

        Returns:
            Plain file path, or None when caching is disabled

        Raises:
            ConfigurationError: On a dynamic root without context or an
                invalid compression policy
            OSError: On filesystem failure
        """
        if not self.config.perform_caching:
            return None

        key = CacheKey.coerce(key)
        if compression is USE_CONFIG:
            compression = self.config.compression
        level = resolve_compression(compression)
        path = self.path_for(key, context)

        if isinstance(content, str):
            content = content.encode("utf-8")

        start = time.perf_counter()
        try:
            written = self._files.write(path, bytes(content), level)
        except OSError as e:
            logger.error(f"Error writing page {key.path} to {path}: {e}")
            self.metrics.record_error(WRITE_PAGE, key.path, e)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Write page {path} ({duration_ms:.1f}ms)")
        self.metrics.record_write(
            key.path,
            str(path),
            written,
            duration_ms,
            compressed=level is not None,
        )
        return path

    def expire(self, key: KeyLike, context: Optional[Any] = None) -> int:
        """Delete a page and its gzip sibling.

        Missing files are not an error, so expiring twice is safe.

        Args:
            key: Cache key or request path
            context: Request context, required for dynamic roots

        Returns:
            Number of files removed
        """
        if not self.config.perform_caching:
            return 0

        key = CacheKey.coerce(key)
        path = self.path_for(key, context)

        start = time.perf_counter()
        try:
            removed = self._files.delete(path)
        except OSError as e:
            logger.error(f"Error expiring page {key.path} at {path}: {e}")
            self.metrics.record_error(EXPIRE_PAGE, key.path, e)
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(f"Expire page {path} ({duration_ms:.1f}ms)")
        self.metrics.record_expire(key.path, str(path), removed, duration_ms)
        return removed

    def expire_all_variants(
        self,
        key: KeyLike,
        query_strings: Iterable[str],
        context: Optional[Any] = None,
    ) -> int:
        """Expire the base page and each of its query-string variants.

        The cache does not track which variants were written; the caller
        supplies them.

        Args:
            key: Cache key or request path
            query_strings: Query strings of previously cached variants
            context: Request context, required for dynamic roots

        Returns:
            Number of files removed
        """
        key = CacheKey.coerce(key)
        removed = self.expire(key.without_query(), context)
        for query_string in query_strings:
            if query_string:
                removed += self.expire(key.with_query(query_string), context)
        return removed

    def exists(self, key: KeyLike, context: Optional[Any] = None) -> bool:
        """Check if a page is cached."""
        return self._files.exists(self.path_for(key, context))

    def read(
        self,
        key: KeyLike,
        context: Optional[Any] = None,
        compressed: bool = False,
    ) -> Optional[bytes]:
        """Read a cached page.

        Args:
            key: Cache key or request path
            context: Request context, required for dynamic roots
            compressed: Read the gzip sibling instead of the plain file

        Returns:
            File content or None if not cached
        """
        entry = self.entry(key, context)
        return self._files.read(entry.gzip_path if compressed else entry.path)

    def __repr__(self) -> str:
        return f"PageCache(name={self.config.name!r}, root={self.config.cache_root!r})"


__all__ = ["PageCache", "PageCacheConfig", "USE_CONFIG"]
