"""PageCache Controller - Request-Level Page Caching.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pagecache_core.cache.cache import USE_CONFIG, PageCache
from pagecache_core.cache.entry import CacheKey
from pagecache_core.integration.request import RequestContext

logger = logging.getLogger(__name__)

PageOptions = Union[str, Mapping[str, Any], None]


class PageCaching:
    """Caches and expires pages on behalf of a single request.

    A framework calls :meth:`cache_page` from whatever after-response hook
    it provides. Request-bound cache roots are resolved against the bound
    context.

    Example:
        caching = PageCaching(cache, RequestContext(method="GET", path="/posts/1"))
        caching.cache_page(response_body)

        caching.expire_page({"controller": "posts", "action": ["show", "index"], "id": 1})
    """

    def __init__(self, cache: PageCache, context: RequestContext):
        """Initialize request-level caching.

        Args:
            cache: Page cache
            context: Current request context
        """
        self.cache = cache
        self.context = context

    def cache_page(
        self,
        content: Union[bytes, str, None] = None,
        options: PageOptions = None,
        compression: Any = USE_CONFIG,
    ) -> Optional[Path]:
        """Cache the response of the current request.

        Args:
            content: Page content, or None for the response body
            options: Explicit path, route parameters, or None for the
                current request path
            compression: Per-call compression policy

        Returns:
            Written file path, or None if the response may not be cached
        """
        if not self.context.caching_allowed:
            logger.debug(
                f"Skipping page cache for {self.context.method} {self.context.path} "
                f"({self.context.status})"
            )
            return None

        if content is None:
            content = self.context.body
        if content is None:
            raise ValueError("No content given and the request context has no body")

        if isinstance(options, Mapping):
            path = self.context.url_for({**options, "format": self.context.format})
        elif isinstance(options, str):
            path = options
        else:
            path = self.context.path

        key = CacheKey(
            path=path,
            extension=self.context.extension,
            query_string=self.context.query_string or None,
        )
        return self.cache.write(content, key, compression=compression, context=self.context)

    def expire_page(self, options: PageOptions = None) -> int:
        """Expire a cached page.

        Args:
            options: Path, or route parameters. An ``action`` list expires
                one page per action. None expires the current request path.

        Returns:
            Number of files removed
        """
        if isinstance(options, Mapping):
            actions = options.get("action")
            if isinstance(actions, (list, tuple)):
                return sum(self.expire_page({**options, "action": action}) for action in actions)
            path = self.context.url_for(options)
        elif isinstance(options, str):
            path = options
        else:
            path = self.context.path

        return self.cache.expire(path, context=self.context)

    def __repr__(self) -> str:
        return f"PageCaching({self.context.method} {self.context.path})"


__all__ = ["PageCaching"]
