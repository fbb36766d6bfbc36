"""PageCache Request - Request Context for Framework Integrations.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Union

CACHEABLE_METHODS = frozenset({"GET", "HEAD"})


def caching_allowed(method: str, status: int) -> bool:
    """Check if a response may be page cached.

    Only successful GET and HEAD requests are cached.

    Args:
        method: HTTP request method
        status: HTTP response status

    Returns:
        True if the response may be cached
    """
    return (method or "").upper() in CACHEABLE_METHODS and status == 200


@dataclass
class RequestContext:
    """Per-request data a framework hands to the page cache.

    Attributes:
        method: HTTP request method
        path: Request path
        status: Response status
        query_string: Raw query string
        format: Response format symbol, e.g. ``json``
        host: Request host, handy for partitioning the cache root
        params: Route parameters of the current request
        url_builder: Renders a path from route parameters
        body: Rendered response body
    """

    method: str = "GET"
    path: str = "/"
    status: int = 200
    query_string: str = ""
    format: Optional[str] = None
    host: Optional[str] = None
    params: Dict[str, Any] = field(default_factory=dict)
    url_builder: Optional[Callable[[Mapping[str, Any]], str]] = None
    body: Union[bytes, str, None] = None

    @property
    def caching_allowed(self) -> bool:
        """Check if the current response may be cached."""
        return caching_allowed(self.method, self.status)

    @property
    def extension(self) -> Optional[str]:
        """Get the file extension of the response format."""
        if not self.format:
            return None
        return f".{self.format.lstrip('.')}"

    def url_for(self, options: Mapping[str, Any]) -> str:
        """Render a request path from route parameters.

        Raises:
            LookupError: If no url builder was provided
        """
        if self.url_builder is None:
            raise LookupError("RequestContext has no url_builder to render route parameters")
        return self.url_builder(options)


__all__ = ["CACHEABLE_METHODS", "RequestContext", "caching_allowed"]
