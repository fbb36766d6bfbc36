"""PageCache Root - Cache Directory Resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

from pagecache_core.errors import ConfigurationError

DYNAMIC_ROOT_MESSAGE = (
    "Dynamic cache root used without a request context.\n\n"
    "The cache root was configured as a callable which needs to be evaluated "
    "within the context of a request. To write or expire pages outside of a "
    "request (background jobs, startup code) configure a static cache root "
    "and pass a per-request root to the request-level helpers instead."
)


class CacheRoot(ABC):
    """Base directory under which cached pages are written.

    A root is either static or bound to the current request. Both are
    evaluated through :meth:`resolve`.
    """

    @property
    @abstractmethod
    def requires_context(self) -> bool:
        """Whether resolution needs a request context."""
        pass

    @abstractmethod
    def resolve(self, context: Optional[Any] = None) -> str:
        """Resolve the root directory.

        Args:
            context: Current request context, if any

        Returns:
            Root directory as a string
        """
        pass


class StaticRoot(CacheRoot):
    """Fixed cache directory.

    Example:
        root = StaticRoot("/var/www/public")
        root.resolve()  # "/var/www/public"
    """

    def __init__(self, path: Union[str, os.PathLike]):
        self.path = os.fspath(path)

    @property
    def requires_context(self) -> bool:
        return False

    def resolve(self, context: Optional[Any] = None) -> str:
        return self.path

    def __eq__(self, other: object) -> bool:
        return isinstance(other, StaticRoot) and other.path == self.path

    def __repr__(self) -> str:
        return f"StaticRoot({self.path!r})"


class RequestBoundRoot(CacheRoot):
    """Cache directory computed from the current request.

    The function is invoked on every resolution, which allows partitioning
    the cache by hostname or tenant.

    Example:
        root = RequestBoundRoot(lambda ctx: f"/var/cache/{ctx.host}")
        root.resolve(context)
    """

    def __init__(self, func: Callable[[Any], Union[str, os.PathLike]], name: Optional[str] = None):
        self.func = func
        self.name = name or getattr(func, "__qualname__", repr(func))

    @classmethod
    def from_attribute(cls, attribute: str) -> "RequestBoundRoot":
        """Build a root read from an attribute of the request context.

        Zero-argument methods are called.

        Args:
            attribute: Attribute name on the context

        Returns:
            RequestBoundRoot instance
        """
        def read_attribute(context: Any) -> Any:
            value = getattr(context, attribute)
            return value() if callable(value) else value

        return cls(read_attribute, name=attribute)

    @property
    def requires_context(self) -> bool:
        return True

    def resolve(self, context: Optional[Any] = None) -> str:
        if context is None:
            raise ConfigurationError(DYNAMIC_ROOT_MESSAGE)
        return os.fspath(self.func(context))

    def __repr__(self) -> str:
        return f"RequestBoundRoot({self.name})"


def as_cache_root(value: Any) -> CacheRoot:
    """Coerce a configuration value to a :class:`CacheRoot`.

    Args:
        value: CacheRoot, path-like or callable taking the request context

    Returns:
        CacheRoot instance

    Raises:
        ConfigurationError: If the value cannot be used as a cache root
    """
    if isinstance(value, CacheRoot):
        return value
    if value is None:
        return StaticRoot("")
    if isinstance(value, (str, os.PathLike)):
        return StaticRoot(value)
    if callable(value):
        return RequestBoundRoot(value)
    raise ConfigurationError(f"Unsupported cache root: {value!r}")


__all__ = [
    "CacheRoot",
    "StaticRoot",
    "RequestBoundRoot",
    "as_cache_root",
]
