"""PageCache Entry - Cache Keys and On-Disk Entries.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

from pagecache_core.store.file import gzip_path


@dataclass(frozen=True)
class CacheKey:
    """Logical key of a cached page.

    Attributes:
        path: Logical request path, e.g. ``/posts/show``
        extension: Explicit extension such as ``.json``
        query_string: Raw query string, treated as an opaque literal
        include_query: Per-key query-string policy, None defers to config
    """

    path: str
    extension: Optional[str] = None
    query_string: Optional[str] = None
    include_query: Optional[bool] = None

    @classmethod
    def coerce(cls, key: Union["CacheKey", str, None]) -> "CacheKey":
        """Build a key from a string path, passing keys through."""
        if isinstance(key, CacheKey):
            return key
        return cls(path=key or "")

    def with_query(self, query_string: Optional[str]) -> "CacheKey":
        """Get the query-string variant of this key."""
        return replace(self, query_string=query_string, include_query=True)

    def without_query(self) -> "CacheKey":
        """Get the base variant of this key."""
        return replace(self, query_string=None, include_query=False)


@dataclass(frozen=True)
class CacheEntry:
    """The pair of files backing one cached page.

    Attributes:
        path: Plain file path
    """

    path: Path

    @property
    def gzip_path(self) -> Path:
        """Path of the gzip sibling."""
        return gzip_path(self.path)

    @property
    def exists(self) -> bool:
        """Check if the plain file exists."""
        return self.path.is_file()

    @property
    def compressed(self) -> bool:
        """Check if the gzip sibling exists."""
        return self.gzip_path.is_file()


__all__ = ["CacheKey", "CacheEntry"]
