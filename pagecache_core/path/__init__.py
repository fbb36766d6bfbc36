"""Path module - Cache file path resolution."""

from pagecache_core.path.resolver import (
    DEFAULT_EXTENSION,
    PathResolver,
    cache_file,
    join_root,
    resolve,
)
from pagecache_core.path.root import (
    CacheRoot,
    StaticRoot,
    RequestBoundRoot,
    as_cache_root,
)

__all__ = [
    "DEFAULT_EXTENSION",
    "PathResolver",
    "cache_file",
    "join_root",
    "resolve",
    "CacheRoot",
    "StaticRoot",
    "RequestBoundRoot",
    "as_cache_root",
]
