"""Store module - Cache file storage on disk."""

from pagecache_core.store.compression import (
    BEST_COMPRESSION,
    BEST_SPEED,
    DEFAULT_COMPRESSION,
    resolve_compression,
)
from pagecache_core.store.file import FileStore, GZIP_SUFFIX, gzip_path

__all__ = [
    "BEST_COMPRESSION",
    "BEST_SPEED",
    "DEFAULT_COMPRESSION",
    "resolve_compression",
    "FileStore",
    "GZIP_SUFFIX",
    "gzip_path",
]
