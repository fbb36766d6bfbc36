"""PageCache Compression - Gzip Level Policy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import gzip
from typing import Any, Dict, Optional

from pagecache_core.errors import ConfigurationError

BEST_SPEED = 1
DEFAULT_COMPRESSION = 6
BEST_COMPRESSION = 9

COMPRESSION_ALIASES: Dict[str, Optional[int]] = {
    "none": None,
    "no_compression": None,
    "fastest": BEST_SPEED,
    "best_speed": BEST_SPEED,
    "default": DEFAULT_COMPRESSION,
    "default_compression": DEFAULT_COMPRESSION,
    "best": BEST_COMPRESSION,
    "best_compression": BEST_COMPRESSION,
}


def resolve_compression(value: Any) -> Optional[int]:
    """Resolve a compression policy to a gzip level.

    Args:
        value: ``None``/``False`` for no compression, ``True`` for best,
            an integer level 0-9 or a named alias

    Returns:
        Gzip level 1-9, or None when no ``.gz`` sibling should be written

    Raises:
        ConfigurationError: On unknown aliases or out-of-range levels
    """
    if value is None or value is False:
        return None
    if value is True:
        return BEST_COMPRESSION

    if isinstance(value, str):
        alias = value.strip().lower()
        if alias not in COMPRESSION_ALIASES:
            raise ConfigurationError(f"Unknown compression policy: {value!r}")
        return COMPRESSION_ALIASES[alias]

    if isinstance(value, int):
        if not 0 <= value <= 9:
            raise ConfigurationError(f"Compression level must be between 0 and 9, got {value}")
        return value or None

    raise ConfigurationError(f"Unsupported compression policy: {value!r}")


def gzip_bytes(content: bytes, level: int) -> bytes:
    """Gzip-compress content at the given level.

    The header timestamp is zeroed so identical content produces identical
    files.
    """
    return gzip.compress(content, compresslevel=level, mtime=0)


__all__ = [
    "BEST_SPEED",
    "DEFAULT_COMPRESSION",
    "BEST_COMPRESSION",
    "COMPRESSION_ALIASES",
    "resolve_compression",
    "gzip_bytes",
]
