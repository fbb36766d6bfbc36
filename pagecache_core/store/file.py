"""PageCache File Store - Paired Plain/Gzip File Storage.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pagecache_core.store.compression import gzip_bytes

logger = logging.getLogger(__name__)

GZIP_SUFFIX = ".gz"


def gzip_path(path: Path) -> Path:
    """Get the ``.gz`` sibling of a cache file."""
    return path.with_name(path.name + GZIP_SUFFIX)


class FileStore:
    """Writes and deletes cache files on disk.

    Every cached page is a plain file with an optional gzip sibling at
    ``{path}.gz``. Files are written to a temporary name in the target
    directory and moved into place, so readers see either the old file or
    the new one. The two files are written independently.

    The store holds no state between calls and takes no locks; concurrent
    writers to the same path race and the last one wins.

    Example:
        store = FileStore()
        store.write(Path("/var/www/posts.html"), b"<html>", level=9)
        store.delete(Path("/var/www/posts.html"))
    """

    def write(self, path: Path, content: bytes, level: Optional[int] = None) -> int:
        """Write a page and, when a level is given, its gzip sibling.

        Args:
            path: Plain file path
            content: Page content
            level: Gzip level, or None to skip the sibling

        Returns:
            Number of bytes written across both files

        Raises:
            OSError: On any filesystem failure
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        written = self._atomic_write(path, content)
        if level is not None:
            written += self._atomic_write(gzip_path(path), gzip_bytes(content, level))
        return written

    def delete(self, path: Path) -> int:
        """Delete a page and its gzip sibling.

        Missing files are ignored.

        Args:
            path: Plain file path

        Returns:
            Number of files removed
        """
        removed = 0
        for target in (path, gzip_path(path)):
            try:
                target.unlink()
            except FileNotFoundError:
                continue
            logger.debug(f"Removed {target}")
            removed += 1
        return removed

    def read(self, path: Path) -> Optional[bytes]:
        """Read a cache file.

        Args:
            path: File path

        Returns:
            File content or None if missing
        """
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None

    def exists(self, path: Path) -> bool:
        """Check if a cache file exists."""
        return path.is_file()

    def _atomic_write(self, path: Path, data: bytes) -> int:
        """Write data to a temp file in the same directory, then rename."""
        fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            # mkstemp creates owner-only files
            os.chmod(temp_name, 0o644)
            os.replace(temp_name, path)
        except BaseException:
            try:
                os.unlink(temp_name)
            except FileNotFoundError:
                pass
            raise
        return len(data)

    def __repr__(self) -> str:
        return "FileStore()"


__all__ = ["FileStore", "GZIP_SUFFIX", "gzip_path"]
