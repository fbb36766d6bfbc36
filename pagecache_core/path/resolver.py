"""PageCache Resolver - Request Path to Cache File Mapping.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Maps a logical request path to the file a front-end web server will look
up, e.g. ``/posts/show`` -> ``{root}/posts/show.html``. Resolution never
fails: malformed input degrades to best-effort file names.
"""

from __future__ import annotations

import posixpath
from typing import Optional
from urllib.parse import unquote

DEFAULT_EXTENSION = ".html"
INDEX_NAME = "/index"


def dotted(extension: str) -> str:
    """Ensure a non-empty extension starts with a dot."""
    if extension and not extension.startswith("."):
        return f".{extension}"
    return extension


def cache_file(
    path: str,
    extension: Optional[str] = None,
    query_string: Optional[str] = None,
    include_query: bool = False,
    default_extension: str = DEFAULT_EXTENSION,
) -> str:
    """Build the cache file name relative to the cache root.

    Args:
        path: Logical request path
        extension: Extension override, used when the path has none
        query_string: Raw query string of the request
        include_query: Append the query string to the file name
        default_extension: Extension used when no override is given

    Returns:
        Relative file path starting with ``/``
    """
    if not path or not path.strip("/"):
        name = INDEX_NAME
    else:
        # Undecodable bytes survive as surrogates and are written back as-is
        name = unquote(path, errors="surrogateescape")
        if name.endswith("/"):
            name = name[:-1]

    _, ext = posixpath.splitext(name)
    if not ext:
        name += dotted(extension or default_extension)

    if include_query and query_string:
        name += f"?{query_string}"

    return name


def join_root(root: str, name: str) -> str:
    """Join root and file name with a single separator.

    Args:
        root: Cache root directory
        name: Relative file name

    Returns:
        Joined path
    """
    return f"{root.rstrip('/')}/{name.lstrip('/')}"


def resolve(
    root: str,
    path: str,
    extension: Optional[str] = None,
    query_string: Optional[str] = None,
    include_query: bool = False,
    default_extension: str = DEFAULT_EXTENSION,
) -> str:
    """Resolve the absolute cache file path for a request path.

    Example:
        resolve("/cache", "/lists/show")        # "/cache/lists/show.html"
        resolve("/cache/", "")                  # "/cache/index.html"
        resolve("/cache", "/a/b.json")          # "/cache/a/b.json"
        resolve("/cache", "/s", query_string="q=1", include_query=True)
        # "/cache/s.html?q=1"
    """
    name = cache_file(
        path,
        extension=extension,
        query_string=query_string,
        include_query=include_query,
        default_extension=default_extension,
    )
    return join_root(root, name)


class PathResolver:
    """Resolver bound to a default extension and query-string policy.

    Example:
        resolver = PathResolver(default_extension=".html")
        resolver.resolve("/cache", "/posts/")  # "/cache/posts.html"
    """

    def __init__(
        self,
        default_extension: str = DEFAULT_EXTENSION,
        include_query_string: bool = False,
    ):
        self.default_extension = default_extension
        self.include_query_string = include_query_string

    def resolve(
        self,
        root: str,
        path: str,
        extension: Optional[str] = None,
        query_string: Optional[str] = None,
        include_query: Optional[bool] = None,
    ) -> str:
        if include_query is None:
            include_query = self.include_query_string
        return resolve(
            root,
            path,
            extension=extension,
            query_string=query_string,
            include_query=include_query,
            default_extension=self.default_extension,
        )

    def __repr__(self) -> str:
        return (
            f"PathResolver(default_extension={self.default_extension!r}, "
            f"include_query_string={self.include_query_string})"
        )


__all__ = [
    "DEFAULT_EXTENSION",
    "PathResolver",
    "cache_file",
    "dotted",
    "join_root",
    "resolve",
]
