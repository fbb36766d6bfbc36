"""Tests for cache path resolution.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import pytest

from pagecache_core.path.resolver import PathResolver, cache_file, join_root, resolve


class TestCacheFile:
    """Tests for cache file naming."""

    @pytest.mark.parametrize("path", ["", "/", "//", "///"])
    def test_index_for_empty_path(self, path):
        """Test empty and slash-only paths map to the index page."""
        assert cache_file(path) == "/index.html"

    def test_default_extension(self):
        """Test default extension is appended."""
        assert cache_file("/lists/show") == "/lists/show.html"

    @pytest.mark.parametrize("path", ["/posts", "/posts/show", "/a/b/c", "/posts.rss"])
    def test_trailing_slash_ignored(self, path):
        """Test a trailing slash resolves to the same file."""
        assert cache_file(path) == cache_file(path + "/")

    def test_strips_only_one_trailing_slash(self):
        """Test repeated trailing slashes are not collapsed."""
        assert cache_file("/x//") == "/x/.html"

    def test_existing_extension_kept(self):
        """Test paths with an extension are used as-is."""
        assert cache_file("/a/b.json") == "/a/b.json"
        assert cache_file("/a/b.json", extension=".xml") == "/a/b.json"

    def test_extension_override(self):
        """Test extension override."""
        assert cache_file("/posts", extension=".rss") == "/posts.rss"

    def test_custom_default_extension(self):
        """Test custom default extension."""
        assert cache_file("/posts", default_extension=".htm") == "/posts.htm"

    def test_dot_in_directory_only(self):
        """Test dots in directory names do not count as an extension."""
        assert cache_file("/v1.2/docs") == "/v1.2/docs.html"

    def test_percent_decoding(self):
        """Test percent-encoded characters are decoded."""
        assert cache_file("/caf%C3%A9") == "/café.html"
        assert cache_file("/a%20b/") == "/a b.html"

    def test_invalid_percent_sequence_passes_through(self):
        """Test undecodable sequences are kept literally."""
        assert cache_file("/a%zz") == "/a%zz.html"

    def test_invalid_utf8_bytes_stay_distinct(self):
        """Test undecodable bytes keep distinct paths apart."""
        assert cache_file("/caf%FF") != cache_file("/caf%FE")
        assert cache_file("/caf%FF").encode("utf-8", "surrogateescape") == b"/caf\xff.html"

    def test_extension_without_dot(self):
        """Test extensions are given a leading dot."""
        assert cache_file("/a/b", extension="json") == "/a/b.json"
        assert cache_file("/a/b", default_extension="htm") == "/a/b.htm"

    def test_query_string_appended_after_extension(self):
        """Test query string inclusion."""
        assert cache_file("/search", query_string="q=1", include_query=True) == "/search.html?q=1"
        assert cache_file("/a/b.json", query_string="x=1", include_query=True) == "/a/b.json?x=1"

    def test_query_string_ignored_when_disabled(self):
        """Test query string is ignored unless included."""
        assert cache_file("/search", query_string="q=1") == "/search.html"

    def test_empty_query_string(self):
        """Test empty query string adds nothing."""
        assert cache_file("/search", query_string="", include_query=True) == "/search.html"

    def test_query_string_is_opaque(self):
        """Test parameter order is preserved as given."""
        first = cache_file("/s", query_string="a=1&b=2", include_query=True)
        second = cache_file("/s", query_string="b=2&a=1", include_query=True)
        assert first != second


class TestResolve:
    """Tests for absolute path resolution."""

    def test_scenario_paths(self):
        """Test documented resolution examples."""
        assert resolve("/cache", "/lists/show") == "/cache/lists/show.html"
        assert resolve("/cache", "") == "/cache/index.html"
        assert resolve("/cache", "/a/b.json") == "/cache/a/b.json"

    def test_single_separator(self):
        """Test root trailing slash does not double the separator."""
        assert resolve("/cache/", "/x") == "/cache/x.html"
        assert resolve("/cache", "/x") == "/cache/x.html"
        assert join_root("/cache//", "//x.html") == "/cache/x.html"

    def test_empty_root(self):
        """Test empty root yields a rooted path."""
        assert resolve("", "/x") == "/x.html"


class TestPathResolver:
    """Tests for PathResolver."""

    def test_defaults(self):
        """Test configured defaults apply."""
        resolver = PathResolver(default_extension=".htm", include_query_string=True)

        assert resolver.resolve("/cache", "/p", query_string="a=1") == "/cache/p.htm?a=1"

    def test_per_call_override(self):
        """Test per-call query policy override."""
        resolver = PathResolver(include_query_string=True)

        assert resolver.resolve("/cache", "/p", query_string="a=1", include_query=False) == "/cache/p.html"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
