"""Tests for request-level page caching.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

import pytest

from pagecache_core.cache.cache import PageCache, PageCacheConfig
from pagecache_core.errors import ConfigurationError
from pagecache_core.integration.controller import PageCaching
from pagecache_core.integration.request import RequestContext, caching_allowed


def route(options):
    path = f"/{options['controller']}/{options['action']}"
    if options.get("id") is not None:
        path += f"/{options['id']}"
    if options.get("format"):
        path += f".{options['format']}"
    return path


class TestCachingAllowed:
    """Tests for the caching predicate."""

    @pytest.mark.parametrize(
        "method,status,expected",
        [
            ("GET", 200, True),
            ("HEAD", 200, True),
            ("get", 200, True),
            ("POST", 200, False),
            ("PUT", 200, False),
            ("DELETE", 200, False),
            ("GET", 404, False),
            ("GET", 500, False),
            ("GET", 304, False),
            ("HEAD", 201, False),
        ],
    )
    def test_predicate(self, method, status, expected):
        """Test only successful GET and HEAD requests are cacheable."""
        assert caching_allowed(method, status) is expected

    def test_context_property(self):
        """Test context exposes the predicate."""
        assert RequestContext(method="HEAD", status=200).caching_allowed
        assert not RequestContext(method="POST", status=200).caching_allowed


class TestPageCaching:
    """Tests for PageCaching."""

    def test_cache_current_path(self, tmp_path):
        """Test the request path is used by default."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))
        context = RequestContext(method="GET", path="/page_caching_test/ok", body=b"ok")

        PageCaching(cache, context).cache_page()

        assert (tmp_path / "page_caching_test" / "ok.html").read_bytes() == b"ok"

    def test_trailing_slash(self, tmp_path):
        """Test trailing slash is dropped from the cached file."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))
        context = RequestContext(path="/trailing_slash/")

        PageCaching(cache, context).cache_page(b"cached content")

        assert (tmp_path / "trailing_slash.html").read_bytes() == b"cached content"

    def test_format_extension(self, tmp_path):
        """Test response format picks the extension."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))
        context = RequestContext(path="/about_me", format="xml")

        PageCaching(cache, context).cache_page(b"I am xml")

        assert (tmp_path / "about_me.xml").read_bytes() == b"I am xml"

    @pytest.mark.parametrize("method,status", [("POST", 200), ("GET", 404), ("GET", 500)])
    def test_not_cached(self, tmp_path, method, status):
        """Test non-cacheable responses are skipped."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))
        context = RequestContext(method=method, status=status, path="/x")

        assert PageCaching(cache, context).cache_page(b"x") is None
        assert list(tmp_path.iterdir()) == []

    def test_custom_path(self, tmp_path):
        """Test explicit string path."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))
        caching = PageCaching(cache, RequestContext(path="/somewhere"))

        caching.cache_page(b"custom_path", "/index.html")
        assert (tmp_path / "index.html").read_bytes() == b"custom_path"

        caching.expire_page("/index.html")
        assert not (tmp_path / "index.html").exists()

    def test_route_options(self, tmp_path):
        """Test route parameters are rendered through the url builder."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))
        context = RequestContext(path="/", url_builder=route)

        PageCaching(cache, context).cache_page(b"list", {"controller": "lists", "action": "show", "id": 5})

        assert (tmp_path / "lists" / "show" / "5.html").read_bytes() == b"list"

    def test_expire_action_list(self, tmp_path):
        """Test an action list expires each page."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path), compression="best"))
        cache.write(b"a", "/posts/show")
        cache.write(b"b", "/posts/index")
        caching = PageCaching(cache, RequestContext(url_builder=route))

        removed = caching.expire_page({"controller": "posts", "action": ["show", "index"]})

        assert removed == 4
        assert not cache.exists("/posts/show")
        assert not cache.exists("/posts/index")

    def test_expire_current_path(self, tmp_path):
        """Test expiring without options uses the request path."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))
        cache.write(b"x", "/current")

        assert PageCaching(cache, RequestContext(path="/current")).expire_page() == 1

    def test_query_string_variant(self, tmp_path):
        """Test request query string is part of the key when enabled."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path), include_query_string=True))
        context = RequestContext(path="/search", query_string="q=cats")

        path = PageCaching(cache, context).cache_page(b"cats")

        assert path == tmp_path / "search.html?q=cats"

    def test_missing_content(self, tmp_path):
        """Test missing content and body is an error."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))

        with pytest.raises(ValueError):
            PageCaching(cache, RequestContext(path="/x")).cache_page()

    def test_missing_url_builder(self, tmp_path):
        """Test route parameters need a url builder."""
        cache = PageCache(PageCacheConfig(cache_root=str(tmp_path)))

        with pytest.raises(LookupError):
            PageCaching(cache, RequestContext()).cache_page(b"x", {"action": "show"})


class TestDomainPartitioning:
    """Tests for host-partitioned caches."""

    def test_page_is_cached_by_domain(self, tmp_path):
        """Test each host gets its own directory."""
        cache = PageCache(PageCacheConfig(cache_root=lambda ctx: tmp_path / ctx.host))

        for host in ("foo.com", "bar.com"):
            context = RequestContext(path="/ok", host=host)
            caching = PageCaching(cache, context)

            caching.cache_page(host.encode())
            assert (tmp_path / host / "ok.html").read_bytes() == host.encode()

            caching.expire_page()
            assert not (tmp_path / host / "ok.html").exists()

    def test_attribute_root(self, tmp_path):
        """Test root read from a context attribute."""
        from pagecache_core.path.root import RequestBoundRoot

        cache = PageCache(PageCacheConfig(cache_root=RequestBoundRoot.from_attribute("host")))
        context = RequestContext(path="/ok", host=str(tmp_path / "tenant"))

        PageCaching(cache, context).cache_page(b"ok")

        assert (tmp_path / "tenant" / "ok.html").exists()

    def test_request_free_write_raises(self, tmp_path):
        """Test writing outside a request fails for dynamic roots."""
        cache = PageCache(PageCacheConfig(cache_root=lambda ctx: tmp_path / ctx.host))

        with pytest.raises(ConfigurationError, match="request context"):
            cache.write(b"x", "/ok")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
