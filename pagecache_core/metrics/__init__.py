"""Metrics module - Page cache instrumentation."""

from pagecache_core.metrics.collector import (
    MetricsCollector,
    PageCacheMetrics,
    PageEvent,
    WRITE_PAGE,
    EXPIRE_PAGE,
)

__all__ = [
    "MetricsCollector",
    "PageCacheMetrics",
    "PageEvent",
    "WRITE_PAGE",
    "EXPIRE_PAGE",
]
