"""PageCache Metrics Collector - Write/Expire Instrumentation.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Deque, Dict, List, Optional

logger = logging.getLogger(__name__)

WRITE_PAGE = "write_page"
EXPIRE_PAGE = "expire_page"


@dataclass
class PageEvent:
    """An instrumented page cache operation.

    Attributes:
        name: Event name (``write_page`` or ``expire_page``)
        path: Logical request path
        file: Resolved cache file
        duration_ms: Operation duration
        size_bytes: Bytes written
        error: Error message if the operation failed
        timestamp: When recorded
    """

    name: str
    path: str
    file: Optional[str] = None
    duration_ms: float = 0.0
    size_bytes: int = 0
    error: Optional[str] = None
    timestamp: float = field(default_factory=time.time)


@dataclass
class PageCacheMetrics:
    """Page cache metrics container.

    Attributes:
        writes: Pages written
        compressed_writes: Pages written with a gzip sibling
        expires: Expire operations
        files_removed: Files deleted by expire operations
        errors: Failed operations
        bytes_written: Bytes written across plain and gzip files
        latency_avg_ms: Average operation latency
    """

    writes: int = 0
    compressed_writes: int = 0
    expires: int = 0
    files_removed: int = 0
    errors: int = 0
    bytes_written: int = 0
    latency_avg_ms: float = 0.0

    @property
    def total_ops(self) -> int:
        """Get total operations."""
        return self.writes + self.expires

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Metrics dictionary
        """
        return {
            "writes": self.writes,
            "compressed_writes": self.compressed_writes,
            "expires": self.expires,
            "files_removed": self.files_removed,
            "errors": self.errors,
            "bytes_written": self.bytes_written,
            "latency_avg_ms": self.latency_avg_ms,
            "total_ops": self.total_ops,
        }


class MetricsCollector:
    """Collects page cache events.

    Subscribers receive every :class:`PageEvent`, which is how a framework
    integration hooks its own instrumentation into page writes and expires.

    Example:
        collector = MetricsCollector()
        collector.subscribe(lambda event: print(event.name, event.path))

        cache = PageCache(config, metrics=collector)
        cache.write(b"<html>", "/posts")

        print(collector.get_metrics().writes)
    """

    def __init__(self, history_size: int = 1000):
        """Initialize collector.

        Args:
            history_size: Number of recent events to keep
        """
        self.history_size = history_size
        self._metrics = PageCacheMetrics()
        self._events: Deque[PageEvent] = deque(maxlen=history_size)
        self._subscribers: List[Callable[[PageEvent], None]] = []
        self._total_latency_ms = 0.0
        self._lock = threading.Lock()

    def subscribe(self, callback: Callable[[PageEvent], None]) -> None:
        """Register an event subscriber."""
        with self._lock:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Callable[[PageEvent], None]) -> bool:
        """Remove an event subscriber.

        Returns:
            True if the subscriber was registered
        """
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                return False
            return True

    def record_write(
        self,
        path: str,
        file: str,
        size_bytes: int,
        duration_ms: float,
        compressed: bool = False,
    ) -> PageEvent:
        """Record a page write."""
        event = PageEvent(
            name=WRITE_PAGE,
            path=path,
            file=file,
            duration_ms=duration_ms,
            size_bytes=size_bytes,
        )
        with self._lock:
            self._metrics.writes += 1
            if compressed:
                self._metrics.compressed_writes += 1
            self._metrics.bytes_written += size_bytes
            self._add_latency(duration_ms)
            self._events.append(event)

        self._publish(event)
        return event

    def record_expire(
        self,
        path: str,
        file: str,
        removed: int,
        duration_ms: float,
    ) -> PageEvent:
        """Record a page expire."""
        event = PageEvent(name=EXPIRE_PAGE, path=path, file=file, duration_ms=duration_ms)
        with self._lock:
            self._metrics.expires += 1
            self._metrics.files_removed += removed
            self._add_latency(duration_ms)
            self._events.append(event)

        self._publish(event)
        return event

    def record_error(self, name: str, path: str, error: BaseException) -> PageEvent:
        """Record a failed operation."""
        event = PageEvent(name=name, path=path, error=str(error))
        with self._lock:
            self._metrics.errors += 1
            self._events.append(event)

        self._publish(event)
        return event

    def get_metrics(self) -> PageCacheMetrics:
        """Get a snapshot of current metrics.

        Returns:
            PageCacheMetrics instance
        """
        with self._lock:
            return PageCacheMetrics(**vars(self._metrics))

    def recent_events(self, limit: Optional[int] = None) -> List[PageEvent]:
        """Get recent events, oldest first."""
        with self._lock:
            events = list(self._events)
        if limit is not None:
            events = events[-limit:]
        return events

    def reset(self) -> None:
        """Reset all metrics and history."""
        with self._lock:
            self._metrics = PageCacheMetrics()
            self._events.clear()
            self._total_latency_ms = 0.0

    def _add_latency(self, duration_ms: float) -> None:
        self._total_latency_ms += duration_ms
        self._metrics.latency_avg_ms = self._total_latency_ms / self._metrics.total_ops

    def _publish(self, event: PageEvent) -> None:
        with self._lock:
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(event)
            except Exception as e:
                logger.error(f"Page cache subscriber failed on {event.name}: {e}")


__all__ = [
    "MetricsCollector",
    "PageCacheMetrics",
    "PageEvent",
    "WRITE_PAGE",
    "EXPIRE_PAGE",
]
