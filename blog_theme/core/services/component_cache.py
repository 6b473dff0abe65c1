"""
Component render cache.

Memoizes rendered component trees keyed by a namespace and a hash of the
component's derived props.

Key behaviors:
- Keys are "<namespace>-<md5 of canonical JSON props>"; mapping order counts
- Optional LRU bound (max_entries) and optional TTL (ttl_seconds)
- With no bound and no TTL, entries live until invalidated or cleared
- Namespace-wide invalidation for config/theme changes
"""

from __future__ import annotations

import dataclasses
import hashlib
import json
import logging
import threading
from collections import OrderedDict
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Generic, TypeVar

from blog_theme.adapters.clock import SystemClock
from blog_theme.ports.clock import ClockPort

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P")


# --- Key Derivation ---


def _to_jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if hasattr(value, "model_dump"):
        return _to_jsonable(value.model_dump())
    if isinstance(value, Mapping):
        return {str(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def compute_cache_key(namespace: str, props: Any) -> str:
    """
    Derive a cache key from a namespace and props.

    Identical props (including mapping order) always give the same key.
    """
    payload = json.dumps(
        _to_jsonable(props), separators=(",", ":"), ensure_ascii=False, default=str
    )
    digest = hashlib.md5(payload.encode("utf-8")).hexdigest()
    return f"{namespace}-{digest}"


# --- Cache ---


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of cache counters."""

    hits: int
    misses: int
    evictions: int
    size: int


@dataclass
class _Entry(Generic[T]):
    value: T
    stored_at: datetime


class ComponentCache(Generic[T]):
    """
    Keyed render cache with optional LRU and TTL policies.

    Thread-safe; renders run outside the lock.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        ttl_seconds: float | None = None,
        clock: ClockPort | None = None,
    ) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        if ttl_seconds is not None and ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")

        self._max_entries = max_entries
        self._ttl_seconds = ttl_seconds
        self._clock: ClockPort = clock or SystemClock()
        self._entries: OrderedDict[str, _Entry[T]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    def _is_expired(self, entry: _Entry[T]) -> bool:
        if self._ttl_seconds is None:
            return False
        age = (self._clock.now() - entry.stored_at).total_seconds()
        return age >= self._ttl_seconds

    def get(self, key: str) -> T | None:
        """Get a cached value, or None on miss/expiry."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                logger.debug("Render cache miss: %s", key)
                return None
            if self._is_expired(entry):
                del self._entries[key]
                self._misses += 1
                logger.debug("Render cache expired: %s", key)
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            logger.debug("Render cache hit: %s", key)
            return entry.value

    def put(self, key: str, value: T) -> None:
        """Store a value, evicting least recently used entries if bounded."""
        with self._lock:
            self._entries[key] = _Entry(value=value, stored_at=self._clock.now())
            self._entries.move_to_end(key)
            if self._max_entries is not None:
                while len(self._entries) > self._max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    self._evictions += 1
                    logger.debug("Render cache evicted: %s", evicted)

    def get_or_render(self, key: str, render: Callable[[], T]) -> T:
        """Return the cached value for key, rendering and storing it on a miss."""
        cached = self.get(key)
        if cached is not None:
            return cached
        value = render()
        self.put(key, value)
        return value

    def invalidate(self, key: str) -> bool:
        """Drop a single key. Returns True if it was present."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def invalidate_namespace(self, namespace: str) -> int:
        """Drop every key in a namespace. Returns the number removed."""
        prefix = f"{namespace}-"
        with self._lock:
            doomed = [key for key in self._entries if key.startswith(prefix)]
            for key in doomed:
                del self._entries[key]
        if doomed:
            logger.info("Invalidated %d render cache entries in %s", len(doomed), namespace)
        return len(doomed)

    def clear(self) -> int:
        """Drop every entry. Returns the number removed."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    @property
    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                size=len(self._entries),
            )


# Process-wide cache used when none is injected
default_cache: ComponentCache[Any] = ComponentCache()


# --- Component Wrapper ---


def cache_component(
    component: Callable[[P], T],
    namespace: str,
    props_mapper: Callable[..., P | None],
    cache: ComponentCache[Any] | None = None,
) -> Callable[..., T | None]:
    """
    Wrap a component so renders are memoized by derived props.

    props_mapper receives the wrapper's keyword arguments and returns the
    component's props. A None result short-circuits to None.
    """

    def cached(**inputs: Any) -> T | None:
        props = props_mapper(**inputs)
        if props is None:
            return None
        target = cache if cache is not None else default_cache
        key = compute_cache_key(namespace, props)
        return target.get_or_render(key, lambda: component(props))

    cached.__name__ = f"cached_{getattr(component, '__name__', 'component')}"
    cached.__doc__ = component.__doc__
    return cached
