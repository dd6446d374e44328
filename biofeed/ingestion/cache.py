"""Time-boxed cache of normalized feeds, keyed by (feed_url, max_items)."""

import time
from typing import Callable, Dict, Optional, Tuple

from .models import NormalizedFeed

CacheKey = Tuple[str, int]


class FeedCache:
    """In-memory TTL cache used by callers that want to avoid refetching.

    Holds at most `max_entries` feeds; expired entries are purged on every
    write and the oldest entry is dropped when the bound is reached.
    """

    def __init__(
        self,
        ttl_seconds: float,
        max_entries: int = 256,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: Dict[CacheKey, Tuple[float, NormalizedFeed]] = {}

    @property
    def enabled(self) -> bool:
        return self.ttl_seconds > 0 and self.max_entries > 0

    def get(self, feed_url: str, max_items: int) -> Optional[NormalizedFeed]:
        """Return a cached feed, evicting it if it has expired."""
        key = (feed_url, max_items)
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, feed = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return feed

    def purge_expired(self) -> None:
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    def set(self, feed_url: str, max_items: int, feed: NormalizedFeed) -> None:
        if not self.enabled:
            return
        key = (feed_url, max_items)
        self.purge_expired()
        self._entries.pop(key, None)

        # dicts keep insertion order, so the first key is the oldest write
        while len(self._entries) >= self.max_entries:
            del self._entries[next(iter(self._entries))]

        self._entries[key] = (self._clock() + self.ttl_seconds, feed)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
