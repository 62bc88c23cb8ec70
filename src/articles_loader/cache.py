"""In-memory read-through cache for the issues payload."""

import logging
import threading
import time
from collections.abc import Callable

from schemas.cache_entry import CacheEntry
from schemas.issue import IssuesResponse

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 5 * 60


class IssuesCache:
    """Holds the most recent issues payload for a fixed time-to-live.

    The cache is either empty or holds one complete CacheEntry. A failed
    refresh never touches the stored entry, so a stale payload survives an
    outage until the next successful fetch or an explicit clear().

    The lock spans the whole check-fetch-store sequence: concurrent callers
    that all find the entry expired wait for the first one's fetch instead
    of issuing their own.

    Args:
        loader: Callable returning a fresh IssuesResponse (raises on failure)
        ttl: Time-to-live in seconds
        clock: Monotonic clock returning seconds
    """

    def __init__(
        self,
        loader: Callable[[], IssuesResponse],
        ttl: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._loader = loader
        self._ttl = ttl
        self._clock = clock
        self._entry: CacheEntry | None = None
        self._lock = threading.Lock()

    @property
    def ttl(self) -> float:
        return self._ttl

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def is_fresh(self, now: float | None = None) -> bool:
        """Return True if a cached entry exists and is younger than the TTL."""
        entry = self._entry
        if entry is None:
            return False
        if now is None:
            now = self._clock()
        return entry.age(now) < self._ttl

    def get_or_refresh(self, now: float | None = None) -> IssuesResponse:
        """Return the cached payload, fetching a new one if it has expired.

        Args:
            now: Clock reading to evaluate freshness against and to stamp a
                fresh entry with (default: clock(), read again after the fetch)

        Returns:
            The cached or freshly fetched IssuesResponse

        Raises:
            Exception: Whatever the loader raised; the cache is left unchanged
        """
        with self._lock:
            fetched_at = now
            if now is None:
                now = self._clock()

            if self.is_fresh(now):
                return self._entry.data

            try:
                data = self._loader()
            except Exception as e:
                logger.error(f"Error fetching articles: {e}")
                raise

            if fetched_at is None:
                fetched_at = self._clock()

            self._entry = CacheEntry(data=data, fetched_at=fetched_at)
            logger.debug(f"Cached {len(data.issues)} issues for {self._ttl}s")
            return data

    def clear(self) -> None:
        """Drop the cached entry so the next call refetches.

        Waits for an in-flight refresh to finish, then drops the entry that
        refresh stored.
        """
        with self._lock:
            self._entry = None
