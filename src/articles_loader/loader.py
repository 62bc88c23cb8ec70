"""Query operations over the cached issues payload."""

import atexit
import logging
import threading
import time
from collections.abc import Callable

from schemas.issue import Issue, IssuesResponse

from .cache import CACHE_TTL_SECONDS, IssuesCache
from .clients import DEFAULT_BASE_URL, DEFAULT_ENDPOINT, IssuesClient

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "base_url": DEFAULT_BASE_URL,
    "endpoint": DEFAULT_ENDPOINT,
    "timeout": 10,
}


class ArticlesLoader:
    """Read-through access to the magazine's issues.

    Wires an IssuesClient to an IssuesCache. Every query goes through the
    cache, so repeated calls within the TTL share a single network fetch.

    Example:
        with ArticlesLoader() as loader:
            issue = loader.get_issue("Issue 3")

    Args:
        config: IssuesClient config (default: DEFAULT_CONFIG)
        client: Pre-built client, overrides config
        ttl: Cache time-to-live in seconds
        clock: Monotonic clock used by the cache
    """

    def __init__(
        self,
        config: dict | None = None,
        client: IssuesClient | None = None,
        ttl: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client or IssuesClient(config or dict(DEFAULT_CONFIG))
        self.cache = IssuesCache(self.client.fetch, ttl=ttl, clock=clock)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        self.client.close()

    def fetch_articles(self) -> IssuesResponse:
        """Return the issues document, from cache while it is fresh.

        Raises:
            ConnectionError: If the network connection fails
            TransportError: If the endpoint returns a non-2xx response
            ApiError: If the endpoint reports ``success: false``
            ValidationError: If the body is not a valid issues document
        """
        return self.cache.get_or_refresh()

    def get_issues(self) -> list[Issue]:
        """Return all issues, or an empty list if the payload has none."""
        data = self.fetch_articles()
        return data.issues or []

    def get_issue(self, title: str) -> Issue | None:
        """Return the first issue whose title matches exactly, else None."""
        for issue in self.get_issues():
            if issue.title == title:
                return issue
        logger.debug(f"No issue titled {title!r}")
        return None

    def clear_cache(self) -> None:
        """Force the next query to refetch."""
        self.cache.clear()


_default_loader: ArticlesLoader | None = None
_default_lock = threading.Lock()


def get_default_loader() -> ArticlesLoader:
    """Return the process-wide loader, creating it on first use.

    Its HTTP client is closed at interpreter exit.
    """
    global _default_loader
    with _default_lock:
        if _default_loader is None:
            _default_loader = ArticlesLoader()
            atexit.register(_default_loader.close)
        return _default_loader


def fetch_articles() -> IssuesResponse:
    return get_default_loader().fetch_articles()


def get_issues() -> list[Issue]:
    return get_default_loader().get_issues()


def get_issue(title: str) -> Issue | None:
    return get_default_loader().get_issue(title)


def clear_cache() -> None:
    get_default_loader().clear_cache()
