"""Schema definitions for Articles Loader."""

from .cache_entry import CacheEntry
from .issue import Issue, IssuesResponse

__all__ = [
    "CacheEntry",
    "Issue",
    "IssuesResponse",
]
