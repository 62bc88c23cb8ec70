"""Cache entry domain object."""

from dataclasses import dataclass

from .issue import IssuesResponse


@dataclass(frozen=True)
class CacheEntry:
    """A fetched payload together with the moment it was fetched.

    Attributes:
        data: The validated endpoint response
        fetched_at: Clock reading (seconds) taken when the fetch completed
    """

    data: IssuesResponse
    fetched_at: float

    def age(self, now: float) -> float:
        return now - self.fetched_at
