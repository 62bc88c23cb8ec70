"""Network clients for the issues endpoint."""

from .client import Client
from .exceptions import (
    ApiError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from .issues_client import DEFAULT_BASE_URL, DEFAULT_ENDPOINT, IssuesClient

__all__ = [
    "Client",
    "IssuesClient",
    "DEFAULT_BASE_URL",
    "DEFAULT_ENDPOINT",
    "ClientError",
    "ConnectionError",
    "TransportError",
    "RateLimitError",
    "NotFoundError",
    "ApiError",
    "ValidationError",
]
