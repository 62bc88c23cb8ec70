"""Custom exceptions for network clients."""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when a network connection fails or times out."""

    pass


class TransportError(ClientError):
    """Raised when the endpoint returns a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class RateLimitError(TransportError):
    """Raised when the endpoint returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(TransportError):
    """Raised when the endpoint returns a 404 not found response."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ApiError(ClientError):
    """Raised when the endpoint answers but reports ``success: false``.

    Attributes:
        server_error: The ``error`` string supplied by the server, if any
    """

    DEFAULT_MESSAGE = "Failed to fetch articles"

    def __init__(self, message: str | None = None, *args, **kwargs):
        self.server_error = message
        super().__init__(message or self.DEFAULT_MESSAGE, *args, **kwargs)


class ValidationError(ClientError):
    """Raised when response data is not JSON or fails schema validation."""

    def __init__(self, message: str, errors: list | None = None, *args, **kwargs):
        self.errors = errors or []
        super().__init__(message, *args, **kwargs)
