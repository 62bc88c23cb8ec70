"""Tests for client exception classes."""


from articles_loader.clients import (
    ApiError,
    ClientError,
    ConnectionError,
    NotFoundError,
    RateLimitError,
    TransportError,
    ValidationError,
)


class TestClientError:
    """Tests for the base ClientError exception."""

    def test_instantiation_with_message(self):
        """ClientError stores the error message."""
        error = ClientError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """ClientError is an Exception."""
        assert isinstance(ClientError("test"), Exception)


class TestConnectionError:
    """Tests for ConnectionError exception."""

    def test_instantiation(self):
        """ConnectionError stores the error message."""
        error = ConnectionError("Network unreachable")

        assert error.message == "Network unreachable"

    def test_inheritance(self):
        """ConnectionError inherits from ClientError, not the builtin."""
        error = ConnectionError("test")

        assert isinstance(error, ClientError)
        assert not isinstance(error, OSError)


class TestTransportError:
    """Tests for TransportError and its status-specific subclasses."""

    def test_instantiation_with_status_code(self):
        """TransportError stores message and status code."""
        error = TransportError("Server error", status_code=500)

        assert error.message == "Server error"
        assert error.status_code == 500

    def test_inheritance(self):
        """TransportError inherits from ClientError."""
        assert isinstance(TransportError("test", status_code=502), ClientError)

    def test_rate_limit_default_message(self):
        """RateLimitError has a default message and 429 status."""
        error = RateLimitError()

        assert error.message == "Rate limit exceeded"
        assert error.status_code == 429
        assert isinstance(error, TransportError)

    def test_not_found_default_message(self):
        """NotFoundError has a default message and 404 status."""
        error = NotFoundError()

        assert error.message == "Resource not found"
        assert error.status_code == 404
        assert isinstance(error, TransportError)


class TestApiError:
    """Tests for ApiError exception."""

    def test_carries_server_message(self):
        """ApiError uses the server-supplied error as its message."""
        error = ApiError("Sheet not found")

        assert error.message == "Sheet not found"
        assert error.server_error == "Sheet not found"

    def test_default_message(self):
        """ApiError falls back to a default message."""
        error = ApiError()

        assert error.message == "Failed to fetch articles"
        assert error.server_error is None

    def test_empty_server_message_uses_default(self):
        """An empty server error string also falls back to the default."""
        assert ApiError("").message == "Failed to fetch articles"

    def test_is_not_a_transport_error(self):
        """ApiError is distinct from HTTP-level failures."""
        error = ApiError("nope")

        assert isinstance(error, ClientError)
        assert not isinstance(error, TransportError)


class TestValidationError:
    """Tests for ValidationError exception."""

    def test_default_errors(self):
        """ValidationError has an empty error list by default."""
        error = ValidationError("Invalid payload")

        assert error.message == "Invalid payload"
        assert error.errors == []

    def test_with_errors(self):
        """ValidationError stores the detailed error list."""
        error = ValidationError("Invalid payload", errors=["issues.0.title: missing"])

        assert error.errors == ["issues.0.title: missing"]
