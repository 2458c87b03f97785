"""Custom exceptions for HTTP transport clients."""


class ClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class ConnectionError(ClientError):
    """Raised when a request cannot be completed at the transport level.

    Covers DNS failures, refused connections, timeouts and URLs that the
    transport cannot send at all (missing or unsupported scheme).
    """

    pass


class HTTPStatusError(ClientError):
    """Raised when the server answers with a non-2xx response."""

    def __init__(self, message: str, status_code: int, *args, **kwargs):
        self.status_code = status_code
        super().__init__(message, *args, **kwargs)


class RateLimitError(HTTPStatusError):
    """Raised when the server returns a 429 rate limit response."""

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, status_code=429)


class NotFoundError(HTTPStatusError):
    """Raised when the server returns a 404 not found response."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)
