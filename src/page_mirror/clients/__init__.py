"""Network clients for fetching pages and assets."""

from .client import Client
from .exceptions import (
    ClientError,
    ConnectionError,
    HTTPStatusError,
    NotFoundError,
    RateLimitError,
)
from .web_client import WebClient

__all__ = [
    "Client",
    "WebClient",
    "ClientError",
    "ConnectionError",
    "HTTPStatusError",
    "RateLimitError",
    "NotFoundError",
]
