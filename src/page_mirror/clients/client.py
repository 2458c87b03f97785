"""Base client for network requests."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from time import sleep
from typing import Any

import httpx

from .exceptions import (
    ClientError,
    ConnectionError,
    HTTPStatusError,
    NotFoundError,
    RateLimitError,
)

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "page-mirror/1.0"


class Client(ABC):
    """Base class for network clients.

    Provides lazy-initialized httpx.Client with context manager support,
    configurable timeout, retries, and headers via dict config.

    Config keys:
        base_url: Base URL for relative request paths (default: none, so
            every request must carry an absolute URL)
        timeout: Request timeout in seconds (default: 30)
        retry_attempts: Number of retry attempts for transient failures (default: 3)
        retry_delay: Delay between retries in seconds (default: 1)
        headers: Additional headers to include in requests
        follow_redirects: Follow 3xx responses (default: True)
        transport: Optional httpx transport (e.g. httpx.MockTransport)
    """

    def __init__(self, config: dict | None = None):
        self._config = dict(config or {})
        self._client: httpx.Client | None = None

    @property
    def base_url(self) -> str:
        return str(self._config.get("base_url", ""))

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def retry_attempts(self) -> int:
        return max(1, int(self._config.get("retry_attempts", 3)))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", 1))

    @property
    def headers(self) -> dict[str, str]:
        headers = {"User-Agent": DEFAULT_USER_AGENT}
        headers.update(self._config.get("headers", {}))
        return headers

    @property
    def follow_redirects(self) -> bool:
        return bool(self._config.get("follow_redirects", True))

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=self.follow_redirects,
                transport=self._config.get("transport"),
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Map HTTP errors to exceptions.

        Args:
            response: The HTTP response to check

        Returns:
            The response if successful

        Raises:
            NotFoundError: For 404 responses
            RateLimitError: For 429 responses
            HTTPStatusError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code

        if status_code == 404:
            raise NotFoundError(f"Resource not found: {response.url}")
        elif status_code == 429:
            raise RateLimitError(f"Rate limit exceeded: {response.url}")
        else:
            raise HTTPStatusError(
                f"HTTP error {status_code}: {response.url}",
                status_code=status_code,
            )

    def _send(self, method: str, path: str, stream: bool, **kwargs) -> httpx.Response:
        if not stream:
            return self.client.request(method, path, **kwargs)

        request = self.client.build_request(method, path, **kwargs)
        return self.client.send(request, stream=True)

    def _request(
        self,
        method: str,
        path: str,
        stream: bool = False,
        **kwargs,
    ) -> httpx.Response:
        """Make a request with retry logic for transient failures.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL or path (appended to base_url when relative)
            stream: If True, the body is left unread for the caller to iterate
            **kwargs: Additional arguments passed to httpx

        Returns:
            The HTTP response

        Raises:
            ConnectionError: If all retry attempts fail due to network issues,
                or the request cannot be sent at all
            HTTPStatusError: If the server returns a non-2xx response
        """
        last_exception: Exception | None = None

        for attempt in range(self.retry_attempts):
            try:
                response = self._send(method, path, stream, **kwargs)
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                last_exception = e
                logger.warning(
                    f"Request to {path} failed "
                    f"(attempt {attempt + 1}/{self.retry_attempts}): {e}"
                )
                if attempt < self.retry_attempts - 1:
                    sleep(self.retry_delay)
                continue
            # ValueError covers hosts that fail IDNA encoding/decoding
            except (httpx.RequestError, httpx.InvalidURL, ValueError) as e:
                raise ConnectionError(f"Request to {path} failed: {e}") from e

            try:
                return self._handle_response(response)
            except ClientError:
                if stream:
                    response.close()
                raise

        msg = f"Connection failed after {self.retry_attempts} attempts"
        raise ConnectionError(msg) from last_exception

    def get(self, path: str, **kwargs) -> httpx.Response:
        """Convenience method for GET requests.

        Args:
            path: URL or path (appended to base_url when relative)
            **kwargs: Additional arguments passed to httpx

        Returns:
            The HTTP response
        """
        return self._request("GET", path, **kwargs)

    @contextmanager
    def stream(self, path: str, **kwargs) -> Iterator[httpx.Response]:
        """Open a streaming GET request.

        The response status is checked before the body is handed out, and
        the response is closed when the block exits.

        Example:
            with client.stream("https://example.com/logo.png") as response:
                for chunk in response.iter_bytes():
                    ...
        """
        response = self._request("GET", path, stream=True, **kwargs)
        try:
            yield response
        finally:
            response.close()

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch data from the remote server. Must be implemented by subclasses."""
        pass
