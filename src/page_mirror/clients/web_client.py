"""Client for fetching arbitrary web pages and assets."""

import httpx

from .client import Client


class WebClient(Client):
    """Client for plain HTTP(S) GETs against absolute URLs.

    Unlike API clients, a WebClient is not tied to one host: the mirror
    fetches the page from one origin and its assets from any number of
    others (CDNs, protocol-relative hosts), so requests always carry a
    fully qualified URL.

    Example:
        with WebClient({"timeout": 10}) as client:
            response = client.fetch("https://example.com/")
            response.content, response.charset_encoding
    """

    def fetch(self, url: str) -> httpx.Response:
        """Fetch a URL with its body fully read.

        Args:
            url: Fully qualified URL

        Returns:
            The successful response; ``content`` holds the raw body and
            ``charset_encoding`` the charset from Content-Type, if any

        Raises:
            ConnectionError: If the network connection fails
            HTTPStatusError: If the server returns a non-2xx response
        """
        return self.get(url)
