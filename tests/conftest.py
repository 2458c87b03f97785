"""Pytest fixtures for page-mirror tests."""

import httpx
import pytest

from page_mirror.clients import WebClient

PAGE_URL = "https://example.com/page"


@pytest.fixture
def sample_page_html():
    """Sample page with one asset of each kind plus edge cases.

    Asset references, in discovery order:
        images: /logo.png, //img.example.net/banner.jpg, "" (empty)
        stylesheets: /css/site.css
        scripts: https://cdn.x/a.js
    """
    return b"""<!DOCTYPE html>
<html>
<head>
<title>Example</title>
<link rel="stylesheet" href="/css/site.css">
<link rel="icon" href="/favicon.ico">
<script src="https://cdn.x/a.js"></script>
<script>var inline = 1;</script>
</head>
<body>
<a href="/about">About</a>
<a href="/contact">Contact</a>
<img src="/logo.png" alt="Logo">
<img src="//img.example.net/banner.jpg">
<img src="">
</body>
</html>
"""


@pytest.fixture
def routes():
    """URL → response mapping served by the mock transport.

    Values may be bytes (served with status 200), an httpx.Response, or an
    exception instance to raise. Unknown URLs get a 404.
    """
    return {}


@pytest.fixture
def requested():
    """URLs requested through the mock transport, in order."""
    return []


@pytest.fixture
def mock_transport(routes, requested):
    """httpx.MockTransport serving the routes fixture."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        requested.append(url)
        value = routes.get(url)
        if value is None:
            return httpx.Response(404, content=b"not found")
        if isinstance(value, Exception):
            raise value
        if isinstance(value, httpx.Response):
            return value
        return httpx.Response(200, content=value)

    return httpx.MockTransport(handler)


@pytest.fixture
def web_client(mock_transport):
    """WebClient wired to the mock transport with a single attempt per request."""
    client = WebClient({"transport": mock_transport, "retry_attempts": 1})
    yield client
    client.close()


@pytest.fixture
def sample_site(routes, sample_page_html):
    """Register the sample page and all of its assets as reachable."""
    routes[PAGE_URL] = sample_page_html
    routes[f"{PAGE_URL}/logo.png"] = b"PNG logo bytes"
    routes["https://img.example.net/banner.jpg"] = b"JPG banner bytes"
    routes[f"{PAGE_URL}/css/site.css"] = b"body { color: black; }"
    routes["https://cdn.x/a.js"] = b"console.log('a');"
    return routes
