"""URL helpers for resolving asset references and naming output files.

Resolution is deliberately shallow:

- ``//host/path`` is treated as ``https://host/path``
- ``/path`` is appended to the base URL as-is (or to its origin when
  ``origin_join`` is set)
- anything else, including page-relative paths such as ``../img.png``, is
  passed through untouched
"""

from urllib.parse import urlsplit

SCHEMES = ("https://", "http://")


def resolve(base_url: str, ref: str, origin_join: bool = False) -> str:
    """Resolve an asset reference against the page URL.

    Args:
        base_url: URL of the page the reference was found on
        ref: Raw attribute value
        origin_join: Join root-relative references to the origin of
            ``base_url`` instead of the full URL

    Returns:
        The URL to fetch
    """
    if ref.startswith("//"):
        return "https:" + ref
    if ref.startswith("/"):
        prefix = origin_of(base_url) if origin_join else base_url
        return prefix + ref
    return ref


def origin_of(url: str) -> str:
    """Return ``scheme://host[:port]`` for a URL.

    URLs without a scheme or host are returned unchanged.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        return url
    return f"{parts.scheme}://{parts.netloc}"


def strip_scheme(url: str) -> str:
    """Remove a leading http:// or https:// from a URL."""
    for scheme in SCHEMES:
        if url.startswith(scheme):
            return url[len(scheme):]
    return url


def asset_filename(url: str) -> str:
    """Return everything after the final ``/`` of a URL.

    Query strings and characters that are illegal on some filesystems are
    kept, so two assets sharing a last segment map to the same name.
    """
    return url.rsplit("/", 1)[-1]
