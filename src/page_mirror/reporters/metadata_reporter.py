"""Metadata reporter for summarizing a page."""

import logging
from datetime import datetime, timezone

from page_mirror.clients import ClientError, WebClient
from page_mirror.documents import parse_document
from page_mirror.exceptions import NetworkError
from schemas.page_metadata import PageMetadata

logger = logging.getLogger(__name__)


class MetadataReporter:
    """Fetch a page and count its links and images.

    The page is fetched again rather than reusing a mirrored copy, so the
    counts reflect the live document regardless of which assets could be
    mirrored.
    """

    def __init__(self, client: WebClient | None = None):
        self._owns_client = client is None
        self.client = client or WebClient()

    def close(self) -> None:
        """Close the web client if we own it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "MetadataReporter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def report(self, url: str) -> PageMetadata:
        """Fetch a page and summarize it.

        Args:
            url: Page URL

        Returns:
            PageMetadata with anchor and image counts and the fetch time

        Raises:
            NetworkError: If the page cannot be fetched
            ParseError: If the page is not parseable HTML
        """
        try:
            response = self.client.fetch(url)
        except ClientError as e:
            raise NetworkError(
                f"Failed to fetch {url}: {e.message}", url=url, stage="metadata"
            ) from e

        doc = parse_document(
            response.content, url, response.charset_encoding, stage="metadata"
        )

        metadata = PageMetadata(
            site=url,
            num_links=len(doc.xpath("//a")),
            num_images=len(doc.xpath("//img")),
            last_fetch=datetime.now(timezone.utc),
        )
        logger.debug(
            f"{url}: {metadata.num_links} links, {metadata.num_images} images"
        )
        return metadata
