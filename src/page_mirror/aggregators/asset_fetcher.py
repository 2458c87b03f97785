"""Asset fetcher for downloading page assets to local storage."""

import logging
from pathlib import Path

import httpx

from page_mirror.clients import ClientError, WebClient
from page_mirror.exceptions import NetworkError, StorageError
from page_mirror.urls import asset_filename
from schemas.asset import LocalAsset

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class AssetFetcher:
    """Downloads assets referenced by a page into a save directory.

    Each asset is stored under the last path segment of its URL. Names are
    not sanitized or de-duplicated: two assets ending in the same segment
    overwrite each other, last write wins.

    Example:
        with AssetFetcher() as fetcher:
            asset = fetcher.fetch("https://example.com/logo.png", Path("assets"))
            asset.local_path  # "assets/logo.png"
    """

    def __init__(self, client: WebClient | None = None):
        """Initialize the asset fetcher.

        Args:
            client: Optional web client for downloading assets.
                    If not provided, one will be created internally.
        """
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> WebClient:
        """Get or create the web client."""
        if self._client is None:
            self._client = WebClient()
        return self._client

    def close(self) -> None:
        """Close the web client if we own it."""
        if self._owns_client and self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "AssetFetcher":
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context manager."""
        self.close()

    def fetch(self, resolved_url: str, save_dir: Path) -> LocalAsset:
        """Download one asset into save_dir.

        Args:
            resolved_url: Fully qualified asset URL
            save_dir: Existing directory to write the asset into

        Returns:
            LocalAsset describing the written file

        Raises:
            NetworkError: If the asset cannot be retrieved
            StorageError: If the file cannot be created or written. A
                partially written file is left in place.
        """
        filename = asset_filename(resolved_url)
        if not filename:
            raise StorageError(
                f"No filename in asset URL {resolved_url}",
                url=resolved_url,
                stage="asset",
            )
        local_path = Path(save_dir) / filename

        try:
            with self._get_client().stream(resolved_url) as response:
                size = self._write_stream(response, local_path, resolved_url)
        except ClientError as e:
            raise NetworkError(
                f"Failed to download asset {resolved_url}: {e.message}",
                url=resolved_url,
                stage="asset",
            ) from e
        except httpx.HTTPError as e:
            raise NetworkError(
                f"Failed to download asset {resolved_url}: {e}",
                url=resolved_url,
                stage="asset",
            ) from e

        logger.info(f"Downloaded asset: {local_path.as_posix()}")
        return LocalAsset(
            source_url=resolved_url,
            filename=filename,
            local_path=local_path.as_posix(),
            size=size,
        )

    def _write_stream(
        self, response: httpx.Response, destination: Path, url: str
    ) -> int:
        """Stream a response body into a file.

        Args:
            response: Open streaming response
            destination: File to create or truncate
            url: Asset URL, for error context

        Returns:
            Number of bytes written

        Raises:
            StorageError: If the file cannot be opened or written
        """
        try:
            out_file = open(destination, "wb")
        except OSError as e:
            raise StorageError(
                f"Failed to create file for asset {destination.name}: {e}",
                url=url,
                stage="asset",
            ) from e

        size = 0
        with out_file:
            for chunk in response.iter_bytes(CHUNK_SIZE):
                try:
                    out_file.write(chunk)
                except OSError as e:
                    raise StorageError(
                        f"Failed to save asset {destination.name}: {e}",
                        url=url,
                        stage="asset",
                    ) from e
                size += len(chunk)

        return size
