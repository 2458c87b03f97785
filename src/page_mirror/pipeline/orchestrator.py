"""Mirror orchestrator for end-to-end page → local copy processing.

Runs one page URL through the linear mirror pipeline:

    fetch → parse → ensure asset directory → rewrite → serialize → persist
"""

import hashlib
import logging
from pathlib import Path

from page_mirror.aggregators import AssetFetcher
from page_mirror.clients import ClientError, WebClient
from page_mirror.documents import parse_document, serialize_document
from page_mirror.exceptions import NetworkError, StorageError
from page_mirror.transformers import DocumentRewriter
from page_mirror.urls import strip_scheme
from schemas.mirror import MirrorResult, PageJob

logger = logging.getLogger(__name__)

DEFAULT_ASSETS_DIR = Path("assets")
PAGE_DIR_HASH_LENGTH = 12


class MirrorOrchestrator:
    """End-to-end page mirror.

    The asset directory is shared by every page mirrored with the same
    orchestrator unless per_page_assets is set, in which case each page
    gets a subdirectory keyed by a hash of its URL.

    Attributes:
        client: WebClient used for the page and its assets
        assets_dir: Base directory for downloaded assets
        output_dir: Directory the mirrored HTML files are written under
        per_page_assets: Give each page its own asset subdirectory
        rewriter: DocumentRewriter that downloads and rewrites assets
    """

    def __init__(
        self,
        client: WebClient | None = None,
        assets_dir: Path = DEFAULT_ASSETS_DIR,
        output_dir: Path | None = None,
        per_page_assets: bool = False,
        origin_join: bool = False,
    ):
        """Initialize the orchestrator.

        Args:
            client: Optional web client. If not provided, one will be
                    created internally and closed with the orchestrator.
            assets_dir: Base directory for downloaded assets
            output_dir: Directory for mirrored HTML (default: current directory)
            per_page_assets: Namespace assets per page URL
            origin_join: Resolve root-relative references against the
                page's origin instead of the full page URL
        """
        self._owns_client = client is None
        self.client = client or WebClient()
        self.assets_dir = Path(assets_dir)
        self.output_dir = Path(output_dir) if output_dir is not None else Path(".")
        self.per_page_assets = per_page_assets
        self.rewriter = DocumentRewriter(
            AssetFetcher(self.client), origin_join=origin_join
        )

    def close(self) -> None:
        """Close the web client if we own it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "MirrorOrchestrator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def plan(self, url: str) -> PageJob:
        """Build the job for a page URL without touching the network.

        Args:
            url: Page URL

        Returns:
            PageJob naming the asset directory and HTML output path
        """
        save_dir = self.assets_dir
        if self.per_page_assets:
            digest = hashlib.sha256(url.encode("utf-8")).hexdigest()
            save_dir = save_dir / digest[:PAGE_DIR_HASH_LENGTH]

        html_path = self.output_dir / (strip_scheme(url) + ".html")
        return PageJob(
            source_url=url,
            save_dir=save_dir.as_posix(),
            html_path=html_path.as_posix(),
        )

    def mirror(self, url: str) -> MirrorResult:
        """Mirror a single page and its assets.

        Individual asset failures are recorded in the result and leave the
        corresponding reference pointing at the remote URL.

        Args:
            url: Page URL

        Returns:
            MirrorResult describing the written document

        Raises:
            NetworkError: If the page cannot be fetched
            ParseError: If the page is not parseable HTML
            StorageError: If the asset directory or output file cannot be written
        """
        job = self.plan(url)

        try:
            response = self.client.fetch(url)
        except ClientError as e:
            raise NetworkError(
                f"Failed to fetch {url}: {e.message}", url=url, stage="fetch"
            ) from e

        doc = parse_document(response.content, url, response.charset_encoding)

        save_dir = Path(job.save_dir)
        try:
            save_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                f"Failed to create assets directory {save_dir}: {e}",
                url=url,
                stage="mkdir",
            ) from e

        summary = self.rewriter.rewrite(doc, url, save_dir)
        content = serialize_document(doc)

        html_path = Path(job.html_path)
        try:
            html_path.parent.mkdir(parents=True, exist_ok=True)
            html_path.write_bytes(content)
        except OSError as e:
            raise StorageError(
                f"Failed to save mirrored HTML {html_path}: {e}",
                url=url,
                stage="write",
            ) from e

        logger.info(f"Successfully saved mirrored HTML {html_path.as_posix()}")
        if summary.failed:
            logger.warning(
                f"{len(summary.failed)} of {summary.total} assets for {url} "
                f"still point at remote URLs"
            )

        return MirrorResult(job=job, summary=summary, bytes_written=len(content))
