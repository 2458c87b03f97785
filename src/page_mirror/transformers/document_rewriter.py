"""Document rewriter for pointing asset references at local copies.

Walks a parsed HTML document, downloads every image, stylesheet and
external script it references, and rewrites the referencing attribute to
the local path of the download. A failed download leaves its reference
pointing at the remote URL; it never aborts the rest of the document.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from lxml import html

from page_mirror.aggregators import AssetFetcher
from page_mirror.exceptions import MirrorError
from page_mirror.urls import resolve
from schemas.asset import AssetFailure, AssetKind, AssetReference
from schemas.mirror import RewriteSummary

logger = logging.getLogger(__name__)

# (kind, XPath, attribute), processed in this order
ASSET_QUERIES: list[tuple[AssetKind, str, str]] = [
    ("image", "//img[@src]", "src"),
    ("stylesheet", "//link[@rel='stylesheet'][@href]", "href"),
    ("script", "//script[@src]", "src"),
]


def discover_assets(doc: html.HtmlElement) -> Iterator[AssetReference]:
    """Yield the asset references of a document.

    References are grouped by kind (images, then stylesheets, then scripts)
    and appear in document order within each group.

    Args:
        doc: Root element of a parsed HTML document

    Yields:
        One AssetReference per matching element
    """
    for kind, query, attribute in ASSET_QUERIES:
        for element in doc.xpath(query):
            yield AssetReference(
                element=element,
                attribute=attribute,
                kind=kind,
                raw=element.get(attribute, ""),
            )


class DocumentRewriter:
    """Rewrite asset references in a document to locally mirrored copies.

    Attributes:
        fetcher: AssetFetcher used to download each asset
        origin_join: Resolve root-relative references against the page's
            origin instead of the full page URL
    """

    def __init__(self, fetcher: AssetFetcher, origin_join: bool = False):
        self.fetcher = fetcher
        self.origin_join = origin_join

    def rewrite(
        self,
        doc: html.HtmlElement,
        base_url: str,
        save_dir: Path,
    ) -> RewriteSummary:
        """Download the assets of a document and rewrite it in place.

        Args:
            doc: Root element of the parsed page; mutated in place
            base_url: URL the page was fetched from
            save_dir: Existing directory that receives the assets

        Returns:
            RewriteSummary listing rewritten, failed and skipped references
        """
        summary = RewriteSummary()

        for ref in discover_assets(doc):
            if not ref.raw:
                summary.skipped += 1
                continue

            url = resolve(base_url, ref.raw, origin_join=self.origin_join)
            logger.debug(f"Fetching {ref.kind} {url}")

            try:
                asset = self.fetcher.fetch(url, save_dir)
            except MirrorError as e:
                logger.warning(f"Keeping remote {ref.kind} {ref.raw}: {e.message}")
                summary.failed.append(
                    AssetFailure(url=url, kind=ref.kind, error=e.message)
                )
                continue

            ref.rewrite(asset.local_path)
            summary.rewritten.append(asset)

        logger.debug(
            f"Rewrote {len(summary.rewritten)} of {summary.total} assets "
            f"for {base_url} ({summary.skipped} empty)"
        )
        return summary
