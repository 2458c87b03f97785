"""Mirror job and result schemas."""

from pydantic import BaseModel

from .asset import AssetFailure, LocalAsset


class PageJob(BaseModel):
    """The unit of work for one input URL.

    Attributes:
        source_url: URL of the page to mirror
        save_dir: Directory that receives the page's assets
        html_path: Where the mirrored HTML is written
    """

    source_url: str
    save_dir: str
    html_path: str


class RewriteSummary(BaseModel):
    """Outcome of rewriting the asset references of one document.

    Attributes:
        rewritten: Assets fetched and pointed at locally
        failed: Assets left pointing at their remote URL
        skipped: References with an empty attribute value
    """

    rewritten: list[LocalAsset] = []
    failed: list[AssetFailure] = []
    skipped: int = 0

    @property
    def total(self) -> int:
        """Number of non-empty references processed."""
        return len(self.rewritten) + len(self.failed)


class MirrorResult(BaseModel):
    """The persisted mirror of one page.

    Attributes:
        job: The job that produced this result
        summary: Per-asset outcome of the rewrite pass
        bytes_written: Size of the serialized HTML document
    """

    job: PageJob
    summary: RewriteSummary
    bytes_written: int
