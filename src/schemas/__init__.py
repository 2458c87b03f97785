"""Schema definitions for page-mirror."""

from .asset import AssetFailure, AssetKind, AssetReference, LocalAsset
from .mirror import MirrorResult, PageJob, RewriteSummary
from .page_metadata import PageMetadata

__all__ = [
    "AssetFailure",
    "AssetKind",
    "AssetReference",
    "LocalAsset",
    "MirrorResult",
    "PageJob",
    "PageMetadata",
    "RewriteSummary",
]
