"""Aggregators for gathering page assets from clients."""

from .asset_fetcher import AssetFetcher

__all__ = ["AssetFetcher"]
