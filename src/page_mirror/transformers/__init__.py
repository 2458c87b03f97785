"""Transformers that rewrite fetched documents."""

from .document_rewriter import DocumentRewriter, discover_assets

__all__ = ["DocumentRewriter", "discover_assets"]
