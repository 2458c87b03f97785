"""Reporters that summarize fetched pages."""

from .metadata_reporter import MetadataReporter

__all__ = ["MetadataReporter"]
