"""Pipeline for mirroring pages end to end."""

from .orchestrator import MirrorOrchestrator

__all__ = ["MirrorOrchestrator"]
