"""Exceptions raised while mirroring a page.

Each error records the URL it concerns and the stage that failed, so the
batch driver can report a single line per failure and move on.
"""


class MirrorError(Exception):
    """Base exception for all mirroring errors."""

    def __init__(self, message: str, url: str | None = None, stage: str | None = None):
        self.message = message
        self.url = url
        self.stage = stage
        super().__init__(message)


class NetworkError(MirrorError):
    """Raised when a page or asset cannot be retrieved."""

    pass


class ParseError(MirrorError):
    """Raised when a fetched document cannot be parsed as HTML."""

    pass


class StorageError(MirrorError):
    """Raised when a directory or file cannot be created or written."""

    pass
