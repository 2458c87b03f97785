"""Page metadata schema."""

from datetime import datetime

from pydantic import BaseModel

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_rfc1123(value: datetime) -> str:
    """Format a UTC datetime as RFC 1123 with a ``UTC`` zone name.

    Day and month names are fixed English abbreviations, independent of
    the process locale.
    """
    return (
        f"{WEEKDAYS[value.weekday()]}, {value.day:02d} {MONTHS[value.month - 1]} "
        f"{value.year:04d} {value:%H:%M:%S} UTC"
    )


class PageMetadata(BaseModel):
    """Summary of a fetched page.

    Attributes:
        site: URL of the page
        num_links: Number of anchor elements
        num_images: Number of image elements
        last_fetch: When the page was fetched (UTC)
    """

    site: str
    num_links: int
    num_images: int
    last_fetch: datetime

    def to_lines(self) -> list[str]:
        """Render the metadata as human-readable ``key: value`` lines."""
        return [
            f"site: {self.site}",
            f"num_links: {self.num_links}",
            f"num_images: {self.num_images}",
            f"last_fetch: {format_rfc1123(self.last_fetch)}",
        ]
