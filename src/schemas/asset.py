"""Asset schemas.

An asset is an image, stylesheet or script referenced from a mirrored page.
References are discovered in the parsed document and consumed immediately;
only the outcome of each fetch is kept.
"""

from dataclasses import dataclass
from typing import Literal

from lxml import html
from pydantic import BaseModel

AssetKind = Literal["image", "stylesheet", "script"]


@dataclass
class AssetReference:
    """A pointer from a document element to an external resource.

    Attributes:
        element: The element carrying the reference; rewriting its
            attribute rewrites the document
        attribute: Name of the attribute holding the URL ("src" or "href")
        kind: Which discovery class found the reference
        raw: Attribute value as found in the document
    """

    element: html.HtmlElement
    attribute: str
    kind: AssetKind
    raw: str

    def rewrite(self, value: str) -> None:
        """Point the element at a new location."""
        self.element.set(self.attribute, value)


class LocalAsset(BaseModel):
    """An asset written to local storage.

    Attributes:
        source_url: Resolved URL the asset was fetched from
        filename: Last path segment of source_url
        local_path: Path of the written file, as used in rewritten documents
        size: Number of bytes written
    """

    source_url: str
    filename: str
    local_path: str
    size: int = 0


class AssetFailure(BaseModel):
    """An asset that could not be mirrored.

    Attributes:
        url: Resolved URL that was attempted
        kind: Discovery class of the reference
        error: Human-readable failure reason
    """

    url: str
    kind: AssetKind
    error: str
