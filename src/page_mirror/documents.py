"""Parsing and serialization of HTML documents with lxml."""

from lxml import etree, html

from page_mirror.exceptions import ParseError

DEFAULT_ENCODING = "utf-8"


def parse_document(
    content: bytes,
    url: str,
    encoding: str | None = None,
    stage: str = "parse",
) -> html.HtmlElement:
    """Parse raw page bytes into an lxml HTML tree.

    Args:
        content: Response body
        url: URL the body was fetched from, for error context
        encoding: Charset announced by the server; when None the parser
            falls back to the document's own <meta charset>
        stage: Stage name recorded on a ParseError

    Returns:
        Root <html> element of the document

    Raises:
        ParseError: If the body is empty or cannot be parsed
    """
    try:
        parser = html.HTMLParser(encoding=encoding)
        return html.document_fromstring(content, parser=parser)
    except (etree.LxmlError, ValueError, LookupError) as e:
        raise ParseError(
            f"Failed to parse HTML from {url}: {e}", url=url, stage=stage
        ) from e


def serialize_document(doc: html.HtmlElement) -> bytes:
    """Serialize a whole document, doctype included.

    Output is deterministic for a given tree, so re-serializing an
    unchanged page yields identical bytes.
    """
    tree = doc.getroottree()
    encoding = tree.docinfo.encoding or DEFAULT_ENCODING
    return html.tostring(tree, encoding=encoding, method="html")
