"""Parse-and-find entry points built on the justhtml parser."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from justhtml import JustHTML

from .node import Node

if TYPE_CHECKING:
    from .filter import Filter

logger = logging.getLogger(__name__)


class NoMatchError(LookupError):
    """Raised when a document parsed fine but no node satisfied the filter chain."""


def _read(stream: Any) -> Any:
    read = getattr(stream, "read", None)
    if read is None:
        return stream
    return read()


def parse_document(stream: Any, *, strict: bool = False, encoding: str | None = None) -> Node:
    """
    Parse HTML and return the document root as a depth-0 Node.

    Args:
        stream: A readable object (text or binary), or str/bytes
        strict: Raise justhtml's StrictModeError on the first parse error
        encoding: Transport encoding hint for byte input

    Errors raised while reading or parsing propagate unchanged.
    """
    html = _read(stream)
    # Keep the tree as parsed: scripts, comments, templates and every attribute
    doc = JustHTML(html, strict=strict, encoding=encoding, sanitize=False)
    logger.debug("parsed %s input (strict=%s)", type(html).__name__, strict)
    return Node(doc.root)


def parse(
    stream: Any,
    *filters: Filter | None,
    strict: bool = False,
    encoding: str | None = None,
) -> Node:
    """
    Parse HTML and return the first node matched by the filter chain.

    With no filters the document root itself is returned.

    Raises:
        NoMatchError: If the document parsed but nothing matched
    """
    root = parse_document(stream, strict=strict, encoding=encoding)
    node, ok = root.find_node(*filters)
    if not ok:
        raise NoMatchError("htmlnode.parse: no node matched the filter chain")
    return node
