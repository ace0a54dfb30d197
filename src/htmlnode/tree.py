# Read-only accessors over the raw DOM produced by justhtml
# Everything here takes raw nodes (or None) and never mutates them

from __future__ import annotations

from typing import Any


class NodeType:
    ERROR: str = "error"  # absent node
    DOCUMENT: str = "document"  # #document, #document-fragment
    ELEMENT: str = "element"
    TEXT: str = "text"  # #text
    COMMENT: str = "comment"  # #comment
    DOCTYPE: str = "doctype"  # !doctype


def node_type(node: Any | None) -> str:
    """Classify a raw node into one of the NodeType constants."""
    if node is None:
        return NodeType.ERROR
    name: str = node.name
    if name == "#text":
        return NodeType.TEXT
    if name == "#comment":
        return NodeType.COMMENT
    if name == "!doctype":
        return NodeType.DOCTYPE
    if name in ("#document", "#document-fragment"):
        return NodeType.DOCUMENT
    return NodeType.ELEMENT


def child_nodes(node: Any | None) -> list[Any]:
    """Return the raw children of a node (empty for leaves and None)."""
    if node is None:
        return []
    # Comments and doctypes carry children=None, text nodes an empty list
    return node.children or []


def parent_node(node: Any | None) -> Any | None:
    if node is None:
        return None
    parent: Any | None = node.parent
    return parent


def first_child_node(node: Any | None) -> Any | None:
    children = child_nodes(node)
    return children[0] if children else None


def last_child_node(node: Any | None) -> Any | None:
    children = child_nodes(node)
    return children[-1] if children else None


def sibling_node(node: Any | None, offset: int) -> Any | None:
    """Return the sibling `offset` positions away, or None past either edge."""
    parent = parent_node(node)
    if parent is None:
        return None
    siblings = child_nodes(parent)
    for index, child in enumerate(siblings):
        if child is node:
            target = index + offset
            if 0 <= target < len(siblings):
                return siblings[target]
            return None
    return None  # detached from its parent
