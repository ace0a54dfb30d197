from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from .filter import filter_nodes, find_node, get_node
from .tree import (
    NodeType,
    child_nodes,
    first_child_node,
    last_child_node,
    node_type,
    parent_node,
    sibling_node,
)

if TYPE_CHECKING:
    from .filter import Filter

# Prefixes of foreign attributes that are reported with a namespace
_ATTRIBUTE_NAMESPACES: frozenset[str] = frozenset({"xlink", "xml", "xmlns"})


class Attribute:
    __slots__ = ("key", "namespace", "val")

    namespace: str
    key: str
    val: str

    def __init__(self, namespace: str, key: str, val: str) -> None:
        self.namespace = namespace
        self.key = key
        self.val = val

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attribute):
            return NotImplemented
        return (self.namespace, self.key, self.val) == (other.namespace, other.key, other.val)

    def __hash__(self) -> int:
        return hash((self.namespace, self.key, self.val))

    def __repr__(self) -> str:
        return f"Attribute({self.namespace!r}, {self.key!r}, {self.val!r})"


def _to_attribute(name: str, value: str | None) -> Attribute:
    prefix, sep, local = name.partition(":")
    if sep and prefix in _ATTRIBUTE_NAMESPACES:
        return Attribute(prefix, local, value or "")
    return Attribute("", name, value or "")


class Node:
    """
    A position in a parsed document plus query metadata.

    `data` is the underlying justhtml node (None once navigation walks off the
    edge of the tree), `depth` is relative to wherever the current query
    started, and `match` is the handle that satisfied the previous filter of
    the chain that produced this one. Handles are immutable values, every
    navigation method returns a new one.
    """

    __slots__ = ("data", "depth", "match")

    data: Any | None
    depth: int
    match: Node | None

    def __init__(self, data: Any | None = None, depth: int = 0, match: Node | None = None) -> None:
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "depth", depth)
        object.__setattr__(self, "match", match)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"Node is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"Node is immutable, cannot delete {name!r}")

    def __bool__(self) -> bool:
        return self.data is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.data is other.data and self.depth == other.depth and self.match == other.match

    def __hash__(self) -> int:
        return hash((id(self.data), self.depth, self.match))

    def __repr__(self) -> str:
        label = "<absent>" if self.data is None else self.data.name
        return f"Node({label}, depth={self.depth}, match_depth={self.match_depth()})"

    def __str__(self) -> str:
        return self.encode_html()

    def _moved(self, data: Any | None, depth: int) -> Node:
        return Node(data, depth, self.match)

    # Queries

    def filter_nodes(self, *filters: Filter | None) -> list[Node]:
        """Return every node in this subtree matched by the filter chain."""
        return filter_nodes(self, *filters)

    def find_node(self, *filters: Filter | None) -> tuple[Node, bool]:
        """Return the first node matched by the filter chain, and whether there was one."""
        return find_node(self, *filters)

    def get_node(self, *filters: Filter | None) -> Node:
        """Like find_node, returning an absent Node when nothing matches."""
        return get_node(self, *filters)

    def match_depth(self) -> int:
        """Depth of this node below the last match (or below the query start)."""
        if self.match is None:
            return self.depth
        return self.depth - self.match.depth

    # Navigation

    def parent(self) -> Node:
        return self._moved(parent_node(self.data), self.depth - 1)

    def first_child(self) -> Node:
        return self._moved(first_child_node(self.data), self.depth + 1)

    def last_child(self) -> Node:
        return self._moved(last_child_node(self.data), self.depth + 1)

    def prev_sibling(self) -> Node:
        return self._moved(sibling_node(self.data, -1), self.depth)

    def next_sibling(self) -> Node:
        return self._moved(sibling_node(self.data, 1), self.depth)

    def children(self) -> list[Node]:
        return [self._moved(child, self.depth + 1) for child in child_nodes(self.data)]

    # Accessors

    @property
    def node_type(self) -> str:
        return node_type(self.data)

    @property
    def tag(self) -> str:
        """Tag name for element nodes, empty string for everything else."""
        if self.node_type == NodeType.ELEMENT:
            return str(self.data.name)
        return ""

    @property
    def text(self) -> str:
        """Own character data of a text or comment node."""
        if self.node_type in (NodeType.TEXT, NodeType.COMMENT):
            data = self.data.data
            if isinstance(data, str):
                return data
        return ""

    def attrs(self) -> list[Attribute]:
        if self.data is None:
            return []
        raw: dict[str, str | None] = getattr(self.data, "attrs", None) or {}
        return [_to_attribute(name, value) for name, value in raw.items()]

    def get_attr(self, namespace: str, key: str) -> tuple[Attribute | None, bool]:
        for attribute in self.attrs():
            if attribute.namespace == namespace and attribute.key == key:
                return attribute, True
        return None, False

    def get_attr_val(self, namespace: str, key: str) -> str:
        attribute, ok = self.get_attr(namespace, key)
        if not ok or attribute is None:
            return ""
        return attribute.val

    # Serialization

    def encode_html(self) -> str:
        """Compact markup of this subtree, rendered by justhtml."""
        if self.data is None:
            return ""
        return str(self.data.to_html(pretty=False))

    def encode_text(self) -> str:
        """All descendant text in document order, unstripped and unseparated."""
        if self.data is None:
            return ""
        return str(self.data.to_text(separator="", strip=False))

    def inner_html(self) -> str:
        return "".join(child.encode_html() for child in self.children())

    def inner_text(self) -> str:
        return "".join(child.encode_text() for child in self.children())
