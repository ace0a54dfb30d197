# Ready-made filters for htmlnode chains
# Each builder returns a pure predicate over a Node handle

from __future__ import annotations

from typing import TYPE_CHECKING

from .filter import valid_filters
from .tree import NodeType

if TYPE_CHECKING:
    from .filter import Filter
    from .node import Node


def tag(*names: str) -> Filter:
    """Match elements whose tag is one of `names` (case-insensitive)."""
    wanted = frozenset(name.lower() for name in names)

    def matches(node: Node) -> bool:
        return node.node_type == NodeType.ELEMENT and node.tag.lower() in wanted

    return matches


def node_type(*types: str) -> Filter:
    """Match nodes of any of the given NodeType values."""
    wanted = frozenset(types)

    def matches(node: Node) -> bool:
        return node.node_type in wanted

    return matches


def has_attr(key: str, namespace: str = "") -> Filter:
    def matches(node: Node) -> bool:
        _, ok = node.get_attr(namespace, key)
        return ok

    return matches


def attr(key: str, value: str, namespace: str = "") -> Filter:
    """Match nodes carrying attribute `key` with exactly `value`."""

    def matches(node: Node) -> bool:
        attribute, ok = node.get_attr(namespace, key)
        return ok and attribute is not None and attribute.val == value

    return matches


def has_class(*names: str) -> Filter:
    """Match elements whose class list contains every one of `names`."""
    wanted = frozenset(names)

    def matches(node: Node) -> bool:
        classes = node.get_attr_val("", "class").split()
        return wanted.issubset(classes)

    return matches


def text_contains(substring: str) -> Filter:
    def matches(node: Node) -> bool:
        return substring in node.encode_text()

    return matches


def match_depth(depth: int) -> Filter:
    """
    Match nodes exactly `depth` levels below the previous match.

    Used after another filter, match_depth(1) restricts the next step to
    direct children of the node that passed it.
    """

    def matches(node: Node) -> bool:
        return node.match_depth() == depth

    return matches


def max_match_depth(depth: int) -> Filter:
    def matches(node: Node) -> bool:
        return node.match_depth() <= depth

    return matches


def all_of(*filters: Filter | None) -> Filter:
    """Match when every non-None filter matches (an empty set matches everything)."""
    chain = valid_filters(filters)

    def matches(node: Node) -> bool:
        return all(f(node) for f in chain)

    return matches


def any_of(*filters: Filter | None) -> Filter:
    """Match when at least one non-None filter matches."""
    chain = valid_filters(filters)

    def matches(node: Node) -> bool:
        return any(f(node) for f in chain)

    return matches


def negate(f: Filter) -> Filter:
    def matches(node: Node) -> bool:
        return not f(node)

    return matches
