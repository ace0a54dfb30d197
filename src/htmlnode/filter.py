# Filter chain traversal for htmlnode
# Walks a subtree depth-first applying an ordered chain of predicates

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from .tree import child_nodes

if TYPE_CHECKING:
    from .node import Node

Filter = Callable[["Node"], bool]

logger = logging.getLogger(__name__)

_DONE = object()


def valid_filters(filters: Iterable[Filter | None]) -> list[Filter]:
    """Drop None entries from a chain, rejecting anything that is not callable."""
    chain: list[Filter] = []
    for f in filters:
        if f is None:
            continue
        if not callable(f):
            raise TypeError(f"Filters must be callable or None, got {type(f).__name__}")
        chain.append(f)
    return chain


def _match_any(node: Node) -> bool:  # noqa: ARG001
    return True


class _Frame:
    """A visited node waiting on its children.

    Children are walked twice: first with the rest of the chain (only when
    this node passed the head filter), then with the whole chain restarted.
    `start` and `finish` bound the results of the first walk so the second
    can be de-duplicated against them.
    """

    __slots__ = ("advancing", "candidate", "chain", "children", "depth", "finish", "match", "pending", "start")

    candidate: Node
    chain: tuple[Filter, ...]
    children: list[Any]
    depth: int
    match: Node | None
    advancing: bool
    pending: Iterator[Any]
    start: int
    finish: int


class _Traversal:
    """State for a single filter_nodes call."""

    __slots__ = ("find", "make", "results")

    make: Callable[[Any | None, int, Node | None], Node]
    find: bool
    results: list[Node]

    def __init__(self, make: Callable[[Any | None, int, Node | None], Node], find: bool) -> None:
        self.make = make
        self.find = find
        self.results = []

    def _enter(self, raw: Any, depth: int, match: Node | None, chain: tuple[Filter, ...]) -> _Frame:
        frame = _Frame()
        frame.candidate = self.make(raw, depth, match)
        frame.chain = chain
        frame.children = child_nodes(raw)
        frame.depth = depth
        frame.match = match
        frame.advancing = True
        frame.start = len(self.results)
        frame.finish = frame.start

        passed = chain[0](frame.candidate)
        if passed and len(chain) == 1:
            self.results.append(frame.candidate)
            frame.pending = iter(())
        elif passed:
            frame.pending = iter(frame.children)
        else:
            frame.pending = iter(())
        return frame

    def run(self, raw: Any, depth: int, match: Node | None, chain: tuple[Filter, ...]) -> list[Node]:
        results = self.results
        stack = [self._enter(raw, depth, match, chain)]
        while stack:
            if self.find and results:
                break

            frame = stack[-1]
            child = next(frame.pending, _DONE)
            if child is not _DONE:
                if frame.advancing:
                    # The next filter applies to the children of the node that passed
                    stack.append(self._enter(child, frame.depth + 1, frame.candidate, frame.chain[1:]))
                else:
                    stack.append(self._enter(child, frame.depth + 1, frame.match, frame.chain))
                continue

            if frame.advancing:
                # Restart the whole chain below this node so deeper matches are found too
                frame.advancing = False
                frame.finish = len(results)
                frame.pending = iter(frame.children)
                continue

            stack.pop()
            if frame.start < frame.finish < len(results):
                seen = {id(node.data) for node in results[frame.start : frame.finish]}
                results[frame.finish :] = [node for node in results[frame.finish :] if id(node.data) not in seen]
        return results


def filter_nodes(start: Node, *filters: Filter | None, find: bool = False) -> list[Node]:
    """
    Return the nodes under `start` (inclusive) matched by a filter chain.

    A node passing filter i lets filter i+1 be tested against its children,
    and every node also restarts the full chain for its own descendants.
    Results are in order of first discovery, each underlying node at most
    once. An empty chain matches every node. With `find=True` the walk stops
    at the first result. The walk keeps an explicit stack, so document depth
    is not bounded by the interpreter's recursion limit.

    Args:
        start: The handle to search from
        filters: Predicates applied in order, None entries are ignored
        find: Stop after the first match

    Returns:
        A list of matching handles, each with `match` set to the handle that
        satisfied the previous filter of its chain
    """
    chain = valid_filters(filters) or [_match_any]
    if start.data is None:
        return []

    traversal = _Traversal(type(start), find)
    results = traversal.run(start.data, start.depth, start.match, tuple(chain))
    logger.debug("filter chain of %d matched %d node(s)", len(chain), len(results))
    return results


def find_node(start: Node, *filters: Filter | None) -> tuple[Node, bool]:
    """Return the first node matched by the chain and True, or an absent Node and False."""
    nodes = filter_nodes(start, *filters, find=True)
    if not nodes:
        return type(start)(), False
    return nodes[0], True


def get_node(start: Node, *filters: Filter | None) -> Node:
    """Return the first node matched by the chain, or an absent Node."""
    node, _ = find_node(start, *filters)
    return node
