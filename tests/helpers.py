from __future__ import annotations

from typing import Any


class FakeNode:
    """Minimal stand-in for a justhtml node: the raw tree contract plus to_text."""

    __slots__ = ("attrs", "children", "data", "name", "namespace", "parent")

    def __init__(self, name: str, attrs: dict[str, str | None] | None = None, data: Any = None) -> None:
        self.name = name
        self.attrs = attrs
        self.data = data
        self.namespace = None if name.startswith("#") else "html"
        self.parent = None
        self.children: list[FakeNode] | None = None if name == "#comment" else []

    def to_text(self, separator: str = " ", strip: bool = True) -> str:
        if self.name == "#text":
            return (self.data or "").strip() if strip else (self.data or "")
        parts = [child.to_text(separator, strip) for child in self.children or []]
        return separator.join(part for part in parts if part)

    def append(self, *children: FakeNode) -> FakeNode:
        for child in children:
            child.parent = self
            self.children.append(child)
        return self

    def __repr__(self) -> str:
        label = self.attrs.get("id") if self.attrs else None
        return f"<{self.name}{' #' + label if label else ''}>"


def el(name: str, *children: FakeNode, **attrs: str) -> FakeNode:
    return FakeNode(name, {k.rstrip("_"): v for k, v in attrs.items()}).append(*children)


def text(data: str) -> FakeNode:
    return FakeNode("#text", data=data)


def comment(data: str) -> FakeNode:
    return FakeNode("#comment", data=data)


def document(*children: FakeNode) -> FakeNode:
    return FakeNode("#document").append(*children)


def walk(node: FakeNode) -> list[FakeNode]:
    """All raw nodes under `node` in document order."""
    out = [node]
    for child in node.children or []:
        out.extend(walk(child))
    return out


def nested(name: str, levels: int, leaf: FakeNode) -> FakeNode:
    """`levels` elements named `name`, each the only child of the previous, around `leaf`."""
    node = leaf
    for _ in range(levels):
        node = el(name, node)
    return document(node)
