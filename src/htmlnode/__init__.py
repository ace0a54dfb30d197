from .filter import Filter, filter_nodes, find_node, get_node, valid_filters
from .node import Attribute, Node
from .parser import NoMatchError, parse, parse_document
from .tree import NodeType

__all__ = [
    "Attribute",
    "Filter",
    "NoMatchError",
    "Node",
    "NodeType",
    "filter_nodes",
    "find_node",
    "get_node",
    "parse",
    "parse_document",
    "valid_filters",
]
