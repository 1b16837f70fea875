"""Composite trees of leaves and containers."""

from .exceptions import CycleError, NotAContainerError, TreeStructureError
from .node import Container, Leaf, Node, NodeKind
from .tree import DEFAULT_INDENT, add_child, count, depth, describe, leaves, remove_child, walk

__all__ = [
    "CycleError",
    "NotAContainerError",
    "TreeStructureError",
    "Container",
    "Leaf",
    "Node",
    "NodeKind",
    "DEFAULT_INDENT",
    "add_child",
    "count",
    "depth",
    "describe",
    "leaves",
    "remove_child",
    "walk",
]
