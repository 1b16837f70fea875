"""Composite tree nodes.

A node is either a ``Leaf`` holding a payload or a ``Container`` holding an
ordered list of child nodes. The kind is fixed at construction. Containers own
their children; children keep no reference to their parent, so cycle checks
search downward from the node being inserted.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from enum import Enum
from itertools import zip_longest
from typing import Any, Iterator, List, Tuple

from patternkit.domain.composite.exceptions import CycleError, NotAContainerError
from patternkit.domain.core.exceptions import ValidationError


class NodeKind(str, Enum):
    """Node kind discriminant."""
    LEAF = "leaf"
    CONTAINER = "container"


class Node(ABC):
    """Common contract for leaves and containers."""

    kind: NodeKind

    @property
    def is_leaf(self) -> bool:
        return self.kind is NodeKind.LEAF

    @property
    @abstractmethod
    def name(self) -> str:
        """Single-line text shown for this node when the tree is described."""

    @property
    def children(self) -> Tuple[Node, ...]:
        return ()

    def add(self, child: Node) -> None:
        raise NotAContainerError(self.name)

    def remove(self, child: Node) -> None:
        raise NotAContainerError(self.name)

    def walk(self) -> Iterator[Tuple[int, Node]]:
        """Yield ``(depth, node)`` pairs in pre-order, starting at depth 0."""
        stack: List[Tuple[int, Node]] = [(0, self)]
        while stack:
            level, node = stack.pop()
            yield level, node
            # reversed so the first child is visited first
            for child in reversed(node.children):
                stack.append((level + 1, child))

    def count(self) -> int:
        return sum(1 for _ in self.walk())


class Leaf(Node):
    """Terminal node holding a payload."""

    kind = NodeKind.LEAF

    def __init__(self, payload: Any):
        self._payload = payload

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def name(self) -> str:
        describe = getattr(self._payload, "describe", None)
        text = str(describe()) if callable(describe) else str(self._payload)
        return " ".join(text.splitlines())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Leaf):
            return NotImplemented
        return self._payload == other._payload

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Leaf({self._payload!r})"


class Container(Node):
    """Node holding an ordered sequence of children."""

    kind = NodeKind.CONTAINER

    def __init__(self, label: str):
        if not isinstance(label, str):
            raise ValidationError("Container label must be a string")
        if "".join(label.splitlines()) != label:
            raise ValidationError("Container label must be a single line", {"label": label})
        self._label = label
        self._children: List[Node] = []

    @property
    def label(self) -> str:
        return self._label

    @property
    def name(self) -> str:
        return self._label

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def add(self, child: Node) -> None:
        """
        Append ``child`` to this container.

        Raises:
            CycleError: If ``child`` is this container or contains it
            ValidationError: If ``child`` is not a node
        """
        if not isinstance(child, Node):
            raise ValidationError(f"Only nodes can be added to a container, got {type(child).__name__}")
        if child is self or _reaches(child, self):
            raise CycleError(self._label, child.name)
        self._children.append(child)

    def remove(self, child: Node) -> None:
        """Remove the first child equal to ``child``; no-op if absent."""
        for index, existing in enumerate(self._children):
            if existing is child or existing == child:
                del self._children[index]
                return

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Container):
            return NotImplemented
        # walked iteratively so deep trees compare without recursion
        for left, right in zip_longest(self.walk(), other.walk()):
            if left is None or right is None:
                return False
            (left_level, left_node), (right_level, right_node) = left, right
            if left_level != right_level or left_node.kind is not right_node.kind:
                return False
            if left_node.is_leaf:
                if left_node != right_node:
                    return False
            elif left_node._label != right_node._label:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Container({self._label!r}, children={len(self._children)})"


def _reaches(start: Node, target: Node) -> bool:
    """True if ``target`` is ``start`` or any node below it, by identity."""
    return any(node is target for _, node in start.walk())
