"""Tree operations over composite nodes."""
from typing import Any, Iterator, List, Tuple

from patternkit.domain.composite.exceptions import TreeStructureError
from patternkit.domain.composite.node import Node
from patternkit.helpers.logger import get_logger

DEFAULT_INDENT = "  "

logger = get_logger(__name__)


def add_child(container: Node, child: Node) -> None:
    """
    Append ``child`` to ``container``.

    Raises:
        NotAContainerError: If ``container`` is a leaf
        CycleError: If ``child`` is ``container`` or one of its ancestors
    """
    try:
        container.add(child)
    except TreeStructureError as e:
        logger.warning("Rejected tree mutation", operation="add_child", error=str(e))
        raise


def remove_child(container: Node, child: Node) -> None:
    """
    Remove the first child of ``container`` equal to ``child``.

    Missing children are ignored.

    Raises:
        NotAContainerError: If ``container`` is a leaf
    """
    try:
        container.remove(child)
    except TreeStructureError as e:
        logger.warning("Rejected tree mutation", operation="remove_child", error=str(e))
        raise


def walk(node: Node) -> Iterator[Tuple[int, Node]]:
    """Pre-order ``(depth, node)`` pairs, children in insertion order."""
    return node.walk()


def describe(node: Node, indent: str = DEFAULT_INDENT) -> str:
    """
    Render the tree rooted at ``node``, one line per node.

    Each node is indented one ``indent`` unit deeper than its parent.
    """
    return "\n".join(f"{indent * level}{current.name}" for level, current in node.walk())


def count(node: Node) -> int:
    """Number of nodes in the tree, containers included."""
    return node.count()


def leaves(node: Node) -> List[Any]:
    """Leaf payloads in pre-order."""
    return [current.payload for _, current in node.walk() if current.is_leaf]


def depth(node: Node) -> int:
    """Number of levels in the tree; a lone leaf has depth 1."""
    return 1 + max((level for level, _ in node.walk()), default=0)
