"""Depth-first search over named-node trees.

Every function here visits nodes in pre-order: a node before its descendants,
siblings left to right in stored order. Trees must be finite and acyclic; only
``validate_tree`` checks this, the others assume it.
"""

from __future__ import annotations

from typing import Iterator

from nametree.exceptions import CyclicTreeError, InvalidTreeError
from nametree.schemas import Node
from nametree.utils.logging_config import get_logger

logger = get_logger(__name__)


def iter_preorder(root: Node) -> Iterator[Node]:
    """Yield ``root`` and its descendants in pre-order, left to right.

    Uses an explicit stack, so tree depth is not bounded by the interpreter's
    recursion limit.

    Raises:
        InvalidTreeError: If ``root`` is not a Node.
    """
    _require_node(root)
    return _walk(root)


def _walk(root: Node) -> Iterator[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        # Reversed so the leftmost child is popped first.
        stack.extend(reversed(node.children))


def find_node_by_name(root: Node, name: str) -> Node | None:
    """Return the first node named ``name`` in pre-order, or None.

    The root is checked before any child, so a matching root always wins.
    Matching is exact and case-sensitive. A missing match is a normal outcome
    and is reported as None, never raised.

    Args:
        root: Head of a finite, acyclic tree. Not modified.
        name: Name to match.

    Returns:
        The first matching node, or None when no node matches.

    Raises:
        InvalidTreeError: If ``root`` is not a Node.
        TypeError: If ``name`` is not a string.
    """
    _require_name(name)
    for node in iter_preorder(root):
        if node.name == name:
            logger.debug("Node found", extra={"target": name})
            return node
    logger.debug("No node matched", extra={"target": name})
    return None


def find_all_by_name(root: Node, name: str) -> list[Node]:
    """Return every node named ``name``, in pre-order."""
    _require_name(name)
    return [node for node in iter_preorder(root) if node.name == name]


def find_path_by_name(root: Node, name: str) -> list[Node] | None:
    """Return the nodes from ``root`` down to the first match, inclusive.

    The match is the same node ``find_node_by_name`` returns; the preceding
    entries are its ancestors. Returns None when nothing matches.
    """
    _require_name(name)
    _require_node(root)

    # Each entry holds a node and an iterator over its remaining children;
    # the nodes on the stack are exactly the current path.
    stack: list[tuple[Node, Iterator[Node]]] = []
    node: Node | None = root
    while True:
        if node is not None:
            if node.name == name:
                return [entry[0] for entry in stack] + [node]
            stack.append((node, iter(node.children)))
        if not stack:
            return None
        node = next(stack[-1][1], None)
        if node is None:
            stack.pop()


def count_nodes(root: Node) -> int:
    """Count all nodes in the tree, including the root."""
    return sum(1 for _ in iter_preorder(root))


def tree_depth(root: Node) -> int:
    """Return the number of levels in the tree (a lone root has depth 1)."""
    _require_node(root)
    depth = 0
    stack = [(root, 1)]
    while stack:
        node, level = stack.pop()
        depth = max(depth, level)
        stack.extend((child, level + 1) for child in node.children)
    return depth


def validate_tree(root: Node) -> int:
    """Check that ``root`` heads a strict tree and return its node count.

    Raises:
        InvalidTreeError: If ``root`` or any child is not a Node.
        CyclicTreeError: If a node is reachable more than once, either
            through a cycle or because a subtree is shared by two parents.
    """
    _require_node(root)
    seen: set[int] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise CyclicTreeError(f"Node {node.name!r} is reachable more than once")
        seen.add(id(node))
        for child in node.children:
            _require_node(child)
            stack.append(child)
    return len(seen)


def _require_node(node: object) -> None:
    if not isinstance(node, Node):
        raise InvalidTreeError(f"Expected a Node, got {type(node).__name__}")


def _require_name(name: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"name must be a str, got {type(name).__name__}")
