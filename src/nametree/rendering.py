"""Plain-text views of a Node tree."""

from __future__ import annotations

from typing import Literal

from nametree.exceptions import InvalidTreeError
from nametree.schemas import Node

RenderStyle = Literal["tree", "outline"]


def render_tree(root: Node, *, style: RenderStyle = "tree") -> str:
    """Render ``root`` and its descendants one node per line, in pre-order.

    ``"tree"`` indents each level by four spaces; ``"outline"`` emits a
    Markdown bullet list indented by two spaces per level.
    """
    if not isinstance(root, Node):
        raise InvalidTreeError(f"Expected a Node, got {type(root).__name__}")
    if style == "tree":
        indent_unit, prefix = " " * 4, ""
    elif style == "outline":
        indent_unit, prefix = " " * 2, "- "
    else:
        raise ValueError(f"Unsupported render style: {style!r}")

    lines: list[str] = []
    stack = [(root, 0)]
    while stack:
        node, level = stack.pop()
        lines.append(indent_unit * level + prefix + node.name)
        stack.extend((child, level + 1) for child in reversed(node.children))
    return "\n".join(lines)
