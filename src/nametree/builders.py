"""Assemble Node trees from in-memory mappings and HTML documents."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from nametree.config import NAMETREE_HTML_PARSER
from nametree.exceptions import ParseError
from nametree.html_utils import child_tags, find_document_root
from nametree.schemas import Node
from nametree.utils.logging_config import get_logger

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = get_logger(__name__)


def tree_from_mapping(data: Mapping[str, Any]) -> Node:
    """Build a tree from nested ``{"name": ..., "children": [...]}`` mappings.

    Raises:
        ParseError: If the mapping does not describe a valid tree.
    """
    try:
        return Node.model_validate(data)
    except ValidationError as exc:
        raise ParseError(f"Invalid tree mapping: {exc.error_count()} error(s)\n{exc}") from exc


def tree_from_html(
    html: str,
    *,
    name_attr: str | None = None,
    parser: str | None = None,
) -> Node:
    """Build a tree with one node per element of an HTML document.

    Args:
        html: Document markup.
        name_attr: Attribute whose value names a node (e.g. ``"id"``). Elements
            without it are named by their tag name.
        parser: BeautifulSoup parser; defaults to ``NAMETREE_HTML_PARSER``.

    Returns:
        The root node, built from ``<html>``, ``<body>`` or the first element.

    Raises:
        ParseError: If the document contains no elements.
    """
    soup = BeautifulSoup(html, parser or NAMETREE_HTML_PARSER)
    document_root = find_document_root(soup)
    if document_root is None:
        raise ParseError("HTML document contains no elements")

    root = Node(name=_node_name(document_root, name_attr))
    stack: list[tuple[Tag, Node]] = [(document_root, root)]
    count = 1
    while stack:
        tag, node = stack.pop()
        for child_tag in child_tags(tag):
            child = Node(name=_node_name(child_tag, name_attr))
            node.children.append(child)
            stack.append((child_tag, child))
            count += 1

    logger.debug("Built tree from HTML", extra={"nodes": count, "root": root.name})
    return root


def _node_name(tag: Tag, name_attr: str | None) -> str:
    if name_attr:
        value = tag.get(name_attr)
        if isinstance(value, list):
            # Multi-valued attributes such as class come back as lists.
            value = " ".join(value)
        if value:
            return value
    return tag.name
