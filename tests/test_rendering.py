"""Tests for tree rendering."""

from __future__ import annotations

import pytest

from nametree.exceptions import InvalidTreeError
from nametree.rendering import render_tree
from nametree.schemas import Node


def test_render_tree_style(wide_tree: Node) -> None:
    assert render_tree(wide_tree) == "\n".join(
        [
            "r",
            "    a",
            "        a1",
            "        a2",
            "    b",
            "        b1",
            "    c",
        ]
    )


def test_render_outline_style(sample_tree: Node) -> None:
    assert render_tree(sample_tree, style="outline") == "\n".join(
        [
            "- A",
            "  - B",
            "  - C",
            "    - B",
        ]
    )


def test_render_single_node() -> None:
    assert render_tree(Node(name="solo")) == "solo"


def test_rejects_unknown_style(sample_tree: Node) -> None:
    with pytest.raises(ValueError, match="Unsupported render style"):
        render_tree(sample_tree, style="json")  # type: ignore[arg-type]


def test_rejects_invalid_root() -> None:
    with pytest.raises(InvalidTreeError):
        render_tree(None)  # type: ignore[arg-type]
