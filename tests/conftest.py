"""Test setup for nametree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from nametree.schemas import Node  # noqa: E402


@pytest.fixture
def sample_tree() -> Node:
    """Tree ``A -> [B, C -> [B]]`` with a duplicate name at two depths."""
    return Node(
        name="A",
        children=[
            Node(name="B"),
            Node(name="C", children=[Node(name="B")]),
        ],
    )


@pytest.fixture
def wide_tree() -> Node:
    """Three-level tree whose pre-order names spell out r, a, a1, a2, b, b1, c."""
    return Node(
        name="r",
        children=[
            Node(name="a", children=[Node(name="a1"), Node(name="a2")]),
            Node(name="b", children=[Node(name="b1")]),
            Node(name="c"),
        ],
    )
