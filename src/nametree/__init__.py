"""nametree: build and search trees of named nodes."""

from nametree.builders import tree_from_html, tree_from_mapping
from nametree.exceptions import (
    CyclicTreeError,
    InvalidTreeError,
    NametreeError,
    ParseError,
    TreeError,
)
from nametree.rendering import render_tree
from nametree.schemas import Node
from nametree.search import (
    count_nodes,
    find_all_by_name,
    find_node_by_name,
    find_path_by_name,
    iter_preorder,
    tree_depth,
    validate_tree,
)

__all__ = [
    "CyclicTreeError",
    "InvalidTreeError",
    "NametreeError",
    "Node",
    "ParseError",
    "TreeError",
    "count_nodes",
    "find_all_by_name",
    "find_node_by_name",
    "find_path_by_name",
    "iter_preorder",
    "render_tree",
    "tree_depth",
    "tree_from_html",
    "tree_from_mapping",
    "validate_tree",
]
