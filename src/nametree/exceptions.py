"""Custom exceptions for nametree."""


class NametreeError(Exception):
    """Base exception for nametree operations."""


class TreeError(NametreeError):
    """A tree does not satisfy the preconditions of an operation."""


class InvalidTreeError(TreeError):
    """Root is missing or is not a Node."""


class CyclicTreeError(TreeError):
    """A node is reachable more than once (cycle or shared subtree)."""


class ParseError(NametreeError):
    """Error while building a tree from external input."""
