"""Shared schemas for nametree."""

from nametree.schemas.node import Node

__all__ = ["Node"]
