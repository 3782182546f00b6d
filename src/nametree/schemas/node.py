"""Named-node tree model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Node(BaseModel):
    """A vertex of an n-ary tree.

    Each node owns its ``children`` list outright; subtrees are never shared
    between parents and there is no parent back-reference.
    """

    name: str
    children: list["Node"] = Field(default_factory=list)
