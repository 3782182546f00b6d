"""Shared HTML utilities for building trees from documents."""

from __future__ import annotations

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


def find_document_root(soup: BeautifulSoup) -> Tag | None:
    """Find the element that heads the document tree.

    Searches in the following order:
    1. <html> element
    2. <body> element
    3. The first element in the document
    Returns None when the document contains no elements at all.
    """
    if soup.html:
        return soup.html
    if soup.body:
        return soup.body
    return soup.find(True)


def child_tags(tag: Tag) -> list[Tag]:
    """Return the direct element children of ``tag``, skipping text and comments."""
    return [child for child in tag.children if isinstance(child, Tag)]
