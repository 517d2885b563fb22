"""CSS structural queries over parsed documents.

All helpers are total: a selector without matches yields an empty list, an
empty string or zero rather than an error.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


def select_nodes(selector: str, root: BeautifulSoup | Tag) -> list[Tag]:
    return [node for node in root.select(selector) if isinstance(node, Tag)]


def node_text(node: Tag | None) -> str:
    if not isinstance(node, Tag):
        return ""
    return node.get_text().strip()


def select_text(selector: str, root: BeautifulSoup | Tag) -> str:
    """Text content of the first node matching ``selector``."""
    return node_text(root.select_one(selector))


def node_attr(node: Tag | None, attr: str) -> str:
    if not isinstance(node, Tag):
        return ""
    value = node.get(attr)
    # Multi-valued attributes such as ``class`` come back as lists.
    if isinstance(value, list):
        return " ".join(value)
    return value if isinstance(value, str) else ""


def select_count(selector: str, root: BeautifulSoup | Tag) -> int:
    return len(root.select(selector))
