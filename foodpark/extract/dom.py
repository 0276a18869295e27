# foodpark/extract/dom.py
"""
Small navigation helpers over a parsed BeautifulSoup tree.

The one non-trivial piece is ascend_until(): every upward search in the
extractor (date header -> section container, location header -> section
container, order anchor -> name label) is the same walk over a node's
ancestors, stopping at the first ancestor the caller's predicate accepts and
giving up when the document root is reached first.

The tree is never mutated here.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag

NodePredicate = Callable[[Tag], bool]

# Parser used for fetched pages; html.parser keeps us free of lxml/html5lib.
HTML_PARSER = "html.parser"


# --- Ascend results ----------------------------------------------------------


@dataclass(frozen=True)
class Found:
    """The ancestor that satisfied the stop predicate."""

    node: Tag


class _NotFound:
    """Sentinel: the document root was reached before the predicate held."""

    _instance: _NotFound | None = None

    def __new__(cls) -> _NotFound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()

AscendResult = Found | _NotFound


# --- Navigation ----------------------------------------------------------------


def parse_html(html: str | bytes) -> BeautifulSoup:
    return BeautifulSoup(html, HTML_PARSER)


def is_document_root(node: Tag) -> bool:
    """True for the <html> element or the BeautifulSoup document itself."""
    return isinstance(node, BeautifulSoup) or node.name == "html"


def ascend_until(start: Tag, stop: NodePredicate) -> AscendResult:
    """
    Walk the ancestors of `start` (nearest first) and return Found(ancestor)
    for the first one where stop(ancestor) is true.

    `start` itself is never tested. The walk is bounded by the depth of the
    tree and ends with NOT_FOUND as soon as the document root is reached.
    """
    for ancestor in start.parents:
        if is_document_root(ancestor):
            return NOT_FOUND
        if stop(ancestor):
            return Found(ancestor)
    return NOT_FOUND


def previous_element_sibling(node: Tag) -> Tag | None:
    """Immediately preceding sibling element, skipping text and comments."""
    for sibling in node.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None


def has_previous_element_sibling(node: Tag) -> bool:
    return previous_element_sibling(node) is not None


def node_text(node: Tag) -> str:
    """All text under `node`, with surrounding whitespace trimmed."""
    return node.get_text().strip()


def selector_predicate(selector: str) -> NodePredicate:
    """Turn a CSS selector into a predicate testing a single element."""

    def _matches(node: Tag) -> bool:
        return bool(node.css.match(selector))

    return _matches


__all__ = [
    "Found",
    "NOT_FOUND",
    "AscendResult",
    "NodePredicate",
    "HTML_PARSER",
    "parse_html",
    "is_document_root",
    "ascend_until",
    "previous_element_sibling",
    "has_previous_element_sibling",
    "node_text",
    "selector_predicate",
]
