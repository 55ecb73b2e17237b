"""HTML parsing for SiteChecker.

Every check receives the same parsed document: a :class:`bs4.BeautifulSoup`
tree built with the stdlib ``html.parser`` backend. CSS selectors go through
``soupsieve`` (``document.select``), attribute reads through ``Tag.get`` and
text through ``Tag.get_text``.

``<style>`` blocks are dropped before the tree is handed to checks, so their
contents never leak into text-based rules.
"""
from __future__ import annotations

from collections.abc import Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("parse_document", "document_title", "opening_tag", "is_aria_hidden")


def parse_document(html: str) -> BeautifulSoup:
    """Parse *html* into a queryable document."""
    soup = BeautifulSoup(html, "html.parser")
    for element in soup.find_all("style"):
        element.decompose()
    return soup


def document_title(document: BeautifulSoup) -> str:
    """Text of the first ``<title>`` element, trimmed, or ``""``."""
    title_tag = document.find("title")
    return title_tag.get_text().strip() if title_tag else ""


def opening_tag(element: Tag) -> str:
    """Serialised opening tag of *element*, e.g. ``<img src="a.png">``."""
    markup = str(element)
    return markup[: markup.find(">") + 1]


def is_aria_hidden(element: Tag) -> bool:
    """True if *element* or any of its ancestors is ``aria-hidden``."""
    node: Tag | None = element
    while node is not None:
        if node.get("aria-hidden") in ("true", ""):
            return True
        node = node.parent
    return False
