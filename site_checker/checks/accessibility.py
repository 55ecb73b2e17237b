"""Accessible names for links/buttons, image alt text and SVG semantics."""
from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_checker.config import CheckOptions
from site_checker.crawler.models import PageRecord
from site_checker.parser.html_parser import is_aria_hidden, opening_tag

INTERACTIVE_SELECTOR = "a:not([aria-label]), [role=button]:not([aria-label]), button:not([aria-label])"


def has_accessible_content(element: Tag) -> bool:
    """True if *element* or one of its descendants carries text or an aria-label."""
    stack = [element]
    while stack:
        node = stack.pop()
        if node.get("aria-label") or node.get_text().strip():
            return True
        stack.extend(child for child in node.children if isinstance(child, Tag))
    return False


def check_accessibility(options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
    if not options.accessibility:
        return

    for element in document.select(INTERACTIVE_SELECTOR):
        if not is_aria_hidden(element) and not has_accessible_content(element):
            page.errors.append(f"Accessibility: Not labelled link/button: {opening_tag(element)}")

    for element in document.select("img:not([alt])"):
        if not is_aria_hidden(element):
            page.errors.append(f"Accessibility: Image without alt: {opening_tag(element)}")

    for element in document.select("svg:not([role=img])"):
        if not is_aria_hidden(element):
            page.warnings.append(f"Accessibility: SVG without role=img: {opening_tag(element)}")

    for element in document.select("svg:not([aria-label])"):
        if not is_aria_hidden(element):
            page.errors.append(f"Accessibility: SVG without aria-label: {opening_tag(element)}")
