"""Heading structure: h1 presence/uniqueness and level hierarchy."""
from __future__ import annotations

from bs4 import BeautifulSoup

from site_checker.config import CheckOptions
from site_checker.crawler.models import HEADING_LEVELS, PageRecord


def collect_headings(document: BeautifulSoup, page: PageRecord) -> None:
    for level in HEADING_LEVELS:
        page.headings[level] = [element.get_text().strip() for element in document.find_all(level)]


def check_headings(options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
    if not options.seo:
        return

    collect_headings(document, page)
    headings = page.headings

    if not headings["h1"]:
        page.errors.append("SEO: Missing h1")
    elif len(headings["h1"]) > 1:
        page.errors.append("SEO: Multiple h1")

    for level in range(2, 7):
        if not headings[f"h{level}"]:
            continue
        if not any(headings[f"h{parent}"] for parent in range(1, level)):
            page.errors.append(
                f"SEO: Heading hierarchy - h{level} used without any parent heading levels"
            )
        elif level > 2 and not headings[f"h{level - 1}"]:
            page.errors.append(f"SEO: Heading hierarchy - h{level} skips h{level - 1} level")
