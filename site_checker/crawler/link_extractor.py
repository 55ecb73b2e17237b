# site_checker/crawler/link_extractor.py
"""
Link extraction for the SiteChecker crawl engine.
"""
from __future__ import annotations

from typing import Collection, List

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_checker.utils import path_key, resolve_url, same_origin


def extract_links(document: BeautifulSoup, base_url: str, known: Collection[str] = ()) -> List[str]:
    """
    Return same-origin link keys found in *document*, in document order.

    Every ``<a href>`` is resolved against *base_url*; links on another origin
    (including mailto:, javascript: and friends) are dropped, as are keys in
    *known* and keys already collected by this call.
    """
    links: List[str] = []
    seen = set(known)
    for tag in document.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href_val = tag.get("href")
        if not isinstance(href_val, str):
            continue
        try:
            absolute = resolve_url(href_val.strip(), base_url)
        except ValueError:
            # malformed href, e.g. an unterminated IPv6 host
            continue
        if not same_origin(absolute, base_url):
            continue
        key = path_key(absolute)
        if key not in seen:
            seen.add(key)
            links.append(key)
    return links
