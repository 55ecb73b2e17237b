"""SEO rules: title, meta description, h1 length, anchors and images."""
from __future__ import annotations

import asyncio

from aiohttp import ClientError
from bs4 import BeautifulSoup

from site_checker.config import CheckOptions
from site_checker.crawler.fetcher import Fetcher
from site_checker.crawler.models import PageRecord
from site_checker.logger import logger
from site_checker.parser.html_parser import document_title, opening_tag
from site_checker.utils import resolve_url

# Glyph widths (px) of a 20px sans-serif font, as rendered in a SERP title.
CHAR_WIDTHS: dict[str, float] = {
    "0": 11.484375, "1": 11.484375, "2": 11.484375, "3": 11.484375, "4": 11.484375,
    "5": 11.484375, "6": 11.484375, "7": 11.484375, "8": 11.484375, "9": 11.484375,
    "A": 13.46875, "B": 12.765625, "C": 13.09375, "D": 13, "E": 11.25, "F": 10.96875,
    "G": 13.625, "H": 14.140625, "I": 5.84375, "J": 11.171875, "K": 12.703125,
    "L": 10.84375, "M": 17.53125, "N": 14.125, "O": 13.8125, "P": 12.90625,
    "Q": 13.8125, "R": 12.765625, "S": 12.296875, "T": 12.375, "U": 13.171875,
    "V": 13.078125, "W": 17.5, "X": 12.71875, "Y": 12.375, "Z": 12.125,
    "a": 10.734375, "b": 11.265625, "c": 10.4375, "d": 11.28125, "e": 10.8125,
    "f": 6.9375, "g": 11.421875, "h": 11.203125, "i": 5.3125, "j": 5.203125,
    "k": 10.6875, "l": 5.3125, "m": 17.328125, "n": 11.203125, "o": 11.3125,
    "p": 11.265625, "q": 11.3125, "r": 7.296875, "s": 10.296875, "t": 6.765625,
    "u": 11.203125, "v": 10.109375, "w": 14.703125, "x": 10.1875, "y": 10.046875,
    "z": 10.1875, "-": 7.765625, " ": 4.984375,
}
AVERAGE_CHAR_WIDTH = sum(CHAR_WIDTHS.values()) / len(CHAR_WIDTHS)
MAX_TITLE_WIDTH = 550
MAX_H1_WORDS = 12


def title_width(title: str) -> float:
    return sum(CHAR_WIDTHS.get(char, AVERAGE_CHAR_WIDTH) for char in title)


def title_overflows(title: str) -> bool:
    return title_width(title) > MAX_TITLE_WIDTH


def check_seo(options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
    if not options.seo:
        return

    title = document_title(document)
    if not title:
        page.errors.append("SEO: Missing title")
    elif title_overflows(title):
        page.warnings.append("SEO: Title too long")

    if document.select_one('meta[name="description"]') is None:
        page.errors.append("SEO: Missing meta description tag")

    h1_texts = [h.get_text().strip() for h in document.find_all("h1")]
    for heading in h1_texts:
        if len(heading.split(" ")) > MAX_H1_WORDS:
            page.warnings.append(f"SEO: H1 too long: {heading}")

    for element in document.select("a:not([href])"):
        page.errors.append(f"SEO: Link without href: {opening_tag(element)}")


class ImageCheck:
    """Fetches every ``<img src>`` and checks it answers with an image."""

    def __init__(self, fetcher: Fetcher) -> None:
        self.fetcher = fetcher

    async def __call__(self, options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
        if not options.seo:
            return

        for element in document.select("img[src]"):
            src = element.get("src")
            if not isinstance(src, str):
                continue
            try:
                url = src if src.startswith("http") else resolve_url(src, page.path)
                response = await self.fetcher.fetch(url, read_body=False)
            except (ClientError, asyncio.TimeoutError, ValueError) as exc:
                logger.debug("Image %s on %s failed: %s", src, page.path, exc)
                page.errors.append(f"SEO: Image not reachable: {src} - {exc}")
                continue
            if not response.ok:
                page.errors.append(f"SEO: Image not reachable: {url}")
            elif not response.content_type.startswith("image"):
                page.errors.append(f"SEO: Not an image: {url}")
