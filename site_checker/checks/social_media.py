"""Open Graph and Twitter card tags."""
from __future__ import annotations

from bs4 import BeautifulSoup

from site_checker.config import CheckOptions
from site_checker.crawler.models import PageRecord

OPEN_GRAPH_TAGS = ("og:title", "og:description", "og:image", "og:url", "og:type")
TWITTER_TAGS = ("twitter:title", "twitter:description", "twitter:image")


def check_social_media(options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
    if not options.social_media:
        return

    for tag in OPEN_GRAPH_TAGS:
        if document.find("meta", attrs={"property": tag}) is None:
            page.errors.append(f"SEO: Missing {tag} tag")

    for tag in TWITTER_TAGS:
        if document.find("meta", attrs={"name": tag}) is None:
            page.errors.append(f"SEO: Missing {tag} tag")
