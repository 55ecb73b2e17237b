"""site_checker.checks: the ordered battery of page checks.

A check is any callable ``(options, document, page)`` that appends strings to
``page.errors`` / ``page.warnings``. It may be a coroutine function; the crawl
engine awaits whatever it returns.
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Optional, Union

from bs4 import BeautifulSoup

from site_checker.checks.accessibility import check_accessibility
from site_checker.checks.aria_roles import check_aria_roles
from site_checker.checks.form_labels import check_form_labels
from site_checker.checks.headings import check_headings
from site_checker.checks.performance import check_performance
from site_checker.checks.seo import ImageCheck, check_seo
from site_checker.checks.social_media import check_social_media
from site_checker.config import CheckOptions
from site_checker.crawler.fetcher import Fetcher
from site_checker.crawler.models import PageRecord

Check = Callable[[CheckOptions, BeautifulSoup, PageRecord], Union[None, Awaitable[Any]]]


def default_checks(fetcher: Optional[Fetcher] = None) -> List[Check]:
    """Checks in the order they run. The image check needs a *fetcher*."""
    checks: List[Check] = [check_headings, check_seo]
    if fetcher is not None:
        checks.append(ImageCheck(fetcher))
    checks += [
        check_social_media,
        check_accessibility,
        check_aria_roles,
        check_form_labels,
        check_performance,
    ]
    return checks


__all__ = [
    "Check",
    "default_checks",
    "check_headings",
    "check_seo",
    "ImageCheck",
    "check_social_media",
    "check_accessibility",
    "check_aria_roles",
    "check_form_labels",
    "check_performance",
]
