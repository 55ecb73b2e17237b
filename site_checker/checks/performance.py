"""Load time thresholds and qualitative score."""
from __future__ import annotations

from bs4 import BeautifulSoup

from site_checker.config import CheckOptions
from site_checker.crawler.models import PageRecord

SLOW_MS = 4000
IMPROVABLE_MS = 2500
GOOD_MS = 2500
EXCELLENT_MS = 1000


def performance_score(loading_time: float) -> str:
    if loading_time < EXCELLENT_MS:
        return "excellent"
    if loading_time < GOOD_MS:
        return "good"
    if loading_time < SLOW_MS:
        return "needs-improvement"
    return "poor"


def check_performance(options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
    if not page.loading_time:
        return

    if page.loading_time > SLOW_MS:
        page.errors.append(f"Performance: Page load time too slow ({round(page.loading_time)}ms)")
    elif page.loading_time > IMPROVABLE_MS:
        page.warnings.append(
            f"Performance: Page load time could be improved ({round(page.loading_time)}ms)"
        )

    page.performance_score = performance_score(page.loading_time)
