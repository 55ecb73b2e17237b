# File: site_checker/engine.py
"""site_checker.engine: orchestration of the `check` and `generate` runs."""

from __future__ import annotations

import asyncio
import time
from typing import Dict, Optional

from aiohttp import ClientError

from site_checker.aggregator import CheckReport, aggregate_results, probe_available
from site_checker.checks import default_checks
from site_checker.config import CrawlConfig
from site_checker.crawler.crawler import (
    CHECKER_SKIP_SUFFIXES,
    CheckWorker,
    CrawlEngine,
    CrawlObserver,
    SitemapWorker,
)
from site_checker.crawler.fetcher import Fetcher
from site_checker.crawler.models import PageRecord, SitemapPage
from site_checker.logger import logger
from site_checker.report.sitemap import render_sitemap
from site_checker.utils import resolve_url

__all__ = ["SiteCheckerError", "SiteUnreachableError", "ensure_reachable", "start_check", "start_generate"]


class SiteCheckerError(Exception):
    """Base class for fatal SiteChecker errors."""


class SiteUnreachableError(SiteCheckerError):
    """The base URL could not be fetched at all."""


async def ensure_reachable(fetcher: Fetcher, base_url: str) -> None:
    """Raise SiteUnreachableError when *base_url* fails at the transport level."""
    try:
        await fetcher.fetch(base_url, read_body=False)
    except (ClientError, asyncio.TimeoutError) as exc:
        logger.error("URL not reachable %s: %s", base_url, exc)
        raise SiteUnreachableError(f"URL not reachable: {base_url}") from exc


async def start_check(
    config: CrawlConfig,
    observer: Optional[CrawlObserver] = None,
    fetcher: Optional[Fetcher] = None,
) -> CheckReport:
    """Crawl the site, run every check and aggregate the findings."""
    async with fetcher or Fetcher(config) as client:
        await ensure_reachable(client, config.base_url)

        start = time.perf_counter()
        worker = CheckWorker(client, config.base_url, default_checks(client), config.options, observer)
        engine: CrawlEngine[PageRecord] = CrawlEngine(
            config.base_url,
            worker,
            max_concurrency=config.max_concurrency,
            skip_suffixes=CHECKER_SKIP_SUFFIXES,
            max_depth=config.max_depth,
            max_pages=config.max_pages,
        )
        pages = await engine.crawl()
        elapsed_ms = (time.perf_counter() - start) * 1000

        robots_found = await probe_available(client, resolve_url("/robots.txt", config.base_url))
        sitemap_found = await probe_available(client, resolve_url("/sitemap.xml", config.base_url))

    return aggregate_results(pages, robots_found, sitemap_found, elapsed_ms)


async def crawl_sitemap(
    config: CrawlConfig,
    observer: Optional[CrawlObserver] = None,
    fetcher: Optional[Fetcher] = None,
) -> Dict[str, SitemapPage]:
    """Crawl the site recording only depth and failures."""
    async with fetcher or Fetcher(config) as client:
        await ensure_reachable(client, config.base_url)
        engine: CrawlEngine[SitemapPage] = CrawlEngine(
            config.base_url,
            SitemapWorker(client, config.base_url, observer),
            max_concurrency=config.max_concurrency,
            max_depth=config.max_depth,
            max_pages=config.max_pages,
        )
        return await engine.crawl()


async def start_generate(
    config: CrawlConfig,
    observer: Optional[CrawlObserver] = None,
    fetcher: Optional[Fetcher] = None,
) -> str:
    """Crawl the site and return the rendered sitemap XML."""
    start = time.perf_counter()
    pages = await crawl_sitemap(config, observer, fetcher)
    failed = sum(1 for page in pages.values() if page.error)
    logger.info(
        "[fetch] %d pages in %d ms, %d unavailable",
        len(pages),
        round((time.perf_counter() - start) * 1000),
        failed,
    )
    return render_sitemap(pages, decay=config.priority_decay)
