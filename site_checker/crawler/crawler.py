# === FILE: site_checker/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import inspect
import time
from typing import Awaitable, Callable, Dict, Generic, List, Optional, Sequence, Set, TypeVar

from aiohttp import ClientError

from site_checker.checks import Check
from site_checker.config import CheckOptions
from site_checker.crawler.fetcher import Fetcher
from site_checker.crawler.link_extractor import extract_links
from site_checker.crawler.models import FrontierEntry, PageRecord, SitemapPage
from site_checker.logger import logger
from site_checker.parser.html_parser import document_title, parse_document
from site_checker.utils import resolve_url

__all__ = (
    "CrawlObserver",
    "LoggingObserver",
    "CrawlEngine",
    "CheckWorker",
    "SitemapWorker",
    "CHECKER_SKIP_SUFFIXES",
)

R = TypeVar("R")
Worker = Callable[[FrontierEntry, Dict[str, R]], Awaitable[List[FrontierEntry]]]

CHECKER_SKIP_SUFFIXES: Sequence[str] = ("sitemap.xml", "robots.txt")


class CrawlObserver:
    """Progress callbacks. The default implementation ignores everything."""

    def on_fetch_start(self, url: str) -> None:
        pass

    def on_fetch_complete(self, url: str, status: int, loading_time: float) -> None:
        pass

    def on_page_error(self, url: str, reason: str) -> None:
        pass


class LoggingObserver(CrawlObserver):
    """Reports crawl progress through the project logger."""

    def on_fetch_start(self, url: str) -> None:
        logger.info("[checking] %s", url)

    def on_fetch_complete(self, url: str, status: int, loading_time: float) -> None:
        logger.debug("[fetch] %s -> %s in %d ms", url, status, round(loading_time))

    def on_page_error(self, url: str, reason: str) -> None:
        logger.warning("[error] %s: %s", url, reason)


class CrawlEngine(Generic[R]):
    """
    Batch-synchronised breadth-first crawl.

    The frontier is consumed in FIFO batches of ``max_concurrency`` entries;
    each batch runs concurrently and is awaited in full before the next one
    starts. Returned candidates are appended to the frontier, which is then
    deduplicated by path keeping the first (shallowest) occurrence.
    """

    def __init__(
        self,
        base_url: str,
        worker: Worker[R],
        max_concurrency: int = 15,
        skip_suffixes: Sequence[str] = (),
        max_depth: Optional[int] = None,
        max_pages: Optional[int] = None,
    ) -> None:
        self.base_url = base_url
        self.worker = worker
        self.batch_size = max(max_concurrency, 1)
        self.skip_suffixes = tuple(skip_suffixes)
        self.max_depth = max_depth
        self.max_pages = max_pages

    def _should_skip(self, entry: FrontierEntry, store: Dict[str, R], dispatched: Set[str]) -> bool:
        path = entry.path
        if path in store or path in dispatched:
            return True
        if path.startswith("http") or path.endswith(self.skip_suffixes):
            return True
        if self.max_depth is not None and entry.depth > self.max_depth:
            return True
        return self.max_pages is not None and len(dispatched) >= self.max_pages

    async def crawl(self) -> Dict[str, R]:
        logger.info("Crawl started: %s", self.base_url)
        start = time.monotonic()
        store: Dict[str, R] = {}
        # paths dispatched during this run
        dispatched: Set[str] = set()
        frontier: List[FrontierEntry] = [FrontierEntry("/", 1)]
        batches = 0

        while frontier:
            pulled, frontier = frontier[: self.batch_size], frontier[self.batch_size:]
            batch: List[FrontierEntry] = []
            for entry in pulled:
                if not self._should_skip(entry, store, dispatched):
                    dispatched.add(entry.path)
                    batch.append(entry)

            results = await asyncio.gather(*(self.worker(entry, store) for entry in batch))
            batches += 1

            for found in results:
                frontier.extend(found)
            frontier = self._dedupe(frontier, store, dispatched)

        duration = time.monotonic() - start
        logger.info("Crawl finished: %d pages in %d batches, %.2f s", len(store), batches, duration)
        return store

    def _dedupe(
        self, frontier: List[FrontierEntry], store: Dict[str, R], dispatched: Set[str]
    ) -> List[FrontierEntry]:
        seen: Set[str] = set()
        unique: List[FrontierEntry] = []
        for entry in frontier:
            if entry.path in seen or entry.path in store or entry.path in dispatched:
                continue
            seen.add(entry.path)
            unique.append(entry)
        return unique


class CheckWorker:
    """Fetches one page, runs every check on it and returns its new links."""

    def __init__(
        self,
        fetcher: Fetcher,
        base_url: str,
        checks: Sequence[Check],
        options: CheckOptions,
        observer: Optional[CrawlObserver] = None,
    ) -> None:
        self.fetcher = fetcher
        self.base_url = base_url
        self.checks = list(checks)
        self.options = options
        self.observer = observer or CrawlObserver()

    async def __call__(self, entry: FrontierEntry, store: Dict[str, PageRecord]) -> List[FrontierEntry]:
        url = resolve_url(entry.path, self.base_url)
        self.observer.on_fetch_start(url)
        try:
            response = await self.fetcher.fetch(url)
        except (ClientError, asyncio.TimeoutError) as exc:
            reason = str(exc) or type(exc).__name__
            self.observer.on_page_error(url, reason)
            store[entry.path] = PageRecord(path=url, depth=entry.depth, errors=[f"Fetch error: {reason}"])
            return []
        self.observer.on_fetch_complete(url, response.status, response.elapsed)

        if "text/html" not in response.content_type:
            logger.debug("Skipping non-HTML %s (%s)", url, response.content_type or "no content-type")
            return []

        if not response.ok:
            self.observer.on_page_error(url, f"HTTP {response.status}")
            store[entry.path] = PageRecord(
                path=url,
                depth=entry.depth,
                errors=[f"HTTP error: {response.status}"],
                loading_time=response.elapsed,
            )
            return []

        document = parse_document(response.text())
        page = PageRecord(
            path=url,
            depth=entry.depth,
            title=document_title(document),
            loading_time=response.elapsed,
        )
        for check in self.checks:
            result = check(self.options, document, page)
            if inspect.isawaitable(result):
                await result

        links = extract_links(document, self.base_url, known=store.keys())
        store[entry.path] = page
        return [FrontierEntry(link, entry.depth + 1) for link in links]


class SitemapWorker:
    """Fetches one page and records its depth; no checks are run."""

    def __init__(self, fetcher: Fetcher, base_url: str, observer: Optional[CrawlObserver] = None) -> None:
        self.fetcher = fetcher
        self.base_url = base_url
        self.observer = observer or CrawlObserver()

    async def __call__(self, entry: FrontierEntry, store: Dict[str, SitemapPage]) -> List[FrontierEntry]:
        url = resolve_url(entry.path, self.base_url)
        self.observer.on_fetch_start(url)
        try:
            response = await self.fetcher.fetch(url)
        except (ClientError, asyncio.TimeoutError) as exc:
            self.observer.on_page_error(url, str(exc) or type(exc).__name__)
            store[entry.path] = SitemapPage(path=url, depth=entry.depth, error=True)
            return []
        self.observer.on_fetch_complete(url, response.status, response.elapsed)

        if not response.ok:
            self.observer.on_page_error(url, f"HTTP {response.status}")
            store[entry.path] = SitemapPage(path=url, depth=entry.depth, error=True)
            return []

        store[entry.path] = SitemapPage(path=url, depth=entry.depth)
        if "text/html" not in response.content_type:
            return []
        document = parse_document(response.text())
        links = extract_links(document, self.base_url, known=store.keys())
        return [FrontierEntry(link, entry.depth + 1) for link in links]
