# site_checker/crawler/fetcher.py
"""
Fetcher module: the HTTP collaborator used by the crawl engine and the checks.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Mapping, Optional

from aiohttp import ClientSession, ClientTimeout

from site_checker.config import CrawlConfig
from site_checker.logger import logger


@dataclass(slots=True)
class FetchResponse:
    """Status, headers and body of one response."""

    url: str
    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    charset: Optional[str] = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "").lower()

    def text(self) -> str:
        try:
            return self.body.decode(self.charset or "utf-8", errors="replace")
        except LookupError:
            # unknown charset label
            return self.body.decode("utf-8", errors="replace")


class Fetcher:
    """Thin wrapper over an aiohttp session. No retries, no rate limiting."""

    def __init__(self, config: CrawlConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.request_timeout),
                headers={"User-Agent": self.config.user_agent},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str, read_body: bool = True) -> FetchResponse:
        """
        GET *url* and return its response; elapsed covers the whole body read.

        Transport errors (aiohttp.ClientError, asyncio.TimeoutError) propagate
        to the caller.
        """
        if not self.session:
            raise RuntimeError("Session not initialized")
        start = time.perf_counter()
        async with self.session.get(url) as resp:
            body = await resp.read() if read_body else b""
            elapsed = (time.perf_counter() - start) * 1000
            logger.debug("GET %s -> %s (%.0f ms)", url, resp.status, elapsed)
            return FetchResponse(
                url=url,
                status=resp.status,
                headers={k.lower(): v for k, v in resp.headers.items()},
                body=body,
                charset=resp.charset,
                elapsed=elapsed,
            )
