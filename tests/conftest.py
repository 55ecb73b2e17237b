# File: tests/conftest.py
import asyncio
from collections.abc import AsyncIterator
from typing import Dict, List, Union

from aiohttp import web

from site_checker.crawler.fetcher import FetchResponse


def html_response(url: str, body: str, status: int = 200) -> FetchResponse:
    return FetchResponse(
        url=url,
        status=status,
        headers={"content-type": "text/html; charset=utf-8"},
        body=body.encode("utf-8"),
        charset="utf-8",
        elapsed=12.0,
    )


class FakeFetcher:
    """In-memory stand-in for Fetcher: answers from a url -> response/exception table."""

    def __init__(self, routes: Dict[str, Union[FetchResponse, Exception]]) -> None:
        self.routes = routes
        self.calls: List[str] = []

    async def __aenter__(self) -> "FakeFetcher":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    async def fetch(self, url: str, read_body: bool = True) -> FetchResponse:
        self.calls.append(url)
        await asyncio.sleep(0)
        answer = self.routes.get(url)
        if answer is None:
            return FetchResponse(url=url, status=404, headers={"content-type": "text/plain"})
        if isinstance(answer, Exception):
            raise answer
        return answer


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}"
    finally:
        await runner.cleanup()
