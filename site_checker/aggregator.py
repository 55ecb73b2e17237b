# File: site_checker/aggregator.py
"""site_checker.aggregator: collapses per-page findings into a crawl report."""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from aiohttp import ClientError

from site_checker.crawler.fetcher import Fetcher
from site_checker.crawler.models import PageRecord
from site_checker.logger import logger
from site_checker.utils import remove_duplicates


@dataclass(slots=True)
class CheckReport:
    """Outcome of one `check` run."""

    pages: Dict[str, PageRecord] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    total_errors: int = 0
    total_warnings: int = 0
    robots_txt_found: bool = True
    sitemap_xml_found: bool = True
    elapsed_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """pages.json layout: every page under its path, plus a `global` key."""
        data: Dict[str, Any] = {path: page.to_dict() for path, page in self.pages.items()}
        data["global"] = {"errors": self.errors, "warnings": self.warnings}
        return data

    def json(self, *, pretty: bool = True) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(
    pages: Mapping[str, PageRecord],
    robots_txt_found: bool = True,
    sitemap_xml_found: bool = True,
    elapsed_ms: float = 0.0,
) -> CheckReport:
    """Union of findings across pages (first-seen order) plus summed totals."""
    records = list(pages.values())
    return CheckReport(
        pages=dict(pages),
        errors=remove_duplicates([e for page in records for e in page.errors]),
        warnings=remove_duplicates([w for page in records for w in page.warnings]),
        total_errors=sum(len(page.errors) for page in records),
        total_warnings=sum(len(page.warnings) for page in records),
        robots_txt_found=robots_txt_found,
        sitemap_xml_found=sitemap_xml_found,
        elapsed_ms=elapsed_ms,
    )


async def probe_available(fetcher: Fetcher, url: str) -> bool:
    """True when *url* answers with a 2xx status."""
    try:
        response = await fetcher.fetch(url, read_body=False)
    except (ClientError, asyncio.TimeoutError) as exc:
        logger.warning("Probe of %s failed: %s", url, exc)
        return False
    return response.ok
