# site_checker/crawler/models.py
"""
Data models for the SiteChecker crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional

HEADING_LEVELS = ("h1", "h2", "h3", "h4", "h5", "h6")


def empty_headings() -> Dict[str, List[str]]:
    return {level: [] for level in HEADING_LEVELS}


class FrontierEntry(NamedTuple):
    """A discovered but not yet fetched page."""

    path: str
    depth: int


@dataclass(slots=True)
class PageRecord:
    """Result of the check pass for one page path."""

    path: str
    depth: int = 1
    title: str = ""
    headings: Dict[str, List[str]] = field(default_factory=empty_headings)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    loading_time: Optional[float] = None
    performance_score: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape written to pages.json."""
        data: Dict[str, Any] = {
            "path": self.path,
            "title": self.title,
            "headings": self.headings,
            "errors": self.errors,
            "warnings": self.warnings,
            "loadingTime": self.loading_time,
        }
        if self.performance_score is not None:
            data["performanceScore"] = self.performance_score
        return data


@dataclass(slots=True)
class SitemapPage:
    """Page discovered by the sitemap crawl."""

    path: str
    depth: int
    error: bool = False
