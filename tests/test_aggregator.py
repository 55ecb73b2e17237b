# File: tests/test_aggregator.py
import json

import pytest
from aiohttp import ClientConnectionError

from conftest import FakeFetcher, html_response
from site_checker.aggregator import aggregate_results, probe_available
from site_checker.crawler.models import PageRecord
from site_checker.report.json_report import render_json


@pytest.fixture()
def pages():
    return {
        "/": PageRecord(
            path="http://example.com/",
            title="Home",
            errors=["SEO: Missing h1", "SEO: Missing title"],
            warnings=["SEO: Title too long"],
            loading_time=120.0,
            performance_score="excellent",
        ),
        "/about": PageRecord(
            path="http://example.com/about",
            depth=2,
            errors=["SEO: Missing h1", "HTTP error: 500"],
        ),
    }


def test_union_keeps_first_seen_order(pages):
    report = aggregate_results(pages)
    assert report.errors == ["SEO: Missing h1", "SEO: Missing title", "HTTP error: 500"]
    assert report.warnings == ["SEO: Title too long"]


def test_totals_count_duplicates(pages):
    report = aggregate_results(pages, robots_txt_found=False, elapsed_ms=42.5)
    assert report.total_errors == 4
    assert report.total_warnings == 1
    assert report.robots_txt_found is False
    assert report.sitemap_xml_found is True
    assert report.elapsed_ms == 42.5


def test_empty_crawl():
    report = aggregate_results({})
    assert report.errors == [] and report.warnings == []
    assert report.total_errors == report.total_warnings == 0
    assert report.to_dict() == {"global": {"errors": [], "warnings": []}}


def test_pages_json_layout(pages, tmp_path):
    output = render_json(aggregate_results(pages), tmp_path / "out" / "pages.json")
    data = json.loads(output.read_text(encoding="utf-8"))

    assert set(data) == {"/", "/about", "global"}
    assert data["/"]["loadingTime"] == 120.0
    assert data["/"]["performanceScore"] == "excellent"
    assert "performanceScore" not in data["/about"]
    assert data["/about"]["headings"]["h2"] == []
    assert data["global"]["errors"][0] == "SEO: Missing h1"


@pytest.mark.asyncio()
async def test_probe_available():
    fetcher = FakeFetcher(
        {
            "http://example.com/robots.txt": html_response("http://example.com/robots.txt", "User-agent: *"),
            "http://example.com/down.txt": ClientConnectionError("refused"),
        }
    )
    assert await probe_available(fetcher, "http://example.com/robots.txt") is True
    assert await probe_available(fetcher, "http://example.com/sitemap.xml") is False
    assert await probe_available(fetcher, "http://example.com/down.txt") is False
