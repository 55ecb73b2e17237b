# File: site_checker/report/__init__.py
"""site_checker.report: report writers (pages.json and sitemap.xml) used by the CLI and tests."""

from __future__ import annotations

from site_checker.report.json_report import render_json
from site_checker.report.sitemap import priority, render_sitemap, write_sitemap, xml_escape

__all__ = ["render_json", "render_sitemap", "write_sitemap", "priority", "xml_escape"]
