"""site_checker.report.sitemap: sitemap.xml rendering with Jinja2."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import Environment, FileSystemLoader

from site_checker.crawler.models import SitemapPage

TEMPLATE_DIR = Path(__file__).parent / "templates"
SITEMAP_TEMPLATE = "sitemap.xml.j2"
DEFAULT_DECAY = 0.8

_XML_ESCAPES = {"&": "&amp;", "<": "&lt;", ">": "&gt;", "'": "&apos;", '"': "&quot;"}


def xml_escape(value: Any) -> str:
    return "".join(_XML_ESCAPES.get(char, char) for char in str(value))


def round_half_up(value: float, precision: int = 2) -> float:
    factor = 10 ** precision
    return math.floor(value * factor + 0.5) / factor


def priority(depth: int, decay: float = DEFAULT_DECAY) -> str:
    """Sitemap priority of a page *depth* hops from the root, e.g. ``"0.64"`` for depth 3."""
    return f"{round_half_up(decay ** (depth - 1), 2):.2f}"


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        keep_trailing_newline=True,
    )
    env.filters["xml_escape"] = xml_escape
    env.filters["priority"] = priority
    return env


def render_sitemap(
    pages: Mapping[str, SitemapPage],
    lastmod: Optional[datetime] = None,
    decay: float = DEFAULT_DECAY,
) -> str:
    """Render every non-error page into a sitemap-protocol document."""
    stamp = (lastmod or datetime.now(timezone.utc)).astimezone(timezone.utc)
    template = _environment().get_template(SITEMAP_TEMPLATE)
    return template.render(
        pages=[page for page in pages.values() if not page.error],
        lastmod=stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        decay=decay,
    )


def write_sitemap(xml: str, output_path: Union[Path, str]) -> Path:
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(xml, encoding="utf-8")
    return output
