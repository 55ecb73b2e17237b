# site_checker/report/json_report.py
"""pages.json writer."""
import json
from pathlib import Path

from site_checker.aggregator import CheckReport
from site_checker.logger import logger


def render_json(report: CheckReport, output_path: Path | str) -> Path:
    """
    Write *report* to *output_path* in the pages.json layout.

    Every checked page sits under its path key next to a ``global`` entry with
    the merged errors and warnings. Missing parent directories are created.
    Returns the path written.
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2)

    logger.debug("Wrote %d page records to %s", len(report.pages), output)
    return output
