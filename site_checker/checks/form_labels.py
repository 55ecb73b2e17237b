"""Labels for form controls."""
from __future__ import annotations

from bs4 import BeautifulSoup
from bs4.element import Tag

from site_checker.config import CheckOptions
from site_checker.crawler.models import PageRecord
from site_checker.parser.html_parser import opening_tag

LABELLED_CONTROLS = (
    'input[type="text"], input[type="email"], input[type="password"], input[type="tel"], '
    'input[type="url"], input[type="search"], textarea, select'
)


def has_label(document: BeautifulSoup, control: Tag) -> bool:
    if control.get("aria-label"):
        return True

    # space-separated id list
    labelledby = control.get("aria-labelledby") or ""
    if isinstance(labelledby, str):
        labelledby = labelledby.split()
    if labelledby and all(document.find(id=ref) is not None for ref in labelledby):
        return True

    control_id = control.get("id")
    if control_id and document.find("label", attrs={"for": control_id}) is not None:
        return True

    return control.find_parent("label") is not None


def check_form_labels(options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
    if not options.accessibility:
        return

    for control in document.select(LABELLED_CONTROLS):
        if not has_label(document, control):
            page.errors.append(f"Accessibility: Form input without label: {opening_tag(control)}")

    for label in document.select("label[for]"):
        target = label.get("for")
        if target and document.find(id=target) is None:
            page.errors.append(
                f"Accessibility: Label references non-existent input: {opening_tag(label)}"
            )
