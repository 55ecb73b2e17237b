"""ARIA role vocabulary and required state attributes."""
from __future__ import annotations

from bs4 import BeautifulSoup

from site_checker.config import CheckOptions
from site_checker.crawler.models import PageRecord
from site_checker.parser.html_parser import opening_tag

VALID_ROLES = frozenset({
    "alert", "alertdialog", "application", "article", "banner", "button", "cell",
    "checkbox", "columnheader", "combobox", "complementary", "contentinfo",
    "definition", "dialog", "directory", "document", "feed", "figure", "form",
    "grid", "gridcell", "group", "heading", "img", "link", "list", "listbox",
    "listitem", "log", "main", "marquee", "math", "menu", "menubar", "menuitem",
    "menuitemcheckbox", "menuitemradio", "navigation", "none", "note", "option",
    "presentation", "progressbar", "radio", "radiogroup", "region", "row",
    "rowgroup", "rowheader", "scrollbar", "search", "searchbox", "separator",
    "slider", "spinbutton", "status", "switch", "tab", "table", "tablist",
    "tabpanel", "term", "textbox", "timer", "toolbar", "tooltip", "tree",
    "treegrid", "treeitem",
})

REQUIRED_ATTRIBUTES: dict[str, tuple[str, ...]] = {
    "checkbox": ("aria-checked",),
    "radio": ("aria-checked",),
    "slider": ("aria-valuenow", "aria-valuemin", "aria-valuemax"),
    "spinbutton": ("aria-valuenow",),
    "progressbar": ("aria-valuenow",),
    "tab": ("aria-selected",),
    "option": ("aria-selected",),
    "switch": ("aria-checked",),
}


def check_aria_roles(options: CheckOptions, document: BeautifulSoup, page: PageRecord) -> None:
    if not options.accessibility:
        return

    with_roles = document.select("[role]")
    for element in with_roles:
        role = element.get("role")
        if role and role not in VALID_ROLES:
            page.errors.append(f'Accessibility: Invalid ARIA role "{role}": {opening_tag(element)}')

    for element in with_roles:
        role = element.get("role")
        for attribute in REQUIRED_ATTRIBUTES.get(role or "", ()):
            if not element.has_attr(attribute):
                page.errors.append(
                    f'Accessibility: ARIA role "{role}" missing required attribute '
                    f'"{attribute}": {opening_tag(element)}'
                )

    for element in document.select("div[onclick], span[onclick]"):
        if not element.has_attr("role"):
            page.warnings.append(
                f'Accessibility: Interactive element should have role="button": {opening_tag(element)}'
            )
