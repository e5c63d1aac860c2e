"""
Field extraction for a unit of competency details page.

Two regions of the page are read:
1. The h2 after the "Unit of competency details" h1, matched against
   "<code> - <title> (Release <release>)"
2. The table after the "Elements and Performance Criteria" h2, whose rows
   hold an element cell ("1. Title") followed by criteria cells ("1.1 Text")

Any text that does not fit its template aborts the whole extraction.
"""

from __future__ import annotations

import logging
import re
from typing import Protocol

from .config import ExtractConfig
from .errors import ExtractionError
from .types import Element, PerformanceCriteria


logger = logging.getLogger(__name__)

DETAILS_RE = re.compile(r"(?P<code>.*?) - (?P<title>.*) \(Release (?P<release>.*)\)")
ELEMENT_RE = re.compile(r"(?P<id>\d+)\.\s(?P<title>.*)")  # "1. Identify safety requirements"
CRITERIA_RE = re.compile(r"(?P<id>\d+\.\d+)\s(?P<criteria>.*)")  # "1.1 Locate documentation"

TABLE_ERROR = "Unable to parse data from the table"


class PageLike(Protocol):
    def heading_after(self, marker: str, heading: str = "h1", sibling: str = "h2") -> str | None: ...

    def table_rows_after(self, marker: str, heading: str = "h2") -> list[list[str]] | None: ...


def parse_details_heading(text: str | None) -> tuple[str, str, str]:
    """Split the details heading into code, title and release.

    Args:
        text: Heading text such as
            "UEERE0035 - Define and apply electrical safety requirements (Release 2)"

    Returns:
        A (code, title, release) tuple of non-empty strings

    Raises:
        ExtractionError: If the heading is missing or any capture is empty
    """
    match = DETAILS_RE.search(text or "")
    code = match.group("code").strip() if match else ""
    title = match.group("title").strip() if match else ""
    release = match.group("release").strip() if match else ""
    if not code or not title or not release:
        raise ExtractionError(f"Failed to extract code, title, or release from {text!r}")
    return code, title, release


def parse_element_cell(text: str) -> Element:
    """Parse a first-column cell into a new element with no criteria."""
    match = ELEMENT_RE.search(text)
    if not match or not match.group("id") or not match.group("title"):
        raise ExtractionError(f"{TABLE_ERROR}: expected an element, got {text!r}")
    return Element(id=match.group("id"), title=match.group("title"))


def parse_criteria_cell(text: str) -> PerformanceCriteria:
    """Parse a non-first-column cell into a performance criteria."""
    match = CRITERIA_RE.search(text)
    if not match or not match.group("id") or not match.group("criteria"):
        raise ExtractionError(f"{TABLE_ERROR}: expected performance criteria, got {text!r}")
    return PerformanceCriteria(id=match.group("id"), criteria=match.group("criteria"))


def build_elements(rows: list[list[str]], header_rows: int = 2) -> list[Element]:
    """Walk table rows and assemble elements with their criteria.

    The first `header_rows` rows are skipped. In every other row, the cell
    at index 0 starts a new element and every later cell adds a criteria to
    the element started most recently.

    Args:
        rows: Cell texts per row, in document order
        header_rows: Number of leading rows to skip

    Returns:
        Elements in row-encounter order; empty if there are no data rows

    Raises:
        ExtractionError: On any cell that does not match its template, a
            criteria cell before the first element, or a repeated element id
    """
    _check_header_rows(rows[:header_rows])

    elements: list[Element] = []
    seen_ids: set[str] = set()
    current: Element | None = None

    for row_number, cells in enumerate(rows[header_rows:], start=header_rows + 1):
        for column, text in enumerate(cells):
            if column == 0:
                element = parse_element_cell(text)
                if element.id in seen_ids:
                    raise ExtractionError(
                        f"{TABLE_ERROR}: duplicate element {element.id} in row {row_number}"
                    )
                seen_ids.add(element.id)
                elements.append(element)
                current = element
                continue

            criteria = parse_criteria_cell(text)
            if current is None:
                raise ExtractionError(
                    f"{TABLE_ERROR}: criteria {criteria.id} in row {row_number} precedes any element"
                )
            if criteria.id.split(".", 1)[0] != current.id:
                logger.warning(
                    "Criteria %s attributed to element %s", criteria.id, current.id
                )
            current.performance_criteria.append(criteria)

    return elements


def _check_header_rows(rows: list[list[str]]) -> None:
    # Header rows are skipped by position; warn if one looks like data.
    for index, cells in enumerate(rows, start=1):
        if cells and ELEMENT_RE.match(cells[0]):
            logger.warning("Skipped header row %d looks like an element: %r", index, cells[0])


def extract_code_title_release(page: PageLike, cfg: ExtractConfig) -> tuple[str, str, str]:
    """Read code, title and release from the details heading."""
    return parse_details_heading(page.heading_after(cfg.details_marker))


def extract_elements(page: PageLike, cfg: ExtractConfig) -> list[Element]:
    """Read elements and performance criteria from the elements table."""
    rows = page.table_rows_after(cfg.elements_marker)
    if rows is None:
        raise ExtractionError(f"No table found after heading {cfg.elements_marker!r}")
    return build_elements(rows, cfg.header_rows)
