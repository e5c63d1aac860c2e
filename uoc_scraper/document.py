"""
Narrow HTML adapter over BeautifulSoup.

The extractor only ever needs two queries: "the heading after a heading
containing some text" and "the table rows after a heading containing some
text". Keeping them here lets the matching templates be tested with plain
strings, without parsing any HTML.
"""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and strip the ends."""
    return " ".join(text.split())


class UnitPage:
    """A parsed details page, optionally scoped to its content wrapper.

    Attributes:
        root: The wrapper element, or the whole document if no wrapper matched
    """

    def __init__(self, html: str, content_selector: str | None = None):
        soup = BeautifulSoup(html, "html.parser")
        wrapper = soup.select_one(content_selector) if content_selector else None
        self.root: Tag = wrapper if wrapper is not None else soup

    def _find_heading(self, tag_name: str, marker: str) -> Tag | None:
        return self.root.find(lambda tag: tag.name == tag_name and marker in tag.get_text())

    def _next_sibling(self, tag_name: str, marker: str, sibling_name: str) -> Tag | None:
        heading = self._find_heading(tag_name, marker)
        if heading is None:
            return None
        sibling = heading.find_next_sibling()
        if sibling is None or sibling.name != sibling_name:
            return None
        return sibling

    def heading_after(self, marker: str, heading: str = "h1", sibling: str = "h2") -> str | None:
        """Text of the heading immediately following the marker heading.

        Returns None if the marker heading is missing or is not directly
        followed by a `sibling` element.
        """
        node = self._next_sibling(heading, marker, sibling)
        if node is None:
            return None
        return normalize_text(node.get_text())

    def table_rows_after(self, marker: str, heading: str = "h2") -> list[list[str]] | None:
        """Paragraph texts of each row of the table following the marker heading.

        Each row is the ordered list of `td > p` texts in that row; rows
        without such paragraphs yield an empty list. Returns None if the
        marker heading or the table is missing.
        """
        table = self._next_sibling(heading, marker, "table")
        if table is None:
            return None
        return [
            [normalize_text(p.get_text()) for p in row.select("td > p")]
            for row in table.find_all("tr")
        ]
