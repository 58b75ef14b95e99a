"""Wikitable extraction: locate the first table whose header row carries the
marker column and pull its header and data cells out as plain text.
"""

import logging
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .models import RawTable

logger = logging.getLogger("airline_scraper")

TABLE_SELECTOR = "table.wikitable"


def cell_text(cell: Tag) -> str:
    """Join every descendant text node with a space, then collapse whitespace."""
    return " ".join(cell.get_text(" ").split())


class TableExtractor:
    def __init__(self, marker: str = "IATA", parser: str = "html.parser"):
        self.marker = marker
        self.parser = parser

    def header_has_marker(self, header: List[str]) -> bool:
        wanted = self.marker.lower()
        return any(h.strip().lower() == wanted for h in header)

    def extract(self, html: str) -> Optional[RawTable]:
        """Return the first qualifying table, or None when the page has none."""
        soup = BeautifulSoup(html, self.parser)

        for index, table in enumerate(soup.select(TABLE_SELECTOR)):
            rows = table.select("tr")
            if not rows:
                continue

            header = [cell_text(c) for c in rows[0].select("th, td")]
            if not self.header_has_marker(header):
                logger.debug(f"Table {index}: no {self.marker} column in {header}")
                continue

            data = []
            for tr in rows[1:]:
                row = [cell_text(td) for td in tr.select("td")]
                if row:
                    data.append(row)
            return RawTable(header=header, rows=data)

        return None
