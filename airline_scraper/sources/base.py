"""Abstract base class for reference-page sources."""

import logging
from abc import ABC, abstractmethod
from typing import Generator, Tuple

from ..config import AppConfig
from ..downloader import Downloader
from ..errors import FetchError, NoTableError
from ..extractor import TableExtractor
from ..models import PAGE_FAILED, PAGE_NO_TABLE, PAGE_OK, HarvestResult, PageResult

logger = logging.getLogger("airline_scraper")


class BaseSource(ABC):
    name: str = ""

    def __init__(self, config: AppConfig, downloader: Downloader, extractor: TableExtractor):
        self.config = config
        self.downloader = downloader
        self.extractor = extractor

    @abstractmethod
    def discover(self) -> Generator[Tuple[str, dict], None, None]:
        """Yield (url, metadata) tuples for pages to scrape, in order."""
        ...

    def run(self) -> HarvestResult:
        """Fetch and extract every page one at a time and merge the tables.

        The header of the first page that yields a qualifying table is kept
        for the whole run; later headers are ignored.
        """
        logger.info(f"[{self.name}] Starting discovery...")
        header = None
        rows = []
        pages = []

        for url, meta in self.discover():
            suffix = meta.get("suffix", "")
            logger.info(f"[{self.name}] Fetching: {url}")
            try:
                html = self.downloader.fetch_text(url)
            except FetchError as e:
                logger.warning(f"[{self.name}] {e}")
                pages.append(PageResult(url, PAGE_FAILED, suffix, error=str(e)))
                continue

            table = self.extractor.extract(html)
            if table is None:
                logger.warning(
                    f"[{self.name}] {url}: no wikitable with {self.extractor.marker} header"
                )
                pages.append(PageResult(url, PAGE_NO_TABLE, suffix))
                continue

            if header is None:
                header = list(table.header)
            rows.extend(table.rows)
            pages.append(PageResult(url, PAGE_OK, suffix, row_count=len(table.rows)))
            logger.debug(f"[{self.name}] {url}: {len(table.rows)} rows")

        ok = sum(1 for p in pages if p.status == PAGE_OK)
        logger.info(
            f"[{self.name}] Done: {len(pages)} pages, {ok} with tables, {len(rows)} rows"
        )
        missing = [p.suffix for p in pages if p.status != PAGE_OK]
        if missing:
            logger.warning(f"[{self.name}] No rows from pages: {', '.join(missing)}")

        if header is None:
            raise NoTableError(f"[{self.name}] no pages yielded an {self.extractor.marker} table")
        return HarvestResult(header=header, rows=rows, pages=pages)
