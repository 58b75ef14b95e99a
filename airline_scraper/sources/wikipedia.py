"""Wikipedia "List of airline codes" pages, one per leading character.

The pages are split as List_of_airline_codes_(0–9) followed by (A) .. (Z).
They are fetched strictly in order, one at a time.
"""

from typing import Generator, Tuple

from .base import BaseSource


class WikipediaCodesSource(BaseSource):
    name = "wikipedia"

    def discover(self) -> Generator[Tuple[str, dict], None, None]:
        pages = self.config.pages
        for suffix in pages.suffixes:
            yield pages.url_for(suffix), {"suffix": suffix}
