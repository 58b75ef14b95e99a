"""Data models for the scraper."""

from dataclasses import dataclass, field
from typing import List, Optional

SAVED = "saved"
SKIPPED = "skipped"
FAILED = "failed"

PAGE_OK = "ok"
PAGE_NO_TABLE = "no_table"
PAGE_FAILED = "failed"


@dataclass
class RawTable:
    header: List[str]
    rows: List[List[str]] = field(default_factory=list)


@dataclass
class PageResult:
    url: str
    status: str  # PAGE_OK, PAGE_NO_TABLE, PAGE_FAILED
    suffix: str = ""
    row_count: int = 0
    error: Optional[str] = None


@dataclass
class HarvestResult:
    header: List[str]
    rows: List[List[str]] = field(default_factory=list)
    pages: List[PageResult] = field(default_factory=list)


@dataclass
class DownloadResult:
    code: str
    url: str
    outcome: str  # saved, skipped, failed
    local_path: Optional[str] = None
    size: int = 0
    detail: Optional[str] = None
