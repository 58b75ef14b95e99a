"""CSV dataset: fixed-width writer and IATA code collector."""

import csv
import logging
import os
from typing import Iterable, List, Sequence, Set

from .errors import ColumnNotFoundError, DatasetError

logger = logging.getLogger("airline_scraper")


def normalize_row(row: Sequence[str], width: int) -> List[str]:
    """Truncate or right-pad a row with empty strings to exactly `width` cells."""
    if len(row) >= width:
        return list(row[:width])
    return list(row) + [""] * (width - len(row))


def write_dataset(path: str, header: Sequence[str], rows: Iterable[Sequence[str]]) -> int:
    """Write header + normalized rows to `path`, replacing any existing file.

    Returns the number of data rows written.
    """
    width = len(header)
    count = 0

    parent = os.path.dirname(path)
    try:
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(header)
            for row in rows:
                writer.writerow(normalize_row(row, width))
                count += 1
    except OSError as e:
        raise DatasetError(f"Cannot write dataset {path}: {e}") from e

    logger.info(f"CSV written: {path} ({width} columns, {count} rows)")
    return count


def is_valid_code(code: str) -> bool:
    return len(code) == 2 and all(c.isascii() and c.isalnum() for c in code)


def normalize_code(value: str) -> str:
    return value.strip().upper()


def collect_codes(path: str, marker: str = "IATA") -> Set[str]:
    """Read the marker column of the dataset into a set of valid 2-char codes."""
    wanted = marker.lower()
    codes = set()
    skipped = 0

    try:
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f)
            header = next(reader, None)
            if header is None:
                raise ColumnNotFoundError(f"{marker} column not found: {path} is empty")

            try:
                index = next(i for i, h in enumerate(header) if h.strip().lower() == wanted)
            except StopIteration:
                raise ColumnNotFoundError(f"{marker} column not found in {path}") from None

            for row in reader:
                if index >= len(row):
                    skipped += 1
                    continue
                code = normalize_code(row[index])
                if is_valid_code(code):
                    codes.add(code)
                else:
                    skipped += 1
    except OSError as e:
        raise DatasetError(f"Cannot read dataset {path}: {e}") from e

    logger.info(f"Collected {len(codes)} unique {marker} codes ({skipped} values skipped)")
    return codes
