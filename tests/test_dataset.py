import csv

import pytest

from airline_scraper.dataset import collect_codes, is_valid_code, normalize_row, write_dataset
from airline_scraper.errors import ColumnNotFoundError, DatasetError


def _read(path):
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.reader(f))


def test_normalize_row_truncates_longer_rows():
    assert normalize_row(["a", "b", "c", "d", "e"], 3) == ["a", "b", "c"]


def test_normalize_row_pads_shorter_rows():
    assert normalize_row(["a"], 3) == ["a", "", ""]


def test_normalize_row_copies_exact_rows():
    row = ["a", "b", "c"]
    out = normalize_row(row, 3)
    assert out == row
    assert out is not row


def test_write_dataset_produces_fixed_width_rows(tmp_path):
    path = tmp_path / "codes.csv"
    header = ["IATA", "ICAO", "Airline"]
    rows = [["AC", "ACA", "Air Canada"], ["LH"], ["BA", "BAW", "British Airways", "extra", "more"]]

    count = write_dataset(str(path), header, rows)

    data = _read(path)
    assert count == 3
    assert data[0] == header
    assert data[1:] == [
        ["AC", "ACA", "Air Canada"],
        ["LH", "", ""],
        ["BA", "BAW", "British Airways"],
    ]


def test_write_dataset_quotes_cells_with_delimiter(tmp_path):
    path = tmp_path / "codes.csv"
    write_dataset(str(path), ["IATA", "Airline"], [["AA", "American Airlines, Inc."]])

    assert '"American Airlines, Inc."' in path.read_text(encoding="utf-8")
    assert _read(path)[1] == ["AA", "American Airlines, Inc."]


def test_write_dataset_is_byte_identical_across_runs(tmp_path):
    path = tmp_path / "codes.csv"
    header = ["IATA", "Airline"]
    rows = [["AA", "American"], ["ZZ"]]

    write_dataset(str(path), header, rows)
    first = path.read_bytes()
    write_dataset(str(path), header, rows)

    assert path.read_bytes() == first


def test_write_dataset_overwrites_existing_file(tmp_path):
    path = tmp_path / "codes.csv"
    path.write_text("stale,content\n1,2\n3,4\n", encoding="utf-8")

    write_dataset(str(path), ["IATA"], [["AA"]])

    assert _read(path) == [["IATA"], ["AA"]]


def test_write_dataset_unwritable_path_raises(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(DatasetError):
        write_dataset(str(blocker / "codes.csv"), ["IATA"], [])


@pytest.mark.parametrize("code,expected", [
    ("AA", True),
    ("A1", True),
    ("AAA", False),
    ("A!", False),
    ("A", False),
    ("", False),
    ("É1", False),
])
def test_is_valid_code(code, expected):
    assert is_valid_code(code) is expected


def test_collect_codes_filters_and_deduplicates(tmp_path):
    path = tmp_path / "codes.csv"
    values = ["aa", "AAA", "A1", "a!", "  bb  ", "BB"]
    write_dataset(str(path), ["Airline", "IATA"], [["x", v] for v in values])

    assert collect_codes(str(path)) == {"AA", "A1", "BB"}


def test_collect_codes_header_match_is_case_insensitive(tmp_path):
    path = tmp_path / "codes.csv"
    path.write_text("Airline, Iata \nAir Canada,ac\n", encoding="utf-8")
    assert collect_codes(str(path)) == {"AC"}


def test_collect_codes_skips_short_rows(tmp_path):
    path = tmp_path / "codes.csv"
    path.write_text("Airline,ICAO,IATA\nAir Canada,ACA,AC\nBroken\n", encoding="utf-8")
    assert collect_codes(str(path)) == {"AC"}


def test_collect_codes_without_marker_column_raises(tmp_path):
    path = tmp_path / "codes.csv"
    write_dataset(str(path), ["ICAO", "Airline"], [["ACA", "Air Canada"]])
    with pytest.raises(ColumnNotFoundError):
        collect_codes(str(path))


def test_collect_codes_header_only_is_empty(tmp_path):
    path = tmp_path / "codes.csv"
    write_dataset(str(path), ["IATA", "Airline"], [])
    assert collect_codes(str(path)) == set()


def test_collect_codes_missing_file_raises(tmp_path):
    with pytest.raises(DatasetError):
        collect_codes(str(tmp_path / "missing.csv"))
