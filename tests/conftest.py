import sys
from pathlib import Path
from urllib.parse import unquote

import httpx
import pytest


def _ensure_repo_root_on_path():
    """Allow tests to import project modules without installation."""
    repo_root = Path(__file__).resolve().parent.parent
    repo_str = str(repo_root)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_path()

from airline_scraper.config import AppConfig  # noqa: E402


def wikitable(header, rows, css="wikitable"):
    """Render a small HTML table, header cells as <th>, data cells as <td>."""
    head = "".join(f"<th>{h}</th>" for h in header)
    body = "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows
    )
    return f'<table class="{css}"><tbody><tr>{head}</tr>{body}</tbody></table>'


def page(*tables):
    return "<html><body><h1>List of airline codes</h1>" + "".join(tables) + "</body></html>"


def page_key(request: httpx.Request) -> str:
    """Return the suffix inside the trailing parentheses of a page URL."""
    path = unquote(request.url.path)
    return path[path.rfind("(") + 1:-1]


@pytest.fixture
def config(tmp_path):
    cfg = AppConfig(
        dataset_path=str(tmp_path / "codes.csv"),
        output_dir=str(tmp_path / "logos"),
        log_dir=str(tmp_path / "logs"),
    )
    cfg.pages.base_url = "https://wiki.test/wiki/List_of_airline_codes_"
    cfg.pages.suffixes = ["A", "B", "C"]
    cfg.logos.base_url = "https://cdn.test/logos/"
    return cfg
