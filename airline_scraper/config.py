"""YAML config loader."""

import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import yaml

from .errors import ConfigError

# "0–9" page, percent-encoded en dash
DIGITS_SUFFIX = "0%E2%80%939"


def default_suffixes() -> List[str]:
    return [DIGITS_SUFFIX] + [chr(c) for c in range(ord("A"), ord("Z") + 1)]


def ensure_trailing_slash(url: str) -> str:
    return url if url.endswith("/") else url + "/"


@dataclass
class FetchConfig:
    user_agent: str = "Mozilla/5.0 (compatible; airline-scraper/0.3; python)"
    timeout: float = 30.0
    follow_redirects: bool = True


@dataclass
class PagesConfig:
    base_url: str = "https://en.wikipedia.org/wiki/List_of_airline_codes_"
    suffixes: List[str] = field(default_factory=default_suffixes)
    marker: str = "IATA"

    def url_for(self, suffix: str) -> str:
        return f"{self.base_url}({suffix})"


@dataclass
class LogoConfig:
    base_url: str = ""
    extension: str = "png"
    concurrency: int = 12
    not_found_statuses: Tuple[int, ...] = (404, 410)


@dataclass
class AppConfig:
    dataset_path: str = "airline_codes_all.csv"
    output_dir: str = "airline_bitmaps"
    log_dir: str = "logs"
    fetch: FetchConfig = field(default_factory=FetchConfig)
    pages: PagesConfig = field(default_factory=PagesConfig)
    logos: LogoConfig = field(default_factory=LogoConfig)


def _pick(cls, raw):
    if raw is None:
        return cls()
    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping for {cls.__name__}, got {type(raw).__name__}")
    return cls(**{k: v for k, v in raw.items() if k in cls.__dataclass_fields__})


def load_config(config_path: Optional[str] = None) -> AppConfig:
    if config_path is None:
        return AppConfig()
    if not os.path.exists(config_path):
        raise ConfigError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Expected a mapping at the top of {config_path}, got {type(raw).__name__}")

    logos = _pick(LogoConfig, raw.get("logos"))
    logos.not_found_statuses = tuple(logos.not_found_statuses)
    if logos.base_url:
        logos.base_url = ensure_trailing_slash(logos.base_url)
    if logos.concurrency < 1:
        raise ConfigError(f"logos.concurrency must be >= 1, got {logos.concurrency}")

    return AppConfig(
        dataset_path=raw.get("dataset_path", "airline_codes_all.csv"),
        output_dir=raw.get("output_dir", "airline_bitmaps"),
        log_dir=raw.get("log_dir", "logs"),
        fetch=_pick(FetchConfig, raw.get("fetch")),
        pages=_pick(PagesConfig, raw.get("pages")),
        logos=logos,
    )
