"""CLI entry point and orchestrator."""

import argparse
import logging
import sys

from .config import AppConfig, ensure_trailing_slash, load_config
from .dataset import collect_codes, write_dataset
from .downloader import Downloader, summarize
from .errors import ScraperError
from .extractor import TableExtractor
from .logger import setup_logger
from .models import FAILED, SAVED, SKIPPED
from .sources import ALL_SOURCES

logger = logging.getLogger("airline_scraper")


def run_scraper(config: AppConfig, downloader: Downloader, source_name: str = "wikipedia") -> int:
    """Scrape every page of the source and write the normalized dataset."""
    extractor = TableExtractor(marker=config.pages.marker)
    source = ALL_SOURCES[source_name](config, downloader, extractor)
    harvest = source.run()
    return write_dataset(config.dataset_path, harvest.header, harvest.rows)


def run_download(config: AppConfig, downloader: Downloader, base_url: str):
    """Collect codes from the dataset and fetch one logo per code."""
    codes = collect_codes(config.dataset_path, config.pages.marker)
    return downloader.download_all(sorted(codes), base_url, config.output_dir)


def show_summary(results):
    summary = summarize(results)
    print("\n" + "=" * 40)
    print("  LOGO DOWNLOADS")
    print("=" * 40)
    for label, key in (("Saved", SAVED), ("Skipped", SKIPPED), ("Failed", FAILED)):
        print(f"{label:<20} {summary[key]:>8}")
    print("-" * 40)
    print(f"{'TOTAL':<20} {len(results):>8} {_format_bytes(summary['bytes']):>10}")
    print()


def _format_bytes(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    elif n < 1024 ** 2:
        return f"{n / 1024:.1f} KB"
    elif n < 1024 ** 3:
        return f"{n / 1024 ** 2:.1f} MB"
    else:
        return f"{n / 1024 ** 3:.2f} GB"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airline-scraper",
        description="Harvest IATA airline codes and download per-airline logos",
    )
    parser.add_argument("logo_base_url", nargs="?", default=None,
                        help="Base URL for logo assets, e.g. https://cdn.example.com/logos/")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to an optional YAML config file")
    parser.add_argument("--dataset", type=str, default=None,
                        help="CSV output path (overrides config)")
    parser.add_argument("--output-dir", type=str, default=None,
                        help="Directory for downloaded logos (overrides config)")
    parser.add_argument("--concurrency", type=int, default=None,
                        help="Maximum simultaneous logo downloads")
    phase = parser.add_mutually_exclusive_group()
    phase.add_argument("--scrape-only", action="store_true",
                       help="Only build the CSV dataset")
    phase.add_argument("--download-only", action="store_true",
                       help="Only download logos using an existing CSV dataset")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ScraperError as e:
        parser.error(str(e))

    if args.dataset:
        config.dataset_path = args.dataset
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.concurrency is not None:
        if args.concurrency < 1:
            parser.error("--concurrency must be >= 1")
        config.logos.concurrency = args.concurrency

    base_url = args.logo_base_url or config.logos.base_url
    if not base_url and not args.scrape_only:
        parser.error("logo_base_url is required, e.g. https://cdn.example.com/logos/")
    if base_url:
        base_url = ensure_trailing_slash(base_url)

    setup_logger(config.log_dir, logging.DEBUG if args.verbose else logging.INFO)

    downloader = Downloader(config)
    try:
        if not args.download_only:
            run_scraper(config, downloader)
        if not args.scrape_only:
            results = run_download(config, downloader, base_url)
            show_summary(results)
    except ScraperError as e:
        logger.error(str(e))
        sys.exit(1)
    finally:
        downloader.close()

    print("Done.")


if __name__ == "__main__":
    main()
