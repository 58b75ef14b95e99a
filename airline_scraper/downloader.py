"""HTTP engine: page fetching and bounded-concurrency logo downloads."""

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional

import httpx

from .config import AppConfig
from .errors import HTTPStatusFailure, ScraperError, TransportFailure
from .models import FAILED, SAVED, SKIPPED, DownloadResult

logger = logging.getLogger("airline_scraper")


class Downloader:
    def __init__(self, config: AppConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._client_lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        with self._client_lock:
            if self._client is None or self._client.is_closed:
                try:
                    self._client = httpx.Client(
                        timeout=self.config.fetch.timeout,
                        follow_redirects=self.config.fetch.follow_redirects,
                        headers={"User-Agent": self.config.fetch.user_agent},
                        transport=self._transport,
                    )
                except (ValueError, TypeError, OSError) as e:
                    raise ScraperError(f"Cannot create HTTP client: {e}") from e
            return self._client

    def close(self):
        with self._client_lock:
            if self._client and not self._client.is_closed:
                self._client.close()

    def fetch_text(self, url: str) -> str:
        """GET a page and return its body. Raises a FetchError subclass on failure."""
        try:
            resp = self.client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportFailure(url, str(e) or type(e).__name__) from e

        if not resp.is_success:
            raise HTTPStatusFailure(url, resp.status_code)
        return resp.text

    def download_logo(self, code: str, base_url: str, dest_dir: str) -> DownloadResult:
        """Fetch one logo. Never raises; the outcome is tagged on the result."""
        ext = self.config.logos.extension
        url = f"{base_url}{code}.{ext}"

        try:
            resp = self.client.get(url)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            return DownloadResult(code, url, FAILED, detail=str(e) or type(e).__name__)

        if resp.status_code in self.config.logos.not_found_statuses:
            return DownloadResult(code, url, SKIPPED, detail=f"http {resp.status_code}")
        if not resp.is_success:
            return DownloadResult(code, url, FAILED, detail=f"http {resp.status_code}")

        local_path = os.path.join(dest_dir, f"{code}.{ext}")
        body = resp.content
        try:
            with open(local_path, "wb") as f:
                f.write(body)
        except OSError as e:
            return DownloadResult(code, url, FAILED, detail=str(e))

        return DownloadResult(code, url, SAVED, local_path=local_path, size=len(body))

    def download_all(self, codes: Iterable[str], base_url: str,
                     dest_dir: str) -> List[DownloadResult]:
        """Download every code with at most `logos.concurrency` requests in flight."""
        os.makedirs(dest_dir, exist_ok=True)
        codes = list(codes)
        if not codes:
            logger.info("No codes to download.")
            return []

        # workers share one client; build it before any of them start
        self.client
        workers = self.config.logos.concurrency
        logger.info(f"Downloading {len(codes)} logos from {base_url} ({workers} workers)")

        results = []
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self.download_logo, code, base_url, dest_dir): code
                       for code in codes}
            for future in as_completed(futures):
                result = future.result()
                _log_result(result)
                results.append(result)

        return results


def _log_result(result: DownloadResult):
    if result.outcome == SAVED:
        logger.info(f"ok   {result.code} ({result.size:,} bytes)")
    elif result.outcome == SKIPPED:
        logger.info(f"skip {result.code} (not found)")
    else:
        logger.error(f"err  {result.code}: {result.detail} [{result.url}]")


def summarize(results: Iterable[DownloadResult]) -> Dict[str, int]:
    summary = {SAVED: 0, SKIPPED: 0, FAILED: 0, "bytes": 0}
    for r in results:
        summary[r.outcome] += 1
        summary["bytes"] += r.size
    return summary
