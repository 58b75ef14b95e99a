"""Exception hierarchy. Anything deriving from ScraperError aborts the run."""


class ScraperError(Exception):
    pass


class ConfigError(ScraperError):
    pass


class FetchError(ScraperError):
    """A single document could not be fetched."""

    def __init__(self, url: str, message: str):
        super().__init__(f"GET {url}: {message}")
        self.url = url


class TransportFailure(FetchError):
    pass


class HTTPStatusFailure(FetchError):
    def __init__(self, url: str, status_code: int):
        super().__init__(url, f"http {status_code}")
        self.status_code = status_code


class NoTableError(ScraperError):
    pass


class ColumnNotFoundError(ScraperError):
    pass


class DatasetError(ScraperError):
    pass
