"""IATA airline-code harvester and logo downloader."""

__version__ = "0.3.0"
