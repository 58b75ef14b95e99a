"""Source registry."""

from .wikipedia import WikipediaCodesSource

ALL_SOURCES = {
    "wikipedia": WikipediaCodesSource,
}
