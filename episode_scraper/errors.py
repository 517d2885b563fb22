# episode_scraper/errors.py

from __future__ import annotations


class ScraperError(Exception):
    """Base class for all errors raised by the episode scrapers."""


class FetchError(ScraperError):
    """Raised when a document could not be retrieved or parsed."""

    def __init__(self, url: str, message: str | None = None):
        super().__init__(message or f"Failed to fetch document: {url}")
        self.url = url


class MalformedLinkError(ScraperError):
    """Raised when a search result link cannot be turned into a listing URL."""

    def __init__(self, href: str):
        super().__init__(f"Invalid href: {href}")
        self.href = href


class AggregationError(FetchError):
    """Raised when one of the season fetches of a multi-season listing fails.

    The original error is chained as ``__cause__``. No partial listing is
    returned alongside it.
    """

    def __init__(self, url: str, season: int):
        super().__init__(url, f"Failed to fetch episode list for season {season}")
        self.season = season


class ConfigurationError(ScraperError):
    """Raised when a scraper configuration is missing required fields."""
