from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class Locator(ABC):
    """Addressable handle of a search result that can derive listing URLs."""

    @property
    @abstractmethod
    def url(self) -> str:
        pass

    @abstractmethod
    def season_url(self, season: int) -> str:
        """Return the listing URL for ``season`` (0 means all seasons)."""
        pass


@dataclass(frozen=True)
class HyperLink(Locator):
    """Locator backed by an absolute episode listing URL."""

    listing_url: str

    @property
    def url(self) -> str:
        return self.listing_url

    def season_url(self, season: int) -> str:
        return f"{self.listing_url}?season={season}"


@dataclass(frozen=True)
class SearchResult:
    """A candidate show found by a search.

    Attributes:
        name: Display name as shown on the search page.
        locator: Handle used to build the season listing URLs.
    """

    name: str
    locator: Locator


@dataclass(frozen=True)
class Episode:
    """A single aired episode.

    Attributes:
        series_name: Name of the show the episode belongs to.
        season: Season number as text, or None for specials such as "Pilot".
        episode: Zero-padded episode number, or the raw label for specials.
        title: Episode title.
    """

    series_name: str
    season: Optional[str]
    episode: str
    title: str

    def __str__(self) -> str:
        if self.season is None:
            return f"{self.series_name} - {self.episode} - {self.title}"
        return f"{self.series_name} - {self.season}x{self.episode} - {self.title}"


@dataclass(frozen=True)
class RawEpisodeRow:
    """Rank text and title as read from one row of a listing page."""

    rank: str
    title: str


@dataclass
class SeasonFetchOutcome:
    """Result of a single season task, keyed by the season it was assigned."""

    season: int
    episodes: Optional[list[Episode]] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None
