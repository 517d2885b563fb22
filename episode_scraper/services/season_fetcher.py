from __future__ import annotations

from typing import Any, Protocol

from bs4 import BeautifulSoup

from .episode_numbering import normalize_episodes
from .selectors import select_count, select_nodes, select_text
from .types import Episode, RawEpisodeRow, SearchResult


class DocumentSource(Protocol):
    async def fetch(self, url: str) -> BeautifulSoup: ...


class SeasonListFetcher:
    """Fetch and parse the episode listing page of a single season."""

    def __init__(self, fetcher: DocumentSource, site_config: dict[str, Any]) -> None:
        self.fetcher = fetcher
        self.selectors: dict[str, str] = site_config["selectors"]
        self.all_seasons_label: str = site_config.get(
            "all_seasons_label", "All Seasons"
        )

    async def fetch_document(self, result: SearchResult, season: int) -> BeautifulSoup:
        return await self.fetcher.fetch(result.locator.season_url(season))

    async def fetch_rows(self, result: SearchResult, season: int) -> list[RawEpisodeRow]:
        document = await self.fetch_document(result, season)
        return self.parse_rows(document)

    async def fetch_episodes(self, result: SearchResult, season: int) -> list[Episode]:
        rows = await self.fetch_rows(result, season)
        return normalize_episodes(rows, season, result.name)

    def parse_rows(self, document: BeautifulSoup) -> list[RawEpisodeRow]:
        rows: list[RawEpisodeRow] = []
        for node in select_nodes(self.selectors["episode_row"], document):
            rank = select_text(self.selectors["episode_rank"], node)
            title = select_text(self.selectors["episode_title"], node)
            rows.append(RawEpisodeRow(rank=rank, title=title))
        return rows

    def count_seasons(self, document: BeautifulSoup) -> int:
        """Number of entries in the season drop-down, without the "all" entry."""
        selector = (
            f"{self.selectors['season_option']}"
            f':not(:-soup-contains-own("{self.all_seasons_label}"))'
        )
        return select_count(selector, document)
