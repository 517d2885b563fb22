# episode_scraper/services/scrapers/base_scraper.py

from abc import ABC, abstractmethod

from ..types import Episode, SearchResult


class EpisodeListClient(ABC):
    """
    Abstract base class for all episode list sources.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    def has_single_season_support(self) -> bool:
        return False

    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        """
        Search for shows on the client's site.

        Args:
            query: Free-text search term.

        Returns:
            The candidate shows, in the order the site lists them.
        """
        pass

    @abstractmethod
    async def get_episode_list(self, result: SearchResult) -> list[Episode]:
        """
        Fetch the complete episode list of a show, ordered by season.
        """
        pass

    @abstractmethod
    async def get_season_episode_list(
        self, result: SearchResult, season: int
    ) -> list[Episode]:
        """
        Fetch the episode list of a single season.

        Callers should check `has_single_season_support` first.
        """
        pass

    @abstractmethod
    def get_episode_list_link(self, result: SearchResult, season: int = 0) -> str:
        pass
