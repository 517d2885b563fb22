from .document_fetch import DocumentFetcher
from .episode_list_service import EpisodeListAggregator
from .episode_numbering import normalize_episodes
from .season_fetcher import SeasonListFetcher
from .types import Episode, HyperLink, Locator, SearchResult

__all__ = [
    "DocumentFetcher",
    "EpisodeListAggregator",
    "normalize_episodes",
    "SeasonListFetcher",
    "Episode",
    "HyperLink",
    "Locator",
    "SearchResult",
]
