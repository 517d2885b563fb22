from .config import ClientConfig, get_client_config
from .errors import (
    AggregationError,
    ConfigurationError,
    FetchError,
    MalformedLinkError,
    ScraperError,
)
from .services.scrapers import EpisodeListClient, TVDotComClient
from .services.types import Episode, HyperLink, Locator, SearchResult

__all__ = [
    "ClientConfig",
    "get_client_config",
    "AggregationError",
    "ConfigurationError",
    "FetchError",
    "MalformedLinkError",
    "ScraperError",
    "EpisodeListClient",
    "TVDotComClient",
    "Episode",
    "HyperLink",
    "Locator",
    "SearchResult",
]
