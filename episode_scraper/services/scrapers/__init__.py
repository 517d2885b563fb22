from .base_scraper import EpisodeListClient
from .tvdotcom import TVDotComClient

__all__ = [
    "EpisodeListClient",
    "TVDotComClient",
]
