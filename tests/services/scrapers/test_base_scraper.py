import pytest

from episode_scraper.services.scrapers.base_scraper import EpisodeListClient


class _AllSeasonsOnly(EpisodeListClient):
    @property
    def name(self) -> str:
        return "Partial"

    async def search(self, query):
        return []

    async def get_episode_list(self, result):
        return []

    def get_episode_list_link(self, result, season=0):
        return ""


def test_single_season_listing_is_abstract():
    assert "get_season_episode_list" in EpisodeListClient.__abstractmethods__

    with pytest.raises(TypeError):
        _AllSeasonsOnly()


def test_single_season_support_defaults_to_false():
    class _Complete(_AllSeasonsOnly):
        async def get_season_episode_list(self, result, season):
            return []

    assert _Complete().has_single_season_support is False
