from __future__ import annotations

import logging
import re
import urllib.parse
from typing import Any

from ...config import ClientConfig, logger as default_logger
from ...errors import MalformedLinkError
from ..document_fetch import DocumentFetcher
from ..episode_list_service import EpisodeListAggregator
from ..season_fetcher import DocumentSource, SeasonListFetcher
from ..selectors import node_attr, node_text, select_nodes
from ..site_config import load_bundled_site_config
from ..types import Episode, HyperLink, SearchResult
from .base_scraper import EpisodeListClient


class TVDotComClient(EpisodeListClient):
    """Episode lists scraped from TV.com listing pages."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        fetcher: DocumentSource | None = None,
        logger: logging.Logger | None = None,
        site_config: dict[str, Any] | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.logger = logger or default_logger
        self.site_config = site_config or load_bundled_site_config("tvdotcom")
        self.fetcher: DocumentSource = fetcher or DocumentFetcher(
            self.config, self.logger
        )
        self.season_fetcher = SeasonListFetcher(self.fetcher, self.site_config)
        self.aggregator = EpisodeListAggregator(
            self.season_fetcher, self.config.max_workers, self.logger
        )
        self._summary_pattern = re.compile(
            re.escape(self.site_config["summary_suffix"]) + ".*"
        )

    @property
    def name(self) -> str:
        return self.site_config["site_name"]

    @property
    def has_single_season_support(self) -> bool:
        return True

    def search_url(self, query: str) -> str:
        qs = urllib.parse.quote_plus(query)
        path = self.site_config["search_path"].format(query=qs)
        return f"{self.config.scheme}://{self.config.host}{path}"

    async def search(self, query: str) -> list[SearchResult]:
        url = self.search_url(query)
        self.logger.info(f"[SEARCH] {self.name}: Fetching search results from {url}")
        document = await self.fetcher.fetch(url)

        results: list[SearchResult] = []
        for node in select_nodes(self.site_config["selectors"]["search_result"], document):
            title = node_text(node)
            href = node_attr(node, "href")
            try:
                listing_url = self._listing_url(href)
            except MalformedLinkError as exc:
                self.logger.warning(f"[SEARCH] {self.name}: {exc}")
                continue
            results.append(SearchResult(name=title, locator=HyperLink(listing_url)))

        self.logger.info(
            f"[SEARCH] {self.name}: Found {len(results)} result(s) for '{query}'"
        )
        return results

    async def get_episode_list(self, result: SearchResult) -> list[Episode]:
        return await self.aggregator.get_episode_list(result)

    async def get_season_episode_list(
        self, result: SearchResult, season: int
    ) -> list[Episode]:
        return await self.aggregator.get_season_episode_list(result, season)

    def get_episode_list_link(self, result: SearchResult, season: int = 0) -> str:
        return result.locator.season_url(season)

    def _listing_url(self, href: str) -> str:
        """Rewrite a show summary link into its episode listing link."""
        listing_suffix = self.site_config["listing_suffix"]
        rewritten = self._summary_pattern.sub(lambda _: listing_suffix, href, count=1)
        try:
            parts = urllib.parse.urlsplit(rewritten)
        except ValueError:
            raise MalformedLinkError(href)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise MalformedLinkError(href)
        return rewritten
