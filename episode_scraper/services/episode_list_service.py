# episode_scraper/services/episode_list_service.py

from __future__ import annotations

import asyncio
import logging

from ..config import MAX_SEASON_WORKERS, logger as default_logger
from ..errors import AggregationError
from .episode_numbering import normalize_episodes
from .season_fetcher import SeasonListFetcher
from .types import Episode, SearchResult, SeasonFetchOutcome


class EpisodeListAggregator:
    """Collect the episodes of every season of a show into one ordered list.

    The season 1 page is fetched first because its season drop-down tells us
    how many seasons exist. The remaining seasons are fetched concurrently,
    with at most ``max_workers`` requests in flight, and merged back in season
    order once all of them have finished.
    """

    def __init__(
        self,
        season_fetcher: SeasonListFetcher,
        max_workers: int = MAX_SEASON_WORKERS,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.season_fetcher = season_fetcher
        self.max_workers = max_workers
        self.logger = logger or default_logger

    async def get_episode_list(self, result: SearchResult) -> list[Episode]:
        # get document for season 1
        first_document = await self.season_fetcher.fetch_document(result, 1)
        season_count = self.season_fetcher.count_seasons(first_document)
        self.logger.info(
            f"[EPISODES] '{result.name}': found {season_count} season(s)"
        )

        episodes = normalize_episodes(
            self.season_fetcher.parse_rows(first_document), 1, result.name
        )

        if season_count > 1:
            outcomes = await self._fetch_remaining_seasons(result, season_count)
            for outcome in outcomes:
                if not outcome.ok:
                    self.logger.error(
                        f"[EPISODES] '{result.name}': season {outcome.season} failed: "
                        f"{outcome.error}"
                    )
                    raise AggregationError(
                        result.locator.season_url(outcome.season), outcome.season
                    ) from outcome.error
            for outcome in outcomes:
                episodes.extend(outcome.episodes or [])

        self.logger.info(
            f"[EPISODES] '{result.name}': collected {len(episodes)} episode(s)"
        )
        return episodes

    async def get_season_episode_list(
        self, result: SearchResult, season: int
    ) -> list[Episode]:
        return await self.season_fetcher.fetch_episodes(result, season)

    async def _fetch_remaining_seasons(
        self, result: SearchResult, season_count: int
    ) -> list[SeasonFetchOutcome]:
        """Fetch seasons 2..season_count and return outcomes in season order.

        Every task runs to completion; failures are captured in the outcome
        rather than cancelling the siblings that are still in flight.
        """
        semaphore = asyncio.Semaphore(min(season_count - 1, self.max_workers))

        async def _fetch_season(season: int) -> SeasonFetchOutcome:
            async with semaphore:
                try:
                    season_episodes = await self.season_fetcher.fetch_episodes(
                        result, season
                    )
                except Exception as exc:  # noqa: BLE001
                    return SeasonFetchOutcome(season=season, error=exc)
            return SeasonFetchOutcome(season=season, episodes=season_episodes)

        # we already have the document for season 1, start with season 2
        tasks = [
            asyncio.create_task(_fetch_season(season))
            for season in range(2, season_count + 1)
        ]
        outcomes = await asyncio.gather(*tasks)
        return sorted(outcomes, key=lambda outcome: outcome.season)
