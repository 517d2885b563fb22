"""
Quick dry-run script to check search and episode list scraping end to end.

Run:
    python scripts/dry_run_episode_list.py [--season N] [--pick INDEX] [titles...]

Nothing is cached or written; the script searches TV.com for each title,
picks one candidate and prints the aggregated episode list.
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from episode_scraper.config import get_client_config
from episode_scraper.errors import ScraperError
from episode_scraper.services.scrapers import TVDotComClient


async def _run_for_title(
    client: TVDotComClient, title: str, *, pick: int, season: int | None
) -> None:
    print("\n===", title, "===")
    results = await client.search(title)
    if not results:
        print("No search results")
        return

    for idx, result in enumerate(results):
        marker = "*" if idx == pick else " "
        print(f"{marker} [{idx}] {result.name} -> {result.locator.url}")

    if pick >= len(results):
        print(f"Candidate index {pick} out of range")
        return

    chosen = results[pick]
    if season is None:
        episodes = await client.get_episode_list(chosen)
    else:
        episodes = await client.get_season_episode_list(chosen, season)

    print(f"{len(episodes)} episode(s):")
    for episode in episodes:
        print(f"- {episode}")


async def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Dry-run search and episode list scraping"
    )
    parser.add_argument(
        "titles",
        nargs="*",
        help="Show titles to search for (e.g., 'Firefly')",
    )
    parser.add_argument(
        "--season",
        type=int,
        default=None,
        help="Fetch a single season instead of the whole show",
    )
    parser.add_argument(
        "--pick",
        type=int,
        default=0,
        help="Index of the search result to list episodes for",
    )
    parser.add_argument(
        "--config",
        default="config.ini",
        help="Path to config.ini with an optional [scraper] section",
    )
    args = parser.parse_args(argv)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    client = TVDotComClient(get_client_config(args.config))
    titles = args.titles or ["Firefly", "Lost"]
    for t in titles:
        try:
            await _run_for_title(client, t, pick=args.pick, season=args.season)
        except ScraperError as e:
            print(f"Error for '{t}': {e}")


if __name__ == "__main__":
    asyncio.run(main())
