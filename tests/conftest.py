import asyncio
import sys
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

# Ensure root path is available for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from episode_scraper.errors import FetchError  # noqa: E402
from episode_scraper.services import site_config as site_config_module  # noqa: E402
from episode_scraper.services.types import HyperLink, SearchResult  # noqa: E402

LISTING_URL = "http://www.tv.com/example-show/show/42/episode_listings.html"


class FakeDocumentFetcher:
    """In-memory stand-in for DocumentFetcher.

    Serves canned HTML per URL, records every call and keeps track of how many
    fetches were in flight at the same time.
    """

    def __init__(self, pages: dict[str, str] | None = None) -> None:
        self.pages: dict[str, str] = dict(pages or {})
        self.delays: dict[str, float] = {}
        self.failures: set[str] = set()
        self.calls: list[str] = []
        self.completed: list[str] = []
        self.in_flight = 0
        self.peak_in_flight = 0

    async def fetch(self, url: str) -> BeautifulSoup:
        self.calls.append(url)
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(url, 0))
            if url in self.failures or url not in self.pages:
                raise FetchError(url)
            return BeautifulSoup(self.pages[url], "lxml")
        finally:
            self.in_flight -= 1
            self.completed.append(url)


def listing_page(
    season_count: int,
    rows: list[tuple[str, str]],
    *,
    include_all_seasons: bool = True,
) -> str:
    """Build a TV.com-like season listing page."""
    options = ['<option value="0">All Seasons</option>'] if include_all_seasons else []
    options.extend(
        f'<option value="{n}">{n}</option>' for n in range(1, season_count + 1)
    )
    body_rows = "".join(
        "<tr>"
        f'<td class="number">{rank}</td>'
        f'<td class="ep_title"><a href="/episode/{idx}/summary.html">{title}</a></td>'
        "<td>1/1/2000</td>"
        "</tr>"
        for idx, (rank, title) in enumerate(rows)
    )
    return (
        "<html><body>"
        '<div id="eps_table">'
        f'<select name="season">{"".join(options)}</select>'
        "<table>"
        "<tr><th>#</th><th>Title</th><th>Aired</th></tr>"
        f"{body_rows}"
        "</table>"
        "</div>"
        "</body></html>"
    )


def numbered_rows(count: int, season: int, start: int = 1) -> list[tuple[str, str]]:
    return [(str(n), f"S{season} Episode {n}") for n in range(start, start + count)]


def search_page(anchors: list[tuple[str, str]]) -> str:
    items = "".join(
        f'<li><h3 class="title"><a href="{href}">{name}</a></h3></li>'
        for name, href in anchors
    )
    return f"<html><body><ul>{items}</ul></body></html>"


@pytest.fixture
def fake_fetcher() -> FakeDocumentFetcher:
    return FakeDocumentFetcher()


@pytest.fixture
def listing_html():
    return listing_page


@pytest.fixture
def search_html():
    return search_page


@pytest.fixture(autouse=True)
def _clear_site_config_cache():
    site_config_module._config_cache.clear()
    yield
    site_config_module._config_cache.clear()


@pytest.fixture
def search_result() -> SearchResult:
    return SearchResult(name="Example Show", locator=HyperLink(LISTING_URL))


@pytest.fixture
def season_url():
    def _make(season: int) -> str:
        return f"{LISTING_URL}?season={season}"

    return _make


@pytest.fixture
def make_show(season_url):
    """Build a fake fetcher serving a show whose seasons have the given sizes."""

    def _make(row_counts: list[int]) -> FakeDocumentFetcher:
        fetcher = FakeDocumentFetcher()
        for season, count in enumerate(row_counts, start=1):
            fetcher.pages[season_url(season)] = listing_page(
                len(row_counts), numbered_rows(count, season)
            )
        return fetcher

    return _make
