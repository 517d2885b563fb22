from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from ..config import ClientConfig, logger as default_logger
from ..errors import FetchError


class DocumentFetcher:
    """Resolve a URL to a parsed HTML document.

    Transport failures (connection problems, timeouts, HTTP error statuses)
    and markup the parser rejects are all reported as ``FetchError`` with the
    original exception chained.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.logger = logger or default_logger

    def _headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.config.user_agent,
            "Accept-Language": "en-US,en;q=0.9",
            "Accept": (
                "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
            ),
        }

    async def fetch(self, url: str) -> BeautifulSoup:
        self.logger.debug(f"[FETCH] GET {url}")
        try:
            async with httpx.AsyncClient(
                timeout=self.config.timeout, follow_redirects=True
            ) as client:
                response = await client.get(url, headers=self._headers())
                self.logger.debug(f"[FETCH] GET {url} -> {response.status_code}")
                response.raise_for_status()
                html = response.text
        except httpx.HTTPError as exc:
            self.logger.error(f"[FETCH] Request error fetching {url}: {exc}")
            raise FetchError(url) from exc

        try:
            return BeautifulSoup(html, "lxml")
        except ParserRejectedMarkup as exc:
            self.logger.error(f"[FETCH] Could not parse document from {url}: {exc}")
            raise FetchError(url, f"Failed to parse document: {url}") from exc
