"""Base scraper interface for programme and ticketing pages."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import httpx

from cartelera.config import settings

logger = logging.getLogger(__name__)


class SourceNotFoundError(FileNotFoundError):
    """Raised when a local HTML source does not exist."""

    def __init__(self, source: str) -> None:
        super().__init__(f"Source not found: {source}")
        self.source = source


def is_remote(source: str) -> bool:
    """Return True for http(s) URLs."""
    return source.startswith(("http://", "https://"))


class BaseScraper(ABC):
    """
    Abstract base class for the page scrapers.

    Pages are read from a saved HTML file or downloaded from a URL; parsing
    is pure and works on the HTML text alone.
    """

    async def fetch(self, source: str) -> str:
        """
        Read the HTML for a source.

        Args:
            source: Local file path or http(s) URL

        Returns:
            Page HTML

        Raises:
            SourceNotFoundError: Local file does not exist
            httpx.HTTPError: Remote page could not be downloaded
        """
        if is_remote(source):
            async with httpx.AsyncClient(
                timeout=settings.scrape_timeout, follow_redirects=True
            ) as client:
                response = await client.get(source)
                response.raise_for_status()
                logger.debug(f"Downloaded {len(response.text)} chars from {source}")
                return response.text

        path = Path(source)
        if not path.is_file():
            raise SourceNotFoundError(source)
        return path.read_text(encoding="utf-8")

    @abstractmethod
    def parse(self, html: str) -> list[Any]:
        """
        Parse page HTML into records.

        Raises:
            Should NOT raise for malformed entries. Skip them and log.
        """
        pass

    async def scrape(self, source: str) -> list[Any]:
        """Fetch a source and parse it."""
        html = await self.fetch(source)
        return self.parse(html)
