"""Ticketing page scraper for purchase links."""

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from cartelera.scrapers.base import BaseScraper, is_remote
from cartelera.scrapers.models import TicketEntry
from cartelera.utils.text import collapse_whitespace, split_ticket_title

logger = logging.getLogger(__name__)


class KoobinScraper(BaseScraper):
    """
    Scraper for the box office listing.

    Every event on the listing is an entry element holding the display
    title in a span ("Movie X (VOSE)") and a link to its purchase page.
    Titles carry the screening version in parentheses, which becomes part
    of the lookup key.
    """

    ENTRY_SELECTOR = ".event, .session, li.item"
    TITLE_SELECTOR = "span.title"
    LINK_SELECTOR = "a[href]"

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    async def scrape(self, source: str) -> list[TicketEntry]:
        """Fetch and parse; relative links resolve against a remote source."""
        if self.base_url is None and is_remote(source):
            self.base_url = source
        return await super().scrape(source)

    def parse(self, html: str) -> list[TicketEntry]:
        """Parse all ticket entries from the listing HTML."""
        soup = BeautifulSoup(html, "html.parser")
        entries: list[TicketEntry] = []
        for element in soup.select(self.ENTRY_SELECTOR):
            try:
                entry = self._parse_entry(element)
                if entry:
                    entries.append(entry)
            except Exception as e:
                logger.warning(f"Tickets: failed to parse entry: {e}")

        logger.debug(f"Tickets: {len(entries)} entries found")
        return entries

    def _parse_entry(self, element: Tag) -> TicketEntry | None:
        title_tag = element.select_one(self.TITLE_SELECTOR) or element.find("span")
        link_tag = element.select_one(self.LINK_SELECTOR)
        if not isinstance(title_tag, Tag) or link_tag is None:
            return None

        full_title = collapse_whitespace(title_tag.get_text())
        href = str(link_tag.get("href", "")).strip()
        if not full_title or not href:
            return None

        title, version = split_ticket_title(full_title)
        return TicketEntry(title=title, version=version, link=self._absolute(href))

    def _absolute(self, href: str) -> str:
        if self.base_url and not is_remote(href):
            return urljoin(self.base_url, href)
        return href
