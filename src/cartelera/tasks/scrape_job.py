"""One-shot scrape job that builds the catalog artifact."""

import logging
from pathlib import Path

import httpx

from cartelera.config import settings
from cartelera.scrapers import KoobinScraper, ProgrammeScraper, SourceNotFoundError
from cartelera.scrapers.models import MovieRecord
from cartelera.schemas import dump_catalog
from cartelera.services.ticket_matcher import TicketMatcher

logger = logging.getLogger(__name__)


async def fill_ticket_links(movies: list[MovieRecord], tickets_source: str) -> int:
    """Fill missing session links from the ticketing page.

    The ticketing page is optional: when it cannot be read, the movies keep
    the links found on the programme page.
    """
    scraper = KoobinScraper(base_url=settings.tickets_base_url)
    try:
        entries = await scraper.scrape(tickets_source)
    except SourceNotFoundError:
        logger.warning(f"Tickets source not found: {tickets_source}, skipping link matching")
        return 0
    except httpx.HTTPError as e:
        logger.warning(f"Could not download tickets from {tickets_source}: {e}")
        return 0

    logger.info(f"Loaded {len(entries)} ticket entries from {tickets_source}")
    matcher = TicketMatcher(entries, fuzzy_threshold=settings.ticket_match_threshold)
    return matcher.reconcile(movies)


def write_catalog(movies: list[MovieRecord], output_path: Path) -> None:
    """Write the catalog artifact as indented UTF-8 JSON."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(dump_catalog(movies))


async def run_scrape(
    programme_source: str | None = None,
    tickets_source: str | None = None,
    output_path: Path | None = None,
    *,
    use_tickets: bool = True,
) -> list[MovieRecord]:
    """Scrape the programme, fill ticket links and write the catalog.

    Args:
        programme_source: Programme page path or URL (default from settings)
        tickets_source: Ticketing page path or URL (default from settings)
        output_path: Where to write the catalog (default from settings)
        use_tickets: Skip link matching entirely when False

    Returns:
        Movies in the order they appear on the programme page

    Raises:
        SourceNotFoundError: The programme page does not exist
        httpx.HTTPError: The programme page could not be downloaded
        OSError: The catalog could not be written
    """
    programme_source = programme_source or settings.programme_source
    tickets_source = tickets_source or settings.tickets_source
    output_path = output_path or settings.output_path

    logger.info(f"Scraping programme from {programme_source}")
    scraper = ProgrammeScraper(translate_days=settings.translate_days)
    movies = await scraper.scrape(programme_source)

    if use_tickets and tickets_source:
        await fill_ticket_links(movies, tickets_source)

    write_catalog(movies, output_path)

    sessions = sum(1 for m in movies for _ in m.iter_sessions())
    missing = sum(1 for m in movies for s in m.iter_sessions() if not s.link)
    logger.info(
        f"Scraped {len(movies)} movies, {sessions} sessions "
        f"({missing} without link) into {output_path}"
    )
    return movies
