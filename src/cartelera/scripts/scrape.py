"""Build data.json from the programme page and the ticketing page."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx

from cartelera.config import settings
from cartelera.scrapers import SourceNotFoundError
from cartelera.tasks.scrape_job import run_scrape

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Extract the showtime catalog from the cinema's programme page."
    )
    parser.add_argument(
        "--programme",
        default=settings.programme_source,
        metavar="SRC",
        help=f"Programme HTML file or URL (default: {settings.programme_source})",
    )
    tickets = parser.add_mutually_exclusive_group()
    tickets.add_argument(
        "--tickets",
        default=settings.tickets_source,
        metavar="SRC",
        help=f"Ticketing HTML file or URL (default: {settings.tickets_source})",
    )
    tickets.add_argument(
        "--no-tickets",
        action="store_true",
        help="Keep only the links found on the programme page",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=settings.output_path,
        metavar="PATH",
        help=f"Catalog output path (default: {settings.output_path})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        asyncio.run(
            run_scrape(
                args.programme,
                args.tickets,
                args.output,
                use_tickets=not args.no_tickets,
            )
        )
    except SourceNotFoundError as e:
        logger.error(f"Programme source not found: {e.source}")
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error(f"Could not download programme from {args.programme}: {e}")
        sys.exit(1)
    except OSError as e:
        # Reading the programme or writing the catalog
        logger.error(f"Scrape failed on {e.filename or args.programme}: {e.strerror or e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
