"""Scrapers for the programme and ticketing pages."""

from cartelera.scrapers.base import BaseScraper, SourceNotFoundError
from cartelera.scrapers.koobin import KoobinScraper
from cartelera.scrapers.programme import ProgrammeScraper

__all__ = [
    "BaseScraper",
    "KoobinScraper",
    "ProgrammeScraper",
    "SourceNotFoundError",
]
