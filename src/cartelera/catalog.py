"""Catalog loading and request dependencies for the browsing API."""

import logging
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

from fastapi import Request

from cartelera.config import settings
from cartelera.schemas import MovieSchema, load_catalog

logger = logging.getLogger(__name__)


def read_catalog(path: Path) -> list[MovieSchema]:
    """
    Read the catalog artifact written by the scrape job.

    A missing artifact gives an empty catalog, so the API still starts
    before the first scrape.
    """
    if not path.is_file():
        logger.warning(f"Catalog {path} not found, serving an empty catalog")
        return []
    movies = load_catalog(path.read_bytes())
    logger.info(f"Loaded {len(movies)} movies from {path}")
    return movies


def get_catalog(request: Request) -> list[MovieSchema]:
    """
    Dependency for FastAPI to provide the catalog loaded at startup.

    Usage:
        @app.get("/endpoint")
        async def endpoint(movies: list[MovieSchema] = Depends(get_catalog)):
            # Use movies here
    """
    return getattr(request.app.state, "catalog", [])


def get_now() -> datetime:
    """Dependency for FastAPI to provide the current local time."""
    return datetime.now(ZoneInfo(settings.timezone))
