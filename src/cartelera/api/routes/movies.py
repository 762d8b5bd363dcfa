"""Movie browsing API endpoints."""

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from cartelera.catalog import get_catalog, get_now
from cartelera.config import settings
from cartelera.schemas import CatalogView, MovieSchema
from cartelera.services.browse import ALL_DAYS, FilterState, available_days, render

router = APIRouter()


def _windows() -> dict[str, int]:
    return {
        "past_window_days": settings.rollover_past_days,
        "future_window_days": settings.rollover_future_days,
    }


@router.get("/days", response_model=list[str])
async def get_days(
    movies: list[MovieSchema] = Depends(get_catalog),
    now: datetime = Depends(get_now),
) -> list[str]:
    """
    Get the day tokens that still have upcoming sessions.

    Returns:
        Day tokens in listing order, for the date filter
    """
    return available_days(movies, now, **_windows())


@router.get("/movies", response_model=CatalogView)
async def get_movies(
    q: str = Query("", description="Case-insensitive title search"),
    day: str = Query(ALL_DAYS, description="Day token to filter by, or 'all'"),
    movies: list[MovieSchema] = Depends(get_catalog),
    now: datetime = Depends(get_now),
) -> CatalogView:
    """
    Browse upcoming movies.

    Sessions that have already started are hidden, and movies without any
    upcoming session are left out.
    """
    return render(movies, FilterState(search=q, day=day), now, **_windows())
