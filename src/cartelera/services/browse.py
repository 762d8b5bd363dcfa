"""Browsing view over the catalog: search, date filters and past-session pruning."""

from dataclasses import dataclass
from datetime import datetime

from cartelera.schemas import CatalogView, MovieSchema, ShowtimeSchema
from cartelera.utils.dates import FUTURE_WINDOW_DAYS, PAST_WINDOW_DAYS, is_past

ALL_DAYS = "all"
NO_RESULTS_MESSAGE = "No results"


@dataclass(frozen=True)
class FilterState:
    """Current search text and day filter."""

    search: str = ""
    day: str = ALL_DAYS


def upcoming(
    movies: list[MovieSchema],
    now: datetime,
    *,
    past_window_days: int = PAST_WINDOW_DAYS,
    future_window_days: int = FUTURE_WINDOW_DAYS,
) -> list[MovieSchema]:
    """
    Drop sessions that have already started.

    Days left without sessions are dropped, and so are movies left without
    days. The input is not modified.
    """
    result: list[MovieSchema] = []
    for movie in movies:
        showtimes: list[ShowtimeSchema] = []
        for group in movie.showtimes:
            sessions = [
                s
                for s in group.sessions
                if not is_past(
                    group.day,
                    s.time,
                    now,
                    past_window_days=past_window_days,
                    future_window_days=future_window_days,
                )
            ]
            if sessions:
                showtimes.append(group.model_copy(update={"sessions": sessions}))
        if showtimes:
            result.append(movie.model_copy(update={"showtimes": showtimes}))
    return result


def _distinct_days(movies: list[MovieSchema]) -> list[str]:
    days: dict[str, None] = {}
    for movie in movies:
        for group in movie.showtimes:
            days.setdefault(group.day, None)
    return list(days)


def available_days(movies: list[MovieSchema], now: datetime, **windows: int) -> list[str]:
    """Day tokens with at least one upcoming session, in listing order."""
    return _distinct_days(upcoming(movies, now, **windows))


def render(
    movies: list[MovieSchema],
    state: FilterState,
    now: datetime,
    **windows: int,
) -> CatalogView:
    """
    Build the view for a filter state.

    Args:
        movies: Catalog as loaded from the artifact
        state: Search text (case-insensitive title substring) and day token,
            or "all"
        now: Reference time for hiding past sessions
        **windows: Month rollover windows passed on to ``is_past``

    Returns:
        View with the selectable days and the matching movies
    """
    current = upcoming(movies, now, **windows)
    search = state.search.strip().lower()

    matches = [
        movie
        for movie in current
        if search in movie.title.lower()
        and (state.day == ALL_DAYS or any(g.day == state.day for g in movie.showtimes))
    ]

    return CatalogView(
        search=state.search,
        day=state.day,
        days=_distinct_days(current),
        movies=matches,
        total=len(matches),
        message=None if matches else NO_RESULTS_MESSAGE,
    )
