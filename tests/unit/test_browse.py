"""Unit tests for the browsing view."""

from datetime import datetime
from zoneinfo import ZoneInfo

from cartelera.schemas import MovieSchema, SessionSchema, ShowtimeSchema
from cartelera.services.browse import (
    ALL_DAYS,
    NO_RESULTS_MESSAGE,
    FilterState,
    available_days,
    render,
    upcoming,
)

MADRID_TZ = ZoneInfo("Europe/Madrid")
NOW = datetime(2026, 3, 13, 10, 0, tzinfo=MADRID_TZ)


def make_movie(title: str, showtimes: dict[str, list[str]]) -> MovieSchema:
    return MovieSchema(
        title=title,
        showtimes=[
            ShowtimeSchema(day=day, sessions=[SessionSchema(time=t) for t in times])
            for day, times in showtimes.items()
        ],
    )


def make_catalog() -> list[MovieSchema]:
    return [
        make_movie("Nosferatu", {"Vie. 13": ["17.00-VOSE", "19.00-ES", "21.00-VOSE"]}),
        make_movie("La substància", {"Jue. 12": ["16.00-VOSE", "18.00-ES"]}),
    ]


class TestUpcoming:
    def test_drops_movie_with_only_past_sessions(self) -> None:
        result = upcoming(make_catalog(), NOW)
        assert [m.title for m in result] == ["Nosferatu"]

    def test_drops_past_sessions_and_empty_days(self) -> None:
        movie = make_movie(
            "Anora",
            {"Jue. 12": ["20.00"], "Vie. 13": ["09.00", "22.00"], "Sáb. 14": ["18.00"]},
        )

        [result] = upcoming([movie], NOW)

        assert [g.day for g in result.showtimes] == ["Vie. 13", "Sáb. 14"]
        assert [s.time for s in result.showtimes[0].sessions] == ["22.00"]

    def test_does_not_modify_input(self) -> None:
        catalog = make_catalog()
        upcoming(catalog, NOW)
        assert len(catalog[1].showtimes[0].sessions) == 2

    def test_unreadable_times_are_kept(self) -> None:
        movie = make_movie("Anora", {"Jue. 12": ["TBD"]})
        assert upcoming([movie], NOW) == [movie]


class TestAvailableDays:
    def test_only_days_with_upcoming_sessions(self) -> None:
        assert available_days(make_catalog(), NOW) == ["Vie. 13"]

    def test_distinct_days_in_listing_order(self) -> None:
        catalog = [
            make_movie("Anora", {"Sáb. 14": ["18.00"], "Vie. 13": ["20.00"]}),
            make_movie("Dune", {"Vie. 13": ["18.00"], "Dom. 15": ["18.00"]}),
        ]
        assert available_days(catalog, NOW) == ["Sáb. 14", "Vie. 13", "Dom. 15"]

    def test_windows_are_passed_through(self) -> None:
        # Day 1 is 12 days back: past by default, next month with a 10-day window
        now = datetime(2026, 3, 13, 10, 0, tzinfo=MADRID_TZ)
        catalog = [make_movie("Anora", {"Dom. 1": ["18.00"]})]
        assert available_days(catalog, now) == []
        assert available_days(catalog, now, past_window_days=10) == ["Dom. 1"]


class TestRender:
    def test_default_state_shows_all_upcoming(self) -> None:
        view = render(make_catalog(), FilterState(), NOW)

        assert view.day == ALL_DAYS
        assert [m.title for m in view.movies] == ["Nosferatu"]
        assert view.days == ["Vie. 13"]
        assert view.total == 1
        assert view.message is None

    def test_search_matches_title_substring(self) -> None:
        catalog = [
            make_movie("Nosferatu", {"Vie. 13": ["17.00"]}),
            make_movie("Anora", {"Vie. 13": ["18.00"]}),
        ]
        view = render(catalog, FilterState(search="  NOR "), NOW)
        assert [m.title for m in view.movies] == ["Anora"]
        assert view.search == "  NOR "

    def test_day_filter(self) -> None:
        catalog = [
            make_movie("Nosferatu", {"Vie. 13": ["17.00"]}),
            make_movie("Anora", {"Sáb. 14": ["18.00"]}),
        ]
        view = render(catalog, FilterState(day="Sáb. 14"), NOW)
        assert [m.title for m in view.movies] == ["Anora"]
        assert view.days == ["Vie. 13", "Sáb. 14"]

    def test_empty_result_has_message(self) -> None:
        view = render(make_catalog(), FilterState(search="dune"), NOW)
        assert view.movies == []
        assert view.total == 0
        assert view.message == NO_RESULTS_MESSAGE

    def test_past_day_is_not_selectable_or_shown(self) -> None:
        view = render(make_catalog(), FilterState(day="Jue. 12"), NOW)
        assert "Jue. 12" not in view.days
        assert view.movies == []

    def test_out_of_range_day_is_kept(self) -> None:
        catalog = [make_movie("Nosferatu", {"Dv. 9999999999": ["10.15-VOSE"]})]
        view = render(catalog, FilterState(), NOW)
        assert [m.title for m in view.movies] == ["Nosferatu"]
        assert view.days == ["Dv. 9999999999"]
