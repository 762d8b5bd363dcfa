"""Data models for scrapers."""

from dataclasses import dataclass, field


@dataclass
class Session:
    """A single screening as it appears in the programme grid."""

    time: str  # Display string, e.g. "10.15-ES"
    link: str | None = None  # Purchase URL, from the grid or the ticketing page

    def __post_init__(self) -> None:
        if not self.time:
            raise ValueError("time must not be empty")


@dataclass
class ShowtimeGroup:
    """All sessions listed for one day token."""

    day: str  # e.g. "Vie. 13" (month is implicit)
    sessions: list[Session]

    def __post_init__(self) -> None:
        if not self.sessions:
            raise ValueError("sessions must not be empty")


@dataclass
class MovieRecord:
    """
    One film extracted from the programme page.

    This is the output format of the programme scraper. The ticket matcher
    may fill missing session links before the catalog is written.
    """

    title: str
    image: str | None = None
    duration: str | None = None
    director: str | None = None
    cast: str | None = None
    synopsis: str | None = None
    showtimes: list[ShowtimeGroup] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate that the record is an actual screening."""
        if not self.title:
            raise ValueError("title must not be empty")
        if not self.showtimes:
            raise ValueError("showtimes must not be empty")

    def iter_sessions(self):
        """Yield every session of the movie in schedule order."""
        for group in self.showtimes:
            yield from group.sessions


@dataclass(frozen=True)
class TicketEntry:
    """Purchase link from the ticketing page, keyed by base title and version."""

    title: str  # Lowercased base title, version suffix removed
    version: str  # ES, VOSE, CAT, VOSC or DEFAULT
    link: str
