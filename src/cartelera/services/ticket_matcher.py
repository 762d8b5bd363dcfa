"""Ticket matching service that fills missing purchase links."""

import logging

from rapidfuzz import fuzz

from cartelera.scrapers.models import MovieRecord, TicketEntry
from cartelera.utils.text import DEFAULT_VERSION, base_title, detect_version

logger = logging.getLogger(__name__)


class TicketMatcher:
    """
    Service for matching programme sessions to ticketing page links.

    Uses a multi-stage lookup per session:
    1. Exact (base title, version) key
    2. Exact (base title, DEFAULT) key
    3. Fuzzy match of the base title within the same version, then DEFAULT

    Sessions that already have a link are never touched.
    """

    FUZZY_THRESHOLD = 90  # Minimum similarity score for fuzzy matching

    def __init__(
        self, entries: list[TicketEntry], fuzzy_threshold: int | None = None
    ) -> None:
        """
        Initialize ticket matcher.

        Args:
            entries: Parsed ticketing page entries; later entries win on
                duplicate keys
            fuzzy_threshold: Minimum rapidfuzz ratio; above 100 disables
                fuzzy matching
        """
        self.fuzzy_threshold = (
            fuzzy_threshold if fuzzy_threshold is not None else self.FUZZY_THRESHOLD
        )
        self.links: dict[tuple[str, str], str] = {}
        for entry in entries:
            self.links[(entry.title, entry.version)] = entry.link

    def find_link(self, title: str, time: str) -> str | None:
        """
        Find the purchase link for one session.

        Args:
            title: Programme title of the movie, e.g. "Movie X (ES)"
            time: Session time string, e.g. "18.30-VOSE"

        Returns:
            Purchase URL or None if nothing matches
        """
        base = base_title(title)
        version = detect_version(time)

        # Stage 1 & 2: exact keys
        link = self.links.get((base, version)) or self.links.get((base, DEFAULT_VERSION))
        if link:
            return link

        # Stage 3: fuzzy match on the base title
        for candidate_version in dict.fromkeys((version, DEFAULT_VERSION)):
            link = self._fuzzy_match(base, candidate_version)
            if link:
                return link
        return None

    def _fuzzy_match(self, base: str, version: str) -> str | None:
        """Fuzzy match a base title against ticket titles of one version."""
        if not base or self.fuzzy_threshold > 100:
            return None

        best_score = 0.0
        best_key = None
        for key in self.links:
            if key[1] != version:
                continue
            score = fuzz.ratio(base, key[0])
            if score > best_score:
                best_score = score
                best_key = key

        if best_key and best_score >= self.fuzzy_threshold:
            logger.debug(f"Fuzzy match: {best_score:.1f}% - '{base}' -> '{best_key[0]}'")
            return self.links[best_key]
        return None

    def reconcile(self, movies: list[MovieRecord]) -> int:
        """
        Fill missing session links in place.

        Args:
            movies: Movies from the programme page

        Returns:
            Number of sessions that received a link
        """
        filled = 0
        for movie in movies:
            for session in movie.iter_sessions():
                if session.link:
                    continue
                link = self.find_link(movie.title, session.time)
                if link:
                    session.link = link
                    filled += 1

        logger.info(f"Ticket matching filled {filled} session links")
        return filled
