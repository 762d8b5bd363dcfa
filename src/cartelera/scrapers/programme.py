"""Programme page scraper using BeautifulSoup HTML parsing."""

import logging

from bs4 import BeautifulSoup, Tag

from cartelera.scrapers.base import BaseScraper
from cartelera.scrapers.models import MovieRecord, Session, ShowtimeGroup
from cartelera.utils.text import CATALAN_TO_SPANISH_DAYS, clean_title, translate_day

logger = logging.getLogger(__name__)

MIN_TITLE_LENGTH = 3
MIN_FALLBACK_SYNOPSIS_LENGTH = 100
NO_SESSION = "-"
PARAGRAPH_SELECTOR = "p, .dmNewParagraph"

LABEL_DURATION = "DURADA:"
LABEL_DIRECTOR = "DIRECCIÓ:"
LABEL_CAST = "INTÈRPRETS:"
LABEL_VERSIONS = "VERSIONS:"
LABEL_SYNOPSIS = "SINOPSI:"

# (field, label, label must open the paragraph), in the order the page uses.
# A value ends where any label from its own position onwards appears next.
# VERSIONS has no field of its own and only closes the cast.
_LABELS: list[tuple[str | None, str, bool]] = [
    ("duration", LABEL_DURATION, True),
    ("director", LABEL_DIRECTOR, False),
    ("cast", LABEL_CAST, False),
    (None, LABEL_VERSIONS, False),
    ("synopsis", LABEL_SYNOPSIS, False),
]


class ProgrammeScraper(BaseScraper):
    """
    Scraper for the cinema's programme page.

    The page is a site-builder export: each film sits in its own
    ``.dmRespRow`` block with a bold title paragraph, a poster in an
    ``.imageWidget``, a ``table.table`` grid of day rows and session cells,
    and free-text paragraphs carrying labelled metadata in Catalan
    ("DURADA:", "DIRECCIÓ:", ...). Rows without a title or a grid are
    layout, not films, and are skipped.
    """

    def __init__(
        self,
        translate_days: bool = True,
        day_table: dict[str, str] | None = None,
    ) -> None:
        self.translate_days = translate_days
        self.day_table = day_table if day_table is not None else CATALAN_TO_SPANISH_DAYS

    def parse(self, html: str) -> list[MovieRecord]:
        """Parse every title block of the page, in document order."""
        soup = BeautifulSoup(html, "html.parser")
        movies: list[MovieRecord] = []
        for block in soup.select(".dmRespRow"):
            try:
                movie = self._parse_block(block)
                if movie:
                    movies.append(movie)
            except Exception as e:
                logger.warning(f"Programme: failed to parse title block: {e}")

        logger.debug(f"Programme: {len(movies)} movies found")
        return movies

    def _parse_block(self, block: Tag) -> MovieRecord | None:
        """Parse one title block, or return None when it is not a screening."""
        title = self._extract_title(block)
        if not title:
            return None

        showtimes = self._extract_schedule(block)
        if not showtimes:
            logger.debug(f"Programme: skipping '{title}', no sessions")
            return None

        fields = self._extract_fields(block)
        return MovieRecord(
            title=title,
            image=self._extract_image(block),
            duration=fields["duration"],
            director=fields["director"],
            cast=fields["cast"],
            synopsis=fields["synopsis"],
            showtimes=showtimes,
        )

    @staticmethod
    def _get_text(tag: Tag) -> str:
        return tag.get_text().strip()

    def _extract_title(self, block: Tag) -> str | None:
        """
        Read the title from the bold text of the left-aligned paragraph.

        The first candidate is used unless it is blank once the "(+info)"
        marker is removed. Unlike a plain first-match lookup, which would
        drop such a block, later candidates are then tried in order.
        Titles shorter than three characters are decorative rows.
        """
        title = ""
        for strong in block.select("p.text-align-left strong"):
            title = clean_title(self._get_text(strong))
            if title:
                break

        if len(title) < MIN_TITLE_LENGTH:
            return None
        return title

    def _extract_image(self, block: Tag) -> str | None:
        img = block.select_one(".imageWidget img")
        if img is None:
            return None
        src = img.get("src")
        return str(src) if src else None

    def _extract_schedule(self, block: Tag) -> list[ShowtimeGroup] | None:
        """
        Read the showtime grid.

        Returns:
            One group per day row with at least one session, or None when
            the block has no grid at all
        """
        if block.select_one("table.table") is None:
            return None

        showtimes: list[ShowtimeGroup] = []
        for row in block.select("table.table tr.row"):
            cells = row.select("td.cell")
            if not cells:
                continue

            day = self._get_text(cells[0])  # e.g. "Dv. 13"
            if self.translate_days:
                day = translate_day(day, self.day_table)

            sessions: list[Session] = []
            for cell in cells[1:]:
                time_text = self._get_text(cell)
                if not time_text or time_text == NO_SESSION:
                    continue
                anchor = cell.find("a")
                href = anchor.get("href") if isinstance(anchor, Tag) else None
                sessions.append(Session(time=time_text, link=str(href) if href else None))

            if sessions:
                showtimes.append(ShowtimeGroup(day=day, sessions=sessions))

        return showtimes

    def _extract_fields(self, block: Tag) -> dict[str, str | None]:
        """Collect duration, director, cast and synopsis from labelled paragraphs."""
        fields: dict[str, str | None] = {
            "duration": None,
            "director": None,
            "cast": None,
            "synopsis": None,
        }
        paragraphs = [self._get_text(p) for p in self._paragraphs(block)]

        for text in paragraphs:
            for index, (name, _, _) in enumerate(_LABELS):
                if name is None or fields[name]:
                    continue
                value = self._labelled_value(text, index)
                if value:
                    fields[name] = value

        if not fields["synopsis"]:
            fields["synopsis"] = self._fallback_synopsis(paragraphs)
        return fields

    @staticmethod
    def _paragraphs(block: Tag) -> list[Tag]:
        """
        Paragraph nodes that hold no other paragraph node.

        A ``.dmNewParagraph`` wrapper around several ``<p>`` would otherwise
        join them into one text and run a label value into the next paragraph.
        """
        return [
            node
            for node in block.select(PARAGRAPH_SELECTOR)
            if node.select_one(PARAGRAPH_SELECTOR) is None
        ]

    @staticmethod
    def _labelled_value(text: str, index: int) -> str | None:
        """
        Return the text between label ``index`` and the next label.

        Only labels at ``index`` or later close the value, so
        "DIRECCIÓ: Agnès Varda INTÈRPRETS: ..." gives "Agnès Varda".
        """
        _, label, at_start = _LABELS[index]
        if at_start:
            if not text.startswith(label):
                return None
            start = len(label)
        else:
            pos = text.find(label)
            if pos == -1:
                return None
            start = pos + len(label)

        end = len(text)
        for _, other, _ in _LABELS[index:]:
            pos = text.find(other, start)
            if pos != -1:
                end = min(end, pos)
        return text[start:end].strip()

    @staticmethod
    def _fallback_synopsis(paragraphs: list[str]) -> str | None:
        """Pick the longest long-form paragraph that is not a metadata line."""
        candidates = [
            text
            for text in paragraphs
            if len(text) > MIN_FALLBACK_SYNOPSIS_LENGTH
            and not text.startswith((LABEL_DURATION, LABEL_DIRECTOR))
        ]
        if not candidates:
            return None
        return max(candidates, key=len)
