"""Resolve month-less day tokens into concrete session start times."""

import re
from datetime import datetime, timedelta

# A listing spans a few weeks around today. A candidate further than these
# windows from now belongs to the adjacent month.
PAST_WINDOW_DAYS = 15
FUTURE_WINDOW_DAYS = 20

MAX_DAY = 31

_DAY_RE = re.compile(r"\d+")
_TIME_RE = re.compile(r"(\d{1,2})[.:](\d{2})")


def _compose(year: int, month: int, day: int, hour: int, minute: int, tzinfo) -> datetime:
    """Build a datetime, letting out-of-range day/hour/minute spill forward."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    first = datetime(year, month, 1, tzinfo=tzinfo)
    return first + timedelta(days=day - 1, hours=hour, minutes=minute)


def parse_time(text: str) -> tuple[int, int] | None:
    """
    Extract (hour, minute) from the first "H.MM" or "H:MM" in text.

    "10.15-ES" → (10, 15), "20:00" → (20, 0), "TBD" → None
    """
    m = _TIME_RE.search(text)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def session_start(
    day_token: str,
    time_token: str,
    now: datetime,
    *,
    past_window_days: int = PAST_WINDOW_DAYS,
    future_window_days: int = FUTURE_WINDOW_DAYS,
) -> datetime | None:
    """
    Resolve a day token and a session time into a start datetime.

    The day token carries only a day of the month ("Vie. 13"), so the month
    is taken from ``now`` and corrected when the result lands outside the
    listing window: more than ``past_window_days`` behind means next month,
    more than ``future_window_days`` ahead means last month.

    Args:
        day_token: Day token, e.g. "Vie. 13"
        time_token: Session time, e.g. "10.15-ES"
        now: Reference time; its timezone is used for the result
        past_window_days: How far back a session may lie in the same month
        future_window_days: How far ahead a session may lie in the same month

    Returns:
        Start datetime, or None when either token cannot be read or the
        day number is past 31
    """
    day_match = _DAY_RE.search(day_token)
    time_parts = parse_time(time_token)
    if not day_match or not time_parts:
        return None

    day = int(day_match.group())
    if day > MAX_DAY:
        return None
    hour, minute = time_parts

    month_offset = 0
    try:
        candidate = _compose(now.year, now.month, day, hour, minute, now.tzinfo)
        diff = candidate - now
        if diff < timedelta(days=-past_window_days):
            month_offset = 1
        elif diff > timedelta(days=future_window_days):
            month_offset = -1

        if month_offset:
            candidate = _compose(
                now.year, now.month + month_offset, day, hour, minute, now.tzinfo
            )
    except (OverflowError, ValueError):
        # Dates beyond the datetime range
        return None
    return candidate


def is_past(
    day_token: str,
    time_token: str,
    now: datetime,
    *,
    past_window_days: int = PAST_WINDOW_DAYS,
    future_window_days: int = FUTURE_WINDOW_DAYS,
) -> bool:
    """
    Check whether a session has already started.

    Malformed tokens count as upcoming, so a session is only hidden when its
    start time can actually be resolved.
    """
    start = session_start(
        day_token,
        time_token,
        now,
        past_window_days=past_window_days,
        future_window_days=future_window_days,
    )
    if start is None:
        return False
    return start < now
