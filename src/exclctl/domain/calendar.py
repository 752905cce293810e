"""Calendar primitives: weekday names, rule dates, and day stepping.

Weekday indices follow :meth:`datetime.date.weekday` (Monday is 0).
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime, time, timedelta, tzinfo

from exclctl.domain.errors import MalformedDateError

DAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

# Shortest accepted abbreviation ("mon", "tue", ...).
MIN_DAY_NAME_LENGTH = 3

ONE_DAY = timedelta(days=1)


def day_of_week(name: str) -> int | None:
    """Resolve a weekday name or abbreviation to its index.

    Matching is case-insensitive and accepts any prefix of at least
    ``MIN_DAY_NAME_LENGTH`` characters.  Returns None when *name* does
    not resolve.
    """
    needle = name.lower()
    if len(needle) < MIN_DAY_NAME_LENGTH:
        return None
    for index, day_name in enumerate(DAY_NAMES):
        if day_name.startswith(needle):
            return index
    return None


def parse_date(text: str) -> date:
    """Decode a rule date.

    Accepts ISO 8601 dates (``2024-12-25``, ``20241225``), timestamps
    (the date part is kept), and underscore-separated config keys
    (``2024_12_25``).
    """
    candidate = text.replace("_", "-")
    try:
        return date.fromisoformat(candidate)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(candidate).date()
    except ValueError as exc:
        raise MalformedDateError(text) from exc


def start_of_day(day: date, tz: tzinfo | None = None) -> datetime:
    """Midnight at the start of *day*."""
    return datetime.combine(day, time(), tzinfo=tz)


def next_day(moment: datetime) -> datetime:
    """The same wall-clock time one calendar day later."""
    return moment + ONE_DAY


def iter_day_starts(start: datetime, end: datetime) -> Iterator[datetime]:
    """Yield the midnight of every calendar day touched by ``[start, end)``.

    The first day is the one containing *start*, so a partial first day
    is included.  Nothing is yielded when ``start >= end``.
    """
    if start >= end:
        return
    day = start_of_day(start.date(), start.tzinfo)
    while day < end:
        yield day
        day = next_day(day)
