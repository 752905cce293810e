"""Time-block decoding for weekday exclusion rules.

Three block forms, all relative to one calendar day:

- ``<HH:MM:SS``          — from the start of the day up to the time
- ``>HH:MM:SS``          — from the time to the end of the day
- ``HH:MM:SS-HH:MM:SS``  — an explicit sub-range

Seconds are optional.  Field values are not range-checked: the time is
applied to the day start as an offset, so ``25:00:00`` lands at 01:00
on the following day.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from exclctl.domain.errors import MalformedBlockError
from exclctl.domain.interval import Interval

_HMS = r"([0-9]{1,2}):([0-9]{2})(?::([0-9]{2}))?"

BLOCK_PATTERNS: dict[str, re.Pattern[str]] = {
    "before": re.compile(rf"<{_HMS}"),
    "after": re.compile(rf">{_HMS}"),
    "range": re.compile(rf"{_HMS}-{_HMS}"),
}


def _offset(hours: str, minutes: str, seconds: str | None) -> timedelta:
    return timedelta(hours=int(hours), minutes=int(minutes), seconds=int(seconds or 0))


def block_to_interval(block: str, day_start: datetime, day_end: datetime) -> Interval:
    """Decode *block* into an interval on the day ``[day_start, day_end)``.

    Raises:
        MalformedBlockError: The block matches none of the three forms,
            or its times would produce an inverted interval.
    """
    before = BLOCK_PATTERNS["before"].fullmatch(block)
    after = BLOCK_PATTERNS["after"].fullmatch(block)
    sub_range = BLOCK_PATTERNS["range"].fullmatch(block)

    if before is not None:
        start, end = day_start, day_start + _offset(*before.groups())
    elif after is not None:
        start, end = day_start + _offset(*after.groups()), day_end
    elif sub_range is not None:
        groups = sub_range.groups()
        start = day_start + _offset(*groups[:3])
        end = day_start + _offset(*groups[3:])
    else:
        raise MalformedBlockError(block)

    try:
        return Interval(start, end)
    except ValueError as exc:
        raise MalformedBlockError(block) from exc
