"""Half-open datetime intervals.

INVARIANT: ``start <= end``.  An interval with ``start == end`` is empty
and carries no time; it never overlaps anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Interval:
    """A ``[start, end)`` span of time."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            msg = f"Interval start {self.start.isoformat()} is after end {self.end.isoformat()}"
            raise ValueError(msg)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def overlaps(self, other: Interval) -> bool:
        """Check whether the two intervals share any time."""
        if self.is_empty or other.is_empty:
            return False
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}
