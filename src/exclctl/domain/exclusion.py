"""Exclusion rules — untrackable time such as weekends, lunch, and holidays.

Rule syntax (one rule per line, tokens split on whitespace)::

    exc <weekday> <block> [<block> ...]
    exc day on <date>
    exc day off <date>

Parsing validates syntax only.  Dates and time blocks are decoded
lazily by :meth:`ExclusionRule.ranges`, so a rule can parse cleanly and
still fail on its first expansion.

INVARIANT: An ExclusionRule is immutable once constructed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from exclctl.domain.blocks import block_to_interval
from exclctl.domain.calendar import (
    day_of_week,
    iter_day_starts,
    next_day,
    parse_date,
    start_of_day,
)
from exclctl.domain.errors import ExclusionSyntaxError
from exclctl.domain.interval import Interval

MARKER = "exc"
DAY_KEYWORD = "day"


class RuleKind(StrEnum):
    """The three recognized rule shapes."""

    DAY_ON = "day_on"
    DAY_OFF = "day_off"
    WEEKDAY = "weekday"


def _classify(tokens: tuple[str, ...]) -> RuleKind | None:
    if len(tokens) < 2 or tokens[0] != MARKER:
        return None
    if len(tokens) == 4 and tokens[1] == DAY_KEYWORD:
        if tokens[2] == "on":
            return RuleKind.DAY_ON
        if tokens[2] == "off":
            return RuleKind.DAY_OFF
    if len(tokens) >= 3 and day_of_week(tokens[1]) is not None:
        return RuleKind.WEEKDAY
    return None


@dataclass(frozen=True)
class ExclusionRule:
    """A parsed exclusion rule.

    Attributes:
        tokens: The rule split on whitespace, marker included.
        additive: True only for ``day on`` rules, whose ranges re-include
            time that a broader exclusion would otherwise remove.
    """

    tokens: tuple[str, ...]
    additive: bool = False

    def __post_init__(self) -> None:
        tokens = tuple(self.tokens)
        object.__setattr__(self, "tokens", tokens)
        kind = _classify(tokens)
        # Tokens must already be whitespace-split, and only day-on rules add time.
        if (
            kind is None
            or tuple(" ".join(tokens).split()) != tokens
            or self.additive != (kind is RuleKind.DAY_ON)
        ):
            raise ExclusionSyntaxError(" ".join(tokens))

    @classmethod
    def parse(cls, line: str) -> ExclusionRule:
        """Validate *line* and build a rule from it.

        Raises:
            ExclusionSyntaxError: *line* matches none of the grammars.
        """
        tokens = tuple(line.split())
        kind = _classify(tokens)
        if kind is None:
            raise ExclusionSyntaxError(line)
        return cls(tokens=tokens, additive=kind is RuleKind.DAY_ON)

    @property
    def kind(self) -> RuleKind:
        kind = _classify(self.tokens)
        assert kind is not None
        return kind

    @property
    def blocks(self) -> tuple[str, ...]:
        """Time-block tokens of a weekday rule (empty for day rules)."""
        if self.kind is RuleKind.WEEKDAY:
            return self.tokens[2:]
        return ()

    def ranges(self, bound: Interval) -> list[Interval]:
        """Expand the rule into the concrete intervals it covers within *bound*.

        Day rules yield the whole calendar day when it overlaps *bound*.
        Weekday rules yield one interval per time block on every matching
        day touched by *bound*; overlapping blocks are returned as-is.

        Raises:
            MalformedBlockError: A time block on a matching day is invalid.
            MalformedDateError: A day rule's date is invalid.
        """
        if bound.is_empty:
            return []
        if self.kind is RuleKind.WEEKDAY:
            return self._weekday_ranges(bound)
        return self._day_ranges(bound)

    def _day_ranges(self, bound: Interval) -> list[Interval]:
        start = start_of_day(parse_date(self.tokens[3]), bound.start.tzinfo)
        day = Interval(start, next_day(start))
        return [day] if day.overlaps(bound) else []

    def _weekday_ranges(self, bound: Interval) -> list[Interval]:
        weekday = day_of_week(self.tokens[1])
        results: list[Interval] = []
        for day_start in iter_day_starts(bound.start, bound.end):
            if day_start.weekday() != weekday:
                continue
            day_end = next_day(day_start)
            for block in self.blocks:
                results.append(block_to_interval(block, day_start, day_end))
        return results

    def serialize(self) -> str:
        """Reconstruct the rule line; parsing it yields an identical rule."""
        return " ".join(self.tokens)

    def dump(self) -> str:
        """Labeled, newline-terminated form for diagnostics."""
        return f"Exclusion {self.serialize()}\n"

    def __str__(self) -> str:
        return self.serialize()


def parse_exclusion(line: str) -> ExclusionRule:
    """Parse one rule line.  See :meth:`ExclusionRule.parse`."""
    return ExclusionRule.parse(line)
