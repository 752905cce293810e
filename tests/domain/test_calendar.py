"""Tests for weekday names, rule dates, and day stepping."""

from datetime import date, datetime, timezone

import pytest

from exclctl.domain.calendar import (
    day_of_week,
    iter_day_starts,
    next_day,
    parse_date,
    start_of_day,
)
from exclctl.domain.errors import MalformedDateError


class TestDayOfWeek:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("monday", 0),
            ("Monday", 0),
            ("MON", 0),
            ("tue", 1),
            ("wednes", 2),
            ("thursday", 3),
            ("fri", 4),
            ("sat", 5),
            ("sunday", 6),
        ],
    )
    def test_resolves(self, name: str, expected: int) -> None:
        assert day_of_week(name) == expected

    @pytest.mark.parametrize("name", ["", "mo", "su", "day", "mondays", "funday", "xyz"])
    def test_unresolved(self, name: str) -> None:
        assert day_of_week(name) is None

    def test_matches_python_weekday(self) -> None:
        assert day_of_week("wednesday") == date(2024, 12, 25).weekday()


class TestParseDate:
    @pytest.mark.parametrize(
        "text",
        ["2024-12-25", "20241225", "2024_12_25", "2024-12-25T10:30:00", "2024-12-25 23:59:59"],
    )
    def test_accepted_forms(self, text: str) -> None:
        assert parse_date(text) == date(2024, 12, 25)

    @pytest.mark.parametrize("text", ["", "tomorrow", "2024-13-01", "2024-02-30", "25/12/2024"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(MalformedDateError) as exc_info:
            parse_date(text)
        assert exc_info.value.text == text
        assert f"Malformed date '{text}'." == str(exc_info.value)


class TestDayStepping:
    def test_start_of_day_naive(self) -> None:
        assert start_of_day(date(2024, 12, 2)) == datetime(2024, 12, 2)

    def test_start_of_day_keeps_tz(self) -> None:
        midnight = start_of_day(date(2024, 12, 2), timezone.utc)
        assert midnight.tzinfo is timezone.utc

    def test_next_day(self) -> None:
        assert next_day(datetime(2024, 12, 31, 8)) == datetime(2025, 1, 1, 8)

    def test_iter_includes_partial_first_day(self) -> None:
        days = list(iter_day_starts(datetime(2024, 12, 1, 23), datetime(2024, 12, 2, 1)))
        assert days == [datetime(2024, 12, 1), datetime(2024, 12, 2)]

    def test_iter_stops_at_exclusive_end(self) -> None:
        days = list(iter_day_starts(datetime(2024, 12, 2), datetime(2024, 12, 3)))
        assert days == [datetime(2024, 12, 2)]

    def test_iter_empty_range(self) -> None:
        moment = datetime(2024, 12, 2, 10)
        assert list(iter_day_starts(moment, moment)) == []
