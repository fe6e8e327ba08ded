"""Tests for DepartureFormatter."""

from datetime import date

import pytest

from sncf_departures.adapters.web.formatters import DepartureFormatter


def _ms(hour: int, minute: int, second: int = 0) -> int:
    return ((hour * 3600) + (minute * 60) + second) * 1000


@pytest.mark.parametrize(
    ("departure_time", "expected"),
    [
        (_ms(9, 5), "9:05"),
        (_ms(23, 0), "23:00"),
        (_ms(0, 0), "0:00"),
        (_ms(14, 30, 59), "14:30"),
        (_ms(12, 59, 30), "12:59"),
    ],
)
def test_format_departure_time(departure_time: int, expected: str) -> None:
    """Given milliseconds since midnight, when formatting, then hour is unpadded and minute padded."""
    formatter = DepartureFormatter()

    assert formatter.format_departure_time(departure_time) == expected


def test_format_departure_time_wraps_past_midnight() -> None:
    """Given an hour slice above 23, when formatting, then the UTC reading wraps to the next day."""
    formatter = DepartureFormatter()

    assert formatter.format_departure_time(_ms(25, 10)) == "1:10"


@pytest.mark.parametrize(
    ("departure_date", "expected"),
    [
        (date(2025, 1, 19), "19 janvier 2025"),
        (date(2025, 2, 5), "05 février 2025"),
        (date(2024, 8, 15), "15 août 2024"),
        (date(2024, 12, 31), "31 décembre 2024"),
    ],
)
def test_format_departure_date(departure_date: date, expected: str) -> None:
    """Given a date, when formatting, then it reads 'dd MMMM yyyy' with French month names."""
    formatter = DepartureFormatter()

    assert formatter.format_departure_date(departure_date) == expected


def test_format_departure_time_keeps_integer_precision_near_minute_boundary() -> None:
    """Given one millisecond before a minute boundary, when formatting, then the earlier minute is shown."""
    formatter = DepartureFormatter()

    assert formatter.format_departure_time(_ms(9, 6) - 1) == "9:05"
