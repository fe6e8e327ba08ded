"""Formatter for departure times and dates."""

from datetime import UTC, date, datetime, timedelta

UTC_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

FRENCH_MONTH_NAMES = (
    "janvier",
    "février",
    "mars",
    "avril",
    "mai",
    "juin",
    "juillet",
    "août",
    "septembre",
    "octobre",
    "novembre",
    "décembre",
)


class DepartureFormatter:
    """Formats departure fields for display in French."""

    def format_departure_time(self, departure_time_ms: int) -> str:
        """Format milliseconds since midnight as 'H:MM' (e.g., '9:05', '23:00').

        The value is read as an offset from the UTC epoch, so the hour wraps
        at 24 and is never zero-padded.
        """
        moment = UTC_EPOCH + timedelta(milliseconds=departure_time_ms)
        return f"{moment.hour}:{moment.minute:02d}"

    def format_departure_date(self, departure_date: date) -> str:
        """Format a date as 'dd MMMM yyyy' with French month names (e.g., '19 janvier 2025')."""
        month_name = FRENCH_MONTH_NAMES[departure_date.month - 1]
        return f"{departure_date.day:02d} {month_name} {departure_date.year:04d}"
