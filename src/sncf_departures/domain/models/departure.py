"""Departure domain model."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Departure:
    """Represents a single scheduled train leaving the monitored station."""

    direction: str
    departure_date: date
    departure_time: int  # Milliseconds since local midnight, not an instant
    trip_short_name: str
    physical_mode: str
    commercial_mode: str
