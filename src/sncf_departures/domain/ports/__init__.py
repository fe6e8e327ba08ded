"""Ports (interfaces) for the ports-and-adapters architecture."""

from sncf_departures.domain.ports.departure_repository import DepartureRepository
from sncf_departures.domain.ports.display_adapter import DisplayAdapter

__all__ = [
    "DepartureRepository",
    "DisplayAdapter",
]
