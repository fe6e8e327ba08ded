"""SNCF API adapters (Navitia departures endpoint)."""

from sncf_departures.adapters.sncf_api.sncf_departure_repository import SncfDepartureRepository

__all__ = ["SncfDepartureRepository"]
