"""Application layer - use cases and services."""

from sncf_departures.application.services import DepartureLoadingService

__all__ = ["DepartureLoadingService"]
