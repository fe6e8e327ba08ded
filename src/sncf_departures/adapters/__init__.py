"""Adapters layer - external system integrations."""

from sncf_departures.adapters.config import AppConfig
from sncf_departures.adapters.sncf_api import SncfDepartureRepository

__all__ = [
    "AppConfig",
    "SncfDepartureRepository",
]
