"""Domain layer - core business logic and models."""

from sncf_departures.domain.models import (
    Departure,
    DeparturesModel,
    FetchError,
)
from sncf_departures.domain.ports import (
    DepartureRepository,
    DisplayAdapter,
)

__all__ = [
    "Departure",
    "DepartureRepository",
    "DeparturesModel",
    "DisplayAdapter",
    "FetchError",
]
