"""Domain models for SNCF departures."""

from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.departures_model import (
    DeparturesModel,
    DisplayStatus,
    apply_fetch_result,
)
from sncf_departures.domain.models.fetch_error import (
    BadBody,
    BadStatus,
    BadUrl,
    FetchError,
    FetchTimeout,
    NetworkError,
)

__all__ = [
    "BadBody",
    "BadStatus",
    "BadUrl",
    "Departure",
    "DeparturesModel",
    "DisplayStatus",
    "FetchError",
    "FetchTimeout",
    "NetworkError",
    "apply_fetch_result",
]
