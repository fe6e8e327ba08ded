"""Departures state dataclass."""

from dataclasses import dataclass, field
from datetime import datetime

from sncf_departures.domain.models.departures_model import DeparturesModel


@dataclass
class DeparturesState:
    """State for the departures LiveView."""

    model: DeparturesModel = field(default_factory=DeparturesModel)
    loaded_at: datetime | None = None  # Set when the single fetch result arrives
