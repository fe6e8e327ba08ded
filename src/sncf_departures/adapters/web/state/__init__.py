"""State management for the departures LiveView."""

from sncf_departures.adapters.web.state.departures_state import DeparturesState
from sncf_departures.adapters.web.state.state import State

__all__ = ["DeparturesState", "State"]
