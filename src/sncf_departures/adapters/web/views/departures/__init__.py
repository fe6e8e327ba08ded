"""Departures LiveView."""

from sncf_departures.adapters.web.views.departures.departures import (
    DeparturesLiveView,
    create_departures_live_view,
)

__all__ = ["DeparturesLiveView", "create_departures_live_view"]
