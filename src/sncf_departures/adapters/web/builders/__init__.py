"""Builders for web display data."""

from sncf_departures.adapters.web.builders.view_builder import DepartureViewBuilder

__all__ = ["DepartureViewBuilder"]
