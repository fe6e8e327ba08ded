"""Formatters for web display."""

from sncf_departures.adapters.web.formatters.departure_formatter import DepartureFormatter

__all__ = ["DepartureFormatter"]
