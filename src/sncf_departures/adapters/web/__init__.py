"""Web adapters for displaying departures."""

from sncf_departures.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
