"""Single-station SNCF departures board."""
