"""Constants for the SNCF API adapter.

Uses the Navitia API exposed by SNCF open data.
API Documentation: https://doc.navitia.io/

Authentication: the API key is sent as the raw value of the Authorization header.
"""

# API endpoints
SNCF_BASE_URL = "https://api.sncf.com/v1/coverage/sncf"
STOP_AREA_PREFIX = "stop_area:"

# Paris Gare de Lyon
DEFAULT_STOP_AREA_ID = "SNCF:87686006"
DEFAULT_QUERY_DATETIME = "20250119T140000"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Compound timestamp separator in departure_date_time (e.g., "20250119T143000")
DATE_TIME_SEPARATOR = "T"


def departures_url(base_url: str, stop_area_id: str, query_datetime: str) -> str:
    """Build the departures URL for a stop area (GET /stop_areas/:id/departures)."""
    return (
        f"{base_url}/stop_areas/{STOP_AREA_PREFIX}{stop_area_id}/departures"
        f"?datetime={query_datetime}"
    )
