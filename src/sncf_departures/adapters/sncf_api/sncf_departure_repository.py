"""SNCF departure repository adapter using the Navitia departures endpoint."""

import logging
from typing import TYPE_CHECKING

from sncf_departures.adapters.sncf_api.departure_parser import DecodeError, DepartureParser
from sncf_departures.adapters.sncf_api.http_client import SncfHttpClient
from sncf_departures.domain.models import BadBody, Departure
from sncf_departures.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from sncf_departures.adapters.config.app_config import AppConfig


class SncfDepartureRepository(DepartureRepository):
    """Adapter fetching and decoding the departures of the configured stop area."""

    def __init__(self, session: "ClientSession", config: "AppConfig") -> None:
        """Initialize with an aiohttp session and the application configuration.

        Args:
            session: aiohttp ClientSession used for the request.
            config: Application configuration with the URL parts and API key.
        """
        self._http_client = SncfHttpClient(session=session, config=config)

    @property
    def departures_url(self) -> str:
        """URL queried by get_departures."""
        return self._http_client.departures_url

    async def get_departures(self) -> list[Departure]:
        """Get departures of the configured stop area in API response order.

        Raises:
            FetchError: If the request fails; decoding failures are raised as BadBody.
        """
        body = await self._http_client.fetch_departures_body()

        try:
            return DepartureParser.parse_body(body)
        except DecodeError as e:
            logger.warning(f"Could not decode SNCF departures: {e}")
            raise BadBody(str(e)) from e
