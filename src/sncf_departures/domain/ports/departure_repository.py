"""Departure repository port."""

from typing import Protocol

from sncf_departures.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving the departures of the monitored station."""

    async def get_departures(self) -> list[Departure]:
        """Get departures in API response order.

        Raises:
            FetchError: If the request or the decoding of its body fails.
        """
        ...
