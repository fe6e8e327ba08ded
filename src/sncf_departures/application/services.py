"""Application services (use cases) for the departures display."""

import logging
from typing import TYPE_CHECKING

from sncf_departures.domain.models import (
    Departure,
    DeparturesModel,
    FetchError,
    apply_fetch_result,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sncf_departures.domain.ports import DepartureRepository


class DepartureLoadingService:
    """Service that performs the single departures fetch and updates the model."""

    def __init__(self, departure_repository: "DepartureRepository") -> None:
        """Initialize with a departure repository."""
        self._departure_repository = departure_repository

    async def load(self, model: DeparturesModel | None = None) -> DeparturesModel:
        """Fetch departures once and return the resulting model.

        Failures never propagate: they end up in the model's error field so
        the display can show them.

        Args:
            model: Model to update. Defaults to a fresh, empty model.

        Returns:
            The model after the one and only transition.
        """
        current = model if model is not None else DeparturesModel()
        result: list[Departure] | FetchError
        try:
            result = await self._departure_repository.get_departures()
        except FetchError as e:
            logger.warning(f"Failed to fetch departures: {e}")
            result = e
        else:
            logger.info(f"Fetched {len(result)} departure(s)")

        return apply_fetch_result(current, result)
