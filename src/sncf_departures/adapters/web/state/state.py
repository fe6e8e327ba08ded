"""State management class."""

import logging
from datetime import UTC, datetime

from sncf_departures.domain.models.departures_model import DeparturesModel

from .departures_state import DeparturesState

logger = logging.getLogger(__name__)


class State:
    """Holds the departures model shared by every LiveView connection.

    The model starts empty and is replaced exactly once, by the result of the
    single departures fetch.
    """

    def __init__(self) -> None:
        """Initialize the state with an empty model."""
        self.departures_state = DeparturesState()

    @property
    def model(self) -> DeparturesModel:
        """Current departures model."""
        return self.departures_state.model

    @property
    def is_loaded(self) -> bool:
        """Whether the fetch result has been applied."""
        return self.departures_state.loaded_at is not None

    def set_model(self, model: DeparturesModel) -> None:
        """Store the model produced by the departures fetch.

        Raises:
            RuntimeError: If a model was already stored.
        """
        if self.is_loaded:
            raise RuntimeError("Departures model has already been loaded")

        self.departures_state.model = model
        self.departures_state.loaded_at = datetime.now(UTC)
        logger.info(
            f"Departures model loaded: status={model.status.value}, "
            f"departures={len(model.departures)}"
        )
