"""Display adapter port."""

from abc import ABC, abstractmethod

from sncf_departures.domain.models.departures_model import DeparturesModel


class DisplayAdapter(ABC):
    """Port for presenting the departures model to users."""

    @abstractmethod
    async def display_model(self, model: DeparturesModel) -> None:
        """Show the given model."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
