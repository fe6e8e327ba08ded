"""Application state for the departures display."""

from dataclasses import dataclass, replace
from enum import Enum

from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.fetch_error import FetchError


class DisplayStatus(Enum):
    """States of the display: initial, then success or failure (both terminal)."""

    INITIAL = "initial"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class DeparturesModel:
    """Departures in API response order, or the error that replaced them."""

    departures: tuple[Departure, ...] = ()
    error: str | None = None

    @property
    def status(self) -> DisplayStatus:
        """Current state, with the error taking precedence over departures."""
        if self.error is not None:
            return DisplayStatus.FAILURE
        if self.departures:
            return DisplayStatus.SUCCESS
        return DisplayStatus.INITIAL

    @property
    def first_departure(self) -> Departure | None:
        """First departure in response order, if any."""
        return self.departures[0] if self.departures else None


def apply_fetch_result(
    model: DeparturesModel, result: list[Departure] | FetchError
) -> DeparturesModel:
    """Apply the single fetch result to the model.

    A failure fully replaces any departures held by the model.
    """
    if isinstance(result, FetchError):
        return replace(model, departures=(), error=result.user_message)
    return replace(model, departures=tuple(result), error=None)
