"""Tests for application services."""

from unittest.mock import AsyncMock

import pytest

from sncf_departures.application.services import DepartureLoadingService
from sncf_departures.domain.models import (
    BadBody,
    Departure,
    DeparturesModel,
    DisplayStatus,
    FetchError,
    FetchTimeout,
)
from tests.sample_data import make_departure


class MockDepartureRepository:
    """Mock departure repository for testing."""

    def __init__(
        self, departures: list[Departure] | None = None, error: FetchError | None = None
    ) -> None:
        """Initialize with departures to return or an error to raise."""
        self._departures = departures or []
        self._error = error
        self.calls = 0

    async def get_departures(self) -> list[Departure]:
        """Return the configured departures or raise the configured error."""
        self.calls += 1
        if self._error is not None:
            raise self._error
        return self._departures


@pytest.mark.asyncio
async def test_load_success_returns_departures_in_order() -> None:
    """Given a repository with departures, when loading, then the model holds them in order."""
    departures = [make_departure(trip_short_name="1"), make_departure(trip_short_name="2")]
    repo = MockDepartureRepository(departures)

    model = await DepartureLoadingService(repo).load()

    assert [d.trip_short_name for d in model.departures] == ["1", "2"]
    assert model.error is None
    assert model.status is DisplayStatus.SUCCESS
    assert repo.calls == 1


@pytest.mark.asyncio
async def test_load_failure_sets_error_message() -> None:
    """Given a failing repository, when loading, then the model carries the error message."""
    repo = MockDepartureRepository(error=FetchTimeout())

    model = await DepartureLoadingService(repo).load()

    assert model.departures == ()
    assert model.error == "La requête a expiré, veuillez réessayer."
    assert model.status is DisplayStatus.FAILURE


@pytest.mark.asyncio
async def test_load_failure_replaces_existing_departures() -> None:
    """Given a model with stale departures, when loading fails, then the departures are dropped."""
    repo = MockDepartureRepository(error=BadBody("expected a separator"))
    stale = DeparturesModel(departures=(make_departure(),))

    model = await DepartureLoadingService(repo).load(stale)

    assert model.departures == ()
    assert model.error == "Erreur de décodage de la réponse : expected a separator"


@pytest.mark.asyncio
async def test_load_empty_result_stays_initial() -> None:
    """Given a repository without departures, when loading, then the model is empty without error."""
    model = await DepartureLoadingService(MockDepartureRepository([])).load()

    assert model == DeparturesModel()


@pytest.mark.asyncio
async def test_load_does_not_swallow_unexpected_errors() -> None:
    """Given a repository raising a non-fetch error, when loading, then the error propagates."""
    repo = AsyncMock()
    repo.get_departures.side_effect = RuntimeError("bug")

    with pytest.raises(RuntimeError, match="bug"):
        await DepartureLoadingService(repo).load()


@pytest.mark.asyncio
async def test_load_base_fetch_error_uses_generic_message() -> None:
    """Given a repository raising the base FetchError, when loading, then a generic message is stored."""
    repo = MockDepartureRepository(error=FetchError("boom"))

    model = await DepartureLoadingService(repo).load()

    assert model.error == "Erreur lors de la récupération des départs."
    assert model.status is DisplayStatus.FAILURE
