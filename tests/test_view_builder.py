"""Tests for the departures view builder."""

from datetime import date

from sncf_departures.adapters.web.builders import DepartureViewBuilder
from sncf_departures.adapters.web.formatters import DepartureFormatter
from sncf_departures.domain.models import DeparturesModel
from tests.sample_data import make_departure


def _builder() -> DepartureViewBuilder:
    return DepartureViewBuilder(DepartureFormatter(), "Départs SNCF")


def test_error_branch() -> None:
    """Given a model with an error, when building, then only the error message is populated."""
    view = _builder().build(DeparturesModel(error="Erreur du serveur : 500"))

    assert view["branch"] == "error"
    assert view["has_error"] is True
    assert view["error_message"] == "Erreur: Erreur du serveur : 500"
    assert view["is_empty"] is False
    assert view["has_departures"] is False
    assert view["rows"] == []
    assert view["date_line"] == ""


def test_error_takes_precedence_over_departures() -> None:
    """Given both departures and an error, when building, then only the error branch is rendered."""
    model = DeparturesModel(departures=(make_departure(),), error="Erreur réseau")

    view = _builder().build(model)

    assert view["branch"] == "error"
    assert view["error_message"] == "Erreur: Erreur réseau"
    assert view["headers"] == []
    assert view["rows"] == []
    assert view["date_line"] == ""


def test_empty_branch() -> None:
    """Given no departures and no error, when building, then the empty message is shown and no table."""
    view = _builder().build(DeparturesModel())

    assert view["branch"] == "empty"
    assert view["is_empty"] is True
    assert view["empty_message"] == "Aucun départ disponible."
    assert view["headers"] == []
    assert view["rows"] == []
    assert view["error_message"] == ""


def test_table_branch_headers_and_rows() -> None:
    """Given departures, when building, then headers and one row per departure are produced in order."""
    model = DeparturesModel(
        departures=(
            make_departure(trip_short_name="6611", departure_time=(9 * 3600 + 5 * 60) * 1000),
            make_departure(
                trip_short_name="17203",
                direction="Dijon Ville (Dijon)",
                departure_time=23 * 3600 * 1000,
                physical_mode="Train régional / TER",
                commercial_mode="TER",
            ),
        )
    )

    view = _builder().build(model)

    assert view["branch"] == "table"
    assert view["has_departures"] is True
    assert view["headers"] == [
        "Train",
        "Direction",
        "Heure de Départ",
        "Mode Physique",
        "Mode Commercial",
    ]
    assert view["rows"] == [
        {
            "train": "6611",
            "direction": "Marseille Saint-Charles (Marseille)",
            "departure_time": "9:05",
            "physical_mode": "Train grande vitesse",
            "commercial_mode": "TGV INOUI",
        },
        {
            "train": "17203",
            "direction": "Dijon Ville (Dijon)",
            "departure_time": "23:00",
            "physical_mode": "Train régional / TER",
            "commercial_mode": "TER",
        },
    ]


def test_trailing_date_line_uses_first_departure() -> None:
    """Given departures on different dates, when building, then the date line uses the first one."""
    model = DeparturesModel(
        departures=(
            make_departure(departure_date=date(2025, 1, 19)),
            make_departure(departure_date=date(2025, 1, 20)),
        )
    )

    view = _builder().build(model)

    assert view["date_line"] == "Date: 19 janvier 2025"


def test_title_is_always_present() -> None:
    """Given any model, when building, then the configured title is included."""
    builder = DepartureViewBuilder(DepartureFormatter(), "Gare de Lyon")

    assert builder.build(DeparturesModel())["title"] == "Gare de Lyon"
    assert builder.build(DeparturesModel(error="x"))["title"] == "Gare de Lyon"
