"""Builder for the departures view tree."""

from typing import Any

from sncf_departures.adapters.web.formatters.departure_formatter import DepartureFormatter
from sncf_departures.domain.models.departure import Departure
from sncf_departures.domain.models.departures_model import DeparturesModel

TABLE_HEADERS = ("Train", "Direction", "Heure de Départ", "Mode Physique", "Mode Commercial")
ERROR_PREFIX = "Erreur: "
EMPTY_MESSAGE = "Aucun départ disponible."
DATE_PREFIX = "Date: "

BRANCH_ERROR = "error"
BRANCH_EMPTY = "empty"
BRANCH_TABLE = "table"


class DepartureViewBuilder:
    """Builds the view tree for a departures model.

    The tree is a plain dict consumed by the HTML template and by the CLI
    printer. Exactly one branch is populated: error, empty or table, checked
    in that order.
    """

    def __init__(self, formatter: DepartureFormatter, title: str) -> None:
        """Initialize the view builder.

        Args:
            formatter: Formatter for departure times and dates.
            title: Title shown above the branch.
        """
        self.formatter = formatter
        self.title = title

    def build(self, model: DeparturesModel) -> dict[str, Any]:
        """Build the view tree for the given model."""
        view: dict[str, Any] = {
            "title": self.title,
            "branch": BRANCH_TABLE,
            "has_error": False,
            "is_empty": False,
            "has_departures": False,
            "error_message": "",
            "empty_message": "",
            "headers": [],
            "rows": [],
            "date_line": "",
        }

        if model.error is not None:
            view["branch"] = BRANCH_ERROR
            view["has_error"] = True
            view["error_message"] = ERROR_PREFIX + model.error
            return view

        if not model.departures:
            view["branch"] = BRANCH_EMPTY
            view["is_empty"] = True
            view["empty_message"] = EMPTY_MESSAGE
            return view

        view["has_departures"] = True
        view["headers"] = list(TABLE_HEADERS)
        view["rows"] = [self._build_row(departure) for departure in model.departures]
        view["date_line"] = self._build_date_line(model)
        return view

    def _build_row(self, departure: Departure) -> dict[str, str]:
        """Build one table row, in header order."""
        return {
            "train": departure.trip_short_name,
            "direction": departure.direction,
            "departure_time": self.formatter.format_departure_time(departure.departure_time),
            "physical_mode": departure.physical_mode,
            "commercial_mode": departure.commercial_mode,
        }

    def _build_date_line(self, model: DeparturesModel) -> str:
        """Build the trailing date line from the first departure, if there is one."""
        first = model.first_departure
        if first is None:
            return ""
        return DATE_PREFIX + self.formatter.format_departure_date(first.departure_date)
