"""Parser for SNCF (Navitia) departure responses."""

import logging
import re
from datetime import date

from pydantic import BaseModel, ValidationError

from sncf_departures.adapters.sncf_api.constants import DATE_TIME_SEPARATOR
from sncf_departures.domain.models.departure import Departure

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


class DecodeError(ValueError):
    """Raised when a departures response body cannot be decoded."""


class DisplayInformationsDto(BaseModel):
    """The `display_informations` object of a departure."""

    direction: str
    trip_short_name: str
    physical_mode: str
    commercial_mode: str


class StopDateTimeDto(BaseModel):
    """The `stop_date_time` object of a departure."""

    departure_date_time: str


class DepartureDto(BaseModel):
    """A single element of the `departures` list."""

    display_informations: DisplayInformationsDto
    stop_date_time: StopDateTimeDto


class DeparturesResponse(BaseModel):
    """Top-level departures response; fields other than `departures` are ignored."""

    departures: list[DepartureDto]


def _split_compound(value: str) -> tuple[str, str]:
    """Split a compound timestamp into its date and time parts."""
    parts = value.split(DATE_TIME_SEPARATOR)
    if len(parts) != 2:
        raise DecodeError(
            f"expected a separator '{DATE_TIME_SEPARATOR}' between date and time in {value!r}"
        )
    return parts[0], parts[1]


def _to_int_or_zero(value: str) -> int:
    """Parse an integer slice, defaulting to 0 when it is not numeric."""
    if _INTEGER_PATTERN.fullmatch(value):
        return int(value)
    return 0


def parse_compound_date(value: str) -> date:
    """Parse the date part of a compound timestamp like '20250119T143000'.

    Raises:
        DecodeError: If the value has no single separator or the date is invalid.
    """
    date_part, _ = _split_compound(value)
    try:
        return date.fromisoformat(date_part)
    except ValueError as e:
        raise DecodeError(f"invalid date {date_part!r} in {value!r}: {e}") from e


def parse_compound_time(value: str) -> int:
    """Parse the time part of a compound timestamp into milliseconds since midnight.

    Hour is read from characters [0:2], minute from [2:4] and second from the
    last two characters. A slice that is not numeric counts as 0.

    Raises:
        DecodeError: If the value has no single separator.
    """
    _, time_part = _split_compound(value)
    hour = _to_int_or_zero(time_part[0:2])
    minute = _to_int_or_zero(time_part[2:4])
    second = _to_int_or_zero(time_part[-2:])
    return ((hour * 3600) + (minute * 60) + second) * 1000


class DepartureParser:
    """Parses Navitia departure responses into Departure objects."""

    @staticmethod
    def parse_body(body: str | bytes) -> list[Departure]:
        """Decode a departures response body.

        Args:
            body: Raw JSON body of the departures response.

        Returns:
            Departures in response order.

        Raises:
            DecodeError: If any part of the body cannot be decoded. There is
                no partial result.
        """
        try:
            response = DeparturesResponse.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(str(e)) from e

        departures = [DepartureParser._parse_departure(dep) for dep in response.departures]
        logger.debug(f"Decoded {len(departures)} departure(s)")
        return departures

    @staticmethod
    def _parse_departure(dep: DepartureDto) -> Departure:
        """Map a validated departure object to a Departure."""
        info = dep.display_informations
        compound = dep.stop_date_time.departure_date_time
        return Departure(
            direction=info.direction,
            departure_date=parse_compound_date(compound),
            departure_time=parse_compound_time(compound),
            trip_short_name=info.trip_short_name,
            physical_mode=info.physical_mode,
            commercial_mode=info.commercial_mode,
        )
