"""Coordinate parsing.

Turns a free-form coordinate string such as ``"40.7484, -73.9857"``,
``"40 26.767 N 79 58.933 W"`` or ``"4026.767 N 7958.933 W"`` into signed
decimal degrees. Values are not range checked.
"""

from __future__ import annotations

import re

from coordinate_parser.coordinate_number import CoordinateFormat, CoordinateNumber
from coordinate_parser.extraction import extract_numbers, group_numbers
from coordinate_parser.validation import validate


_SOUTH_RE = re.compile(r"s", re.IGNORECASE | re.ASCII)
_WEST_RE = re.compile(r"w", re.IGNORECASE | re.ASCII)


class Coordinates:
    """A latitude/longitude pair parsed from text.

    Construction validates and parses ``coordinates`` and raises a
    ``CoordinateError`` subclass if no coordinate can be derived from it.
    """

    __slots__ = ("_coordinates", "_latitude", "_longitude", "_formats")

    def __init__(self, coordinates: str):
        validate(coordinates)
        latitude_numbers, longitude_numbers = group_numbers(extract_numbers(coordinates))
        latitude = CoordinateNumber.from_numbers(latitude_numbers)
        longitude = CoordinateNumber.from_numbers(longitude_numbers)

        self._coordinates = coordinates
        self._formats = (latitude.format, longitude.format)
        # The letter sign multiplies the numeric one: "-45 S" is +45.
        self._latitude = latitude.to_decimal() * (-1 if latitude_is_negative(coordinates) else 1)
        self._longitude = longitude.to_decimal() * (-1 if longitude_is_negative(coordinates) else 1)

    @property
    def coordinates(self) -> str:
        return self._coordinates

    @property
    def latitude(self) -> float:
        return self._latitude

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def formats(self) -> tuple[CoordinateFormat, CoordinateFormat]:
        """Format detected for the latitude and longitude numbers."""
        return self._formats

    def get_latitude(self) -> float:
        return self._latitude

    def get_longitude(self) -> float:
        return self._longitude

    def as_tuple(self) -> tuple[float, float]:
        return (self._latitude, self._longitude)

    def __eq__(self, other):
        if not isinstance(other, Coordinates):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        return f"Coordinates(latitude={self._latitude!r}, longitude={self._longitude!r})"


def latitude_is_negative(coordinates: str) -> bool:
    return _SOUTH_RE.search(coordinates) is not None


def longitude_is_negative(coordinates: str) -> bool:
    return _WEST_RE.search(coordinates) is not None


def parse_coordinates(coordinates: str) -> tuple[float, float]:
    """Parse a coordinate string into a ``(latitude, longitude)`` tuple."""
    return Coordinates(coordinates).as_tuple()
