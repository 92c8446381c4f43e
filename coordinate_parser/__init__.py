from coordinate_parser.coordinate_number import CoordinateFormat, CoordinateNumber
from coordinate_parser.coordinates import Coordinates, parse_coordinates
from coordinate_parser.errors import (
    CoordinateError,
    InvalidCharacterError,
    InvalidOrientationError,
    NoNumbersFoundError,
    TooManyNumbersError,
    UnevenNumberCountError,
)
from coordinate_parser.validation import is_valid, validate

__all__ = [
    "Coordinates",
    "CoordinateError",
    "CoordinateFormat",
    "CoordinateNumber",
    "InvalidCharacterError",
    "InvalidOrientationError",
    "NoNumbersFoundError",
    "TooManyNumbersError",
    "UnevenNumberCountError",
    "is_valid",
    "parse_coordinates",
    "validate",
]
