"""Errors raised while validating and parsing coordinate strings."""


class CoordinateError(ValueError):
    """Raised when no coordinate can be derived from an input string."""

    kind = "invalid_coordinate"
    message = "Invalid coordinate"

    def __init__(self, coordinates: str, message: str | None = None):
        self.coordinates = coordinates
        super().__init__(message or self.message)


class InvalidCharacterError(CoordinateError):
    """Raised when the input contains a letter other than N, E, S, W or D."""

    kind = "invalid_character"
    message = "Coordinate contains invalid alphanumeric characters"


class InvalidOrientationError(CoordinateError):
    """Raised when cardinal directions repeat or appear out of order."""

    kind = "invalid_orientation"
    message = "Invalid cardinal direction"


class NoNumbersFoundError(CoordinateError):
    """Raised when the input contains no coordinate number at all."""

    kind = "no_numbers"
    message = "Could not find any coordinate number"


class UnevenNumberCountError(CoordinateError):
    """Raised when the numbers cannot be split evenly into latitude and longitude."""

    kind = "uneven_numbers"
    message = "Uneven count of latitude/longitude numbers"


class TooManyNumbersError(CoordinateError):
    """Raised when an axis would have more than degrees, minutes and seconds."""

    kind = "too_many_numbers"
    message = "Too many coordinate numbers"
