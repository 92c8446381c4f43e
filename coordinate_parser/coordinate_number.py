"""Conversion of one axis' numbers into decimal degrees.

A single number on an axis is ambiguous: ``40.5`` is decimal degrees, but
``4030.5`` can only be 40 degrees 30.5 minutes and ``403015`` can only be
40 degrees 30 minutes 15 seconds. The magnitude tiers below decide which
packed format a lone number is written in. Each tier's legitimate values lie
below the next tier's threshold, so the tiers never overlap.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from coordinate_parser.extraction import normalize_numbers


DEGREES_MAX = 360
DEGREES_MINUTES_MAX = 9090
DEGREES_MINUTES_SECONDS_MAX = 909090


class CoordinateFormat(Enum):
    SEPARATED = "separated"
    DECIMAL = "decimal"
    DEGREES_MINUTES = "degrees_minutes"
    DEGREES_MINUTES_SECONDS = "degrees_minutes_seconds"
    MILLISECONDS = "milliseconds"


def classify_degrees(degrees: float) -> CoordinateFormat:
    """Return the packed format a lone (absolute) degrees value is written in."""
    if degrees > DEGREES_MINUTES_SECONDS_MAX:
        return CoordinateFormat.MILLISECONDS
    if degrees > DEGREES_MINUTES_MAX:
        return CoordinateFormat.DEGREES_MINUTES_SECONDS
    if degrees > DEGREES_MAX:
        return CoordinateFormat.DEGREES_MINUTES
    return CoordinateFormat.DECIMAL


@dataclass(frozen=True)
class CoordinateNumber:
    """Resolved degrees, minutes, seconds and milliseconds of one axis."""

    sign: int = 1
    degrees: float = 0.0
    minutes: float = 0.0
    seconds: float = 0.0
    milliseconds: float = 0.0
    format: CoordinateFormat = CoordinateFormat.DECIMAL

    @classmethod
    def from_numbers(cls, numbers: Sequence[str]) -> "CoordinateNumber":
        """
        Build the resolved value of an axis from its raw numbers.

        Args:
            numbers: Up to four numbers in the order degrees, minutes,
                seconds, milliseconds

        Returns:
            CoordinateNumber with the sign taken from the degrees and
            packed single numbers expanded
        """
        values = normalize_numbers(numbers)
        degrees = values[0] if len(values) >= 1 else 0.0
        minutes = values[1] if len(values) >= 2 else 0.0
        seconds = values[2] if len(values) >= 3 else 0.0
        milliseconds = values[3] if len(values) >= 4 else 0.0
        sign = 1 if degrees >= 0 else -1
        degrees = abs(degrees)

        if len(values) >= 2:
            return cls(sign, degrees, minutes, seconds, milliseconds, CoordinateFormat.SEPARATED)
        return detect_special_format(cls(sign, degrees, minutes, seconds, milliseconds))

    def to_decimal(self) -> float:
        return self.sign * (
            self.degrees
            + self.minutes / 60
            + self.seconds / 3600
            + self.milliseconds / 3600000
        )


def detect_special_format(number: CoordinateNumber) -> CoordinateNumber:
    """Expand a lone degrees value written as a packed number."""
    d = number.degrees
    fmt = classify_degrees(d)

    if fmt is CoordinateFormat.MILLISECONDS:
        return CoordinateNumber(number.sign, 0.0, number.minutes, number.seconds, d, fmt)

    if fmt is CoordinateFormat.DEGREES_MINUTES_SECONDS:
        degrees = float(math.floor(d / 10000))
        minutes = float(math.floor((d - degrees * 10000) / 100))
        seconds = float(math.floor(d - degrees * 10000 - minutes * 100))
        return CoordinateNumber(number.sign, degrees, minutes, seconds, number.milliseconds, fmt)

    if fmt is CoordinateFormat.DEGREES_MINUTES:
        degrees = float(math.floor(d / 100))
        minutes = d - degrees * 100
        return CoordinateNumber(number.sign, degrees, minutes, number.seconds, number.milliseconds, fmt)

    return number
