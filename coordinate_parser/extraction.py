"""Numeric token extraction and latitude/longitude grouping."""

from __future__ import annotations

import re
from typing import Sequence


_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)


def extract_numbers(coordinates: str) -> list[str]:
    """Return every number in ``coordinates``, in order of appearance.

    Anything that is not part of a number (letters, spaces, commas, degree
    symbols, quotes) is skipped. An empty list is a valid result.
    """
    return _NUMBER_RE.findall(coordinates)


def normalize_numbers(numbers: Sequence[str]) -> list[float]:
    normalized = []
    for number in numbers:
        try:
            normalized.append(float(number))
        except (TypeError, ValueError):
            normalized.append(0.0)
    return normalized


def group_numbers(numbers: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split the numbers into a latitude half and a longitude half.

    Args:
        numbers: Numbers extracted from a coordinate string

    Returns:
        Tuple of (latitude numbers, longitude numbers)
    """
    count = len(numbers) // 2
    latitude = list(numbers[:count])
    longitude = list(numbers[len(numbers) - count:])
    return latitude, longitude
