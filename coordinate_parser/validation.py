"""Input checks run before a coordinate string is parsed.

The checks only make sure the input looks like a coordinate pair. They run
in a fixed order (letters, orientation, numbers) and the first one that fails
raises; nothing is parsed from an input that fails validation.
"""

from __future__ import annotations

import re
from typing import Sequence

from coordinate_parser.errors import (
    CoordinateError,
    InvalidCharacterError,
    InvalidOrientationError,
    NoNumbersFoundError,
    TooManyNumbersError,
    UnevenNumberCountError,
)
from coordinate_parser.extraction import extract_numbers


# D is tolerated as a degree marker but carries no meaning when parsing.
_INVALID_LETTER_RE = re.compile(r"(?![neswd])[a-z]", re.IGNORECASE | re.ASCII)
_ORIENTATION_RE = re.compile(r"^[^nsew]*[ns]?[^nsew]*[ew]?[^nsew]*$", re.IGNORECASE | re.ASCII)

MAX_NUMBERS = 6


def validate(coordinates: str) -> None:
    """
    Validate a coordinate string.

    Args:
        coordinates: Raw coordinate text

    Raises:
        InvalidCharacterError: If a letter other than N, E, S, W or D is present
        InvalidOrientationError: If the cardinal directions are repeated or reversed
        NoNumbersFoundError: If no number is present
        UnevenNumberCountError: If the numbers cannot be split into two axes
        TooManyNumbersError: If there are more than six numbers
    """
    check_contains_no_letters(coordinates)
    check_valid_orientation(coordinates)
    check_numbers(coordinates)


def is_valid(coordinates: str) -> bool:
    """Return True if ``coordinates`` passes every check."""
    try:
        validate(coordinates)
    except CoordinateError:
        return False
    return True


def check_contains_no_letters(coordinates: str) -> None:
    if _INVALID_LETTER_RE.search(coordinates):
        raise InvalidCharacterError(coordinates)


def check_valid_orientation(coordinates: str) -> None:
    # $ would also accept a trailing newline, fullmatch does not.
    if not _ORIENTATION_RE.fullmatch(coordinates):
        raise InvalidOrientationError(coordinates)


def check_numbers(coordinates: str) -> None:
    numbers = extract_numbers(coordinates)
    check_any_numbers(coordinates, numbers)
    check_even_numbers(coordinates, numbers)
    check_maximum_numbers(coordinates, numbers)


def check_any_numbers(coordinates: str, numbers: Sequence[str]) -> None:
    if not numbers:
        raise NoNumbersFoundError(coordinates)


def check_even_numbers(coordinates: str, numbers: Sequence[str]) -> None:
    if len(numbers) % 2:
        raise UnevenNumberCountError(coordinates)


def check_maximum_numbers(coordinates: str, numbers: Sequence[str]) -> None:
    if len(numbers) > MAX_NUMBERS:
        raise TooManyNumbersError(
            coordinates,
            f"Too many coordinate numbers ({len(numbers)} found, at most {MAX_NUMBERS} allowed)",
        )
