import pytest

from coordinate_parser.coordinate_number import (
    CoordinateFormat,
    CoordinateNumber,
    classify_degrees,
)


@pytest.mark.parametrize("degrees, expected", [
    (0, CoordinateFormat.DECIMAL),
    (45.5, CoordinateFormat.DECIMAL),
    (360, CoordinateFormat.DECIMAL),
    (360.5, CoordinateFormat.DEGREES_MINUTES),
    (9090, CoordinateFormat.DEGREES_MINUTES),
    (9090.1, CoordinateFormat.DEGREES_MINUTES_SECONDS),
    (909090, CoordinateFormat.DEGREES_MINUTES_SECONDS),
    (909091, CoordinateFormat.MILLISECONDS),
])
def test_classify_degrees_tiers(degrees, expected):
    assert classify_degrees(degrees) is expected


def test_plain_decimal_degrees():
    number = CoordinateNumber.from_numbers(["40.7484"])
    assert number.format is CoordinateFormat.DECIMAL
    assert number.to_decimal() == pytest.approx(40.7484)


def test_negative_degrees_sign():
    number = CoordinateNumber.from_numbers(["-73.9857"])
    assert number.sign == -1
    assert number.degrees == pytest.approx(73.9857)
    assert number.to_decimal() == pytest.approx(-73.9857)


def test_packed_degrees_minutes():
    number = CoordinateNumber.from_numbers(["4026.767"])
    assert number.format is CoordinateFormat.DEGREES_MINUTES
    assert number.degrees == 40
    assert number.minutes == pytest.approx(26.767)
    assert number.to_decimal() == pytest.approx(40 + 26.767 / 60)


def test_packed_degrees_minutes_seconds():
    number = CoordinateNumber.from_numbers(["-123453"])
    assert number.format is CoordinateFormat.DEGREES_MINUTES_SECONDS
    assert (number.degrees, number.minutes, number.seconds) == (12, 34, 53)
    assert number.to_decimal() == pytest.approx(-(12 + 34 / 60 + 53 / 3600))


def test_packed_seconds_are_floored():
    number = CoordinateNumber.from_numbers(["404454.84"])
    assert (number.degrees, number.minutes, number.seconds) == (40, 44, 54)


def test_milliseconds():
    number = CoordinateNumber.from_numbers(["146700000"])
    assert number.format is CoordinateFormat.MILLISECONDS
    assert number.degrees == 0
    assert number.milliseconds == 146700000
    assert number.to_decimal() == pytest.approx(146700000 / 3600000)


def test_separated_numbers_are_not_reinterpreted():
    number = CoordinateNumber.from_numbers(["4026", "30"])
    assert number.format is CoordinateFormat.SEPARATED
    assert number.degrees == 4026
    assert number.to_decimal() == pytest.approx(4026.5)


def test_degrees_minutes_seconds():
    number = CoordinateNumber.from_numbers(["-40", "26", "46"])
    assert number.to_decimal() == pytest.approx(-(40 + 26 / 60 + 46 / 3600))


def test_fourth_number_is_milliseconds():
    number = CoordinateNumber.from_numbers(["1", "0", "0", "3600000"])
    assert number.to_decimal() == pytest.approx(2.0)


def test_empty_axis_is_zero():
    assert CoordinateNumber.from_numbers([]).to_decimal() == 0


def test_value_is_frozen():
    number = CoordinateNumber.from_numbers(["40"])
    with pytest.raises(AttributeError):
        number.degrees = 41


@pytest.mark.parametrize("packed", ["4026.767", "404454", "146700000"])
def test_packed_components_stay_floats(packed):
    number = CoordinateNumber.from_numbers([packed])
    for value in (number.degrees, number.minutes, number.seconds, number.milliseconds):
        assert type(value) is float
