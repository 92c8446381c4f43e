from coordinate_parser.extraction import extract_numbers, group_numbers, normalize_numbers


def test_extract_decimal_pair():
    assert extract_numbers("40.7484, -73.9857") == ["40.7484", "-73.9857"]


def test_extract_skips_symbols_and_letters():
    text = "40°44'54.84\" N 73°59'08.52\" W"
    assert extract_numbers(text) == ["40", "44", "54.84", "73", "59", "08.52"]


def test_extract_nothing():
    assert extract_numbers("N, E") == []
    assert extract_numbers("") == []


def test_extract_trailing_dot_is_not_fractional():
    assert extract_numbers("40. 73.") == ["40", "73"]


def test_normalize_numbers():
    assert normalize_numbers(["40", "-73.5", "08.52"]) == [40.0, -73.5, 8.52]


def test_normalize_unparseable_becomes_zero():
    assert normalize_numbers(["abc"]) == [0.0]


def test_group_single_numbers():
    assert group_numbers(["1", "2"]) == (["1"], ["2"])


def test_group_three_per_axis():
    numbers = ["40", "26", "46", "79", "58", "56"]
    assert group_numbers(numbers) == (["40", "26", "46"], ["79", "58", "56"])


def test_group_empty():
    assert group_numbers([]) == ([], [])


def test_extract_ignores_non_ascii_digits():
    assert extract_numbers("４０, ７３") == []
