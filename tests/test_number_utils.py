import pytest

from tickerdrivers.utils.numbers import parse_to_float


@pytest.mark.parametrize(
    "value,expected",
    [
        ("12.5", 12.5),
        (" 3 ", 3.0),
        ("1e3", 1000.0),
        (3, 3.0),
        (0, 0.0),
        (19.75, 19.75),
        ("-0.5", -0.5),
    ],
)
def test_parse_to_float_numbers(value, expected):
    result = parse_to_float(value)
    assert isinstance(result, float)
    assert result == pytest.approx(expected)


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "   ",
        "abc",
        "nan",
        "inf",
        "1e400",
        float("nan"),
        float("-inf"),
        10**400,
        -(10**400),
        True,
        [],
        {},
    ],
)
def test_parse_to_float_not_available(value):
    assert parse_to_float(value) is None
