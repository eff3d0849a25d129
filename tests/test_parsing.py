import pytest

from philosim.parsing import ArgumentError, parse_number, validate_arguments


@pytest.mark.parametrize("text", ["0", "7", "42", "800", "123456789"])
def test_parse_decimal_round_trip(text):
    assert parse_number(text) == int(text)


def test_parse_negative():
    assert parse_number("-250") == -250


def test_parse_stops_at_first_non_digit():
    assert parse_number("12abc") == 12
    assert parse_number("99 100") == 99


def test_parse_without_digits_is_zero():
    assert parse_number("") == 0
    assert parse_number("abc") == 0
    assert parse_number("-") == 0


def test_parse_hexadecimal():
    assert parse_number("0x1f") == 31
    assert parse_number("0xFF") == int("FF", 16)


def test_parse_hex_stops_at_non_hex_digit():
    assert parse_number("0x10zz") == int("10", 16)


def test_parse_uppercase_x_is_not_hex_prefix():
    assert parse_number("0X10") == 0


def test_parse_hex_prefix_without_digits():
    assert parse_number("0x") == 0


def test_validate_returns_parsed_values():
    assert validate_arguments(["5", "800", "200", "200"]) == (5, 800, 200, 200)
    assert validate_arguments(["5", "800", "200", "200", "7"]) == (5, 800, 200, 200, 7)


def test_validate_empty_sequence():
    assert validate_arguments([]) == ()


@pytest.mark.parametrize(
    "args",
    [
        ["0", "800", "200", "200"],
        ["5", "-800", "200", "200"],
        ["5", "800", "2a0", "200"],
        ["5", "800", "200", ""],
        ["5", "800", "200", "200", "+3"],
        ["5", "0x10", "200", "200"],
    ],
)
def test_validate_rejects_bad_arguments(args):
    with pytest.raises(ArgumentError, match="invalid arguments"):
        validate_arguments(args)


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        validate_arguments(["x"])