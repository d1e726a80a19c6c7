import pytest

from cub3d.numbers import atoi, atoi_base, itoa

DECIMAL = "0123456789"
HEX = "0123456789abcdef"


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_whitespace_and_trailing():
    assert atoi(" \t\n\v\f\r-42abc") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_single_sign_only():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_no_digits():
    assert atoi("abc") == 0
    assert atoi("") == 0


def test_atoi_wraps_like_int():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 7, 255, 4096, 65535])
def test_atoi_base_hex_matches_int(n):
    text = format(n, "x")
    assert atoi_base(text, HEX) == int(text, 16)


def test_atoi_base_decimal_agrees_with_atoi():
    for text in ["  123", "-99", "+0", "  \t77xyz"]:
        assert atoi_base(text, DECIMAL) == atoi(text)


def test_atoi_base_multiple_signs():
    assert atoi_base("--+-7", DECIMAL) == -7
    assert atoi_base("--7", DECIMAL) == 7


def test_atoi_base_stops_at_unknown_char():
    assert atoi_base("101201", "01") == int("101", 2)


@pytest.mark.parametrize("base", ["", "0", "0+1", "01-", "0 1", "001", "01\x7f"])
def test_atoi_base_invalid_base(base):
    with pytest.raises(ValueError):
        atoi_base("1", base)


@pytest.mark.parametrize("n", [0, 5, -5, 123456, -2147483648, 2147483647])
def test_itoa_matches_str(n):
    assert itoa(n) == str(n)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa(1.5)