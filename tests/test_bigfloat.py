from decimal import Decimal

import pytest
from hypothesis import given, strategies as st

from wordbig.bigfloat import BigFloat, divide_to_bigfloat
from wordbig.bigint import BigInt


def _big(value, size=4):
    return BigInt.from_int(value, size)


def test_exact_division_has_no_decimals():
    result, digits = divide_to_bigfloat(_big(12), _big(4), 10)
    assert digits == 0
    assert result.mantissa.to_int() == 3
    assert result.exponent == 0
    assert Decimal(result.to_string()) == Decimal(3)


def test_terminating_fraction_stops_early():
    result, digits = divide_to_bigfloat(_big(1), _big(8), 10)
    assert digits < 10
    assert result.exponent == -digits
    assert Decimal(result.to_string()) == Decimal(1) / Decimal(8)


def test_repeating_fraction_uses_all_digits():
    result, digits = divide_to_bigfloat(_big(5, 5), _big(6, 5), 10)
    assert digits == 10
    assert result.exponent == -10
    assert result.mantissa.to_int() == 5 * 10**10 // 6
    text = result.to_string()
    assert text.startswith("0.")
    assert len(text.split(".")[1]) == 10


@given(st.integers(min_value=0, max_value=10**6),
       st.integers(min_value=1, max_value=10**6),
       st.integers(min_value=0, max_value=9))
def test_division_matches_truncated_quotient(numerator, denominator, places):
    numerator %= denominator
    result, digits = divide_to_bigfloat(_big(numerator), _big(denominator), places)
    assert digits <= places
    assert result.mantissa.to_int() == numerator * 10**digits // denominator
    if digits < places:
        assert numerator * 10**digits % denominator == 0
    assert result.exponent == -digits
    assert Decimal(result.to_string()) == Decimal(result.mantissa.to_int()).scaleb(-digits)


def test_zero_divisor_raises():
    with pytest.raises(ZeroDivisionError):
        divide_to_bigfloat(_big(1), _big(0), 5)


def test_size_mismatch_raises():
    with pytest.raises(ValueError):
        divide_to_bigfloat(_big(1, 2), _big(3, 4), 5)


def test_normalize_drops_low_zero_words():
    number = BigFloat(BigInt(5 << 32, 2), 0)
    normalized = number.normalize()
    assert normalized.mantissa.to_int() == 5
    assert normalized.exponent == -9


def test_normalize_full_top_word_is_shifted_out():
    number = BigFloat(BigInt(1_000_000_000, 1), 0)
    normalized = number.normalize()
    assert normalized.mantissa.is_zero()
    assert normalized.exponent == 0


def test_normalize_keeps_plain_value():
    number = BigFloat(BigInt(7, 2), 3, True)
    assert number.normalize() == number


def test_to_string_places_point_inside():
    number = BigFloat(BigInt.from_string("12345", 10), -2)
    assert number.to_string() == "123.45"
    assert str(number) == "123.45"


def test_to_string_leading_zeros_and_sign():
    assert BigFloat(_big(1), -3).to_string() == "0.001"
    assert BigFloat(_big(1), -3, True).to_string() == "-0.001"


def test_to_string_positive_exponent_appends_zeros():
    assert BigFloat(_big(12), 3).to_string() == "12000"