import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wordbig.bigint import BigInt
from wordbig.powers import isqrt, modpow, pow_direct, pow_fast, power


def big(value, size=2):
    return BigInt.from_int(value, size)


def test_modpow_worked_example():
    assert modpow(big(4), big(13), big(497)).to_int() == 445


def test_modpow_zero_exponent_returns_one():
    assert modpow(big(12345), big(0), big(1)).to_int() == 1


def test_modpow_zero_modulus_raises():
    with pytest.raises(ZeroDivisionError):
        modpow(big(3), big(5), big(0))


def test_modpow_size_mismatch_raises():
    with pytest.raises(ValueError):
        modpow(big(3, 1), big(5, 2), big(7, 2))


@given(
    st.integers(0, 2**31 - 1),
    st.integers(1, 2**40),
    st.integers(1, 2**31 - 1),
)
def test_modpow_matches_builtin(b, e, m):
    assert modpow(big(b), big(e), big(m)).to_int() == pow(b, e, m)


@given(st.integers(0, 2**64 - 1), st.integers(0, 500), st.integers(1, 3))
def test_pow_fast_wraps_to_width(b, e, size):
    base = BigInt.from_int(b, size)
    expected = pow(b, e, 2 ** (32 * size))
    assert pow_fast(base, BigInt.from_int(e, size)).to_int() == expected


def test_pow_fast_size_mismatch_raises():
    with pytest.raises(ValueError):
        pow_fast(big(2, 1), big(3, 2))


@given(st.integers(0, 2**64 - 1), st.integers(0, 60))
def test_pow_direct_matches_builtin(b, e):
    assert pow_direct(big(b), big(e)).to_int() == pow(b, e, 2**64)


def test_pow_direct_uses_only_low_word():
    exponent = BigInt.from_int((1 << 32) | 3, 2)
    assert pow_direct(big(5), exponent).to_int() == 125


@given(st.integers(0, 2**64 - 1), st.integers(0, 40))
def test_power_agrees_with_both_strategies(b, e):
    base, exponent = big(b), big(e)
    result = power(base, exponent)
    assert result == pow_fast(base, exponent)
    assert result == pow_direct(base, exponent)


def test_power_of_two_to_sixty_four_wraps_to_zero():
    assert power(big(2), big(64)).is_zero()


@given(st.integers(0, 2**95 - 1))
def test_isqrt_matches_math(n):
    root = isqrt(BigInt.from_int(n, 3))
    assert root.to_int() == math.isqrt(n)
    assert root.size == 3


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 15, 16, 17, 99, 100])
def test_isqrt_small_values_bracket(n):
    r = isqrt(big(n)).to_int()
    assert r * r <= n < (r + 1) * (r + 1)


def test_isqrt_one_in_wide_number():
    assert isqrt(BigInt.from_int(1, 4)).to_int() == 1