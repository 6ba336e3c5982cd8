"""Exponentiation, modular exponentiation and integer square roots on BigInt."""

from __future__ import annotations

import logging

from .bigint import WORD_MASK, BigInt

_log = logging.getLogger(__name__)

_DIRECT_LIMIT = 10


def _require_same_size(*numbers: BigInt) -> int:
    sizes = {number.size for number in numbers}
    if len(sizes) != 1:
        raise ValueError(f"BigInt sizes differ: {sorted(sizes)}")
    return sizes.pop()


def modpow(base: BigInt, exponent: BigInt, modulus: BigInt) -> BigInt:
    """Square-and-multiply ``base ** exponent`` reduced by ``modulus``.

    Products are truncated to the operand width before each reduction, and the
    initial result of one is returned unreduced when the exponent is zero.
    """
    size = _require_same_size(base, exponent, modulus)
    if modulus.is_zero():
        raise ZeroDivisionError("modulus is zero")
    result = BigInt.from_int(1, size)
    square = base
    remaining = exponent
    while not remaining.is_zero():
        if remaining.value & 1:
            _, result = result.mul(square).div_booth(modulus)
        _, square = square.mul(square).div_booth(modulus)
        remaining = remaining.halve()
    return result


def pow_fast(base: BigInt, exponent: BigInt) -> BigInt:
    """Exponentiation by squaring, wrapping modulo the operand width."""
    size = _require_same_size(base, exponent)
    result = BigInt.from_int(1, size)
    square = base
    remaining = exponent
    while not remaining.is_zero():
        if remaining.value & 1:
            result = result.mul(square)
        square = square.mul(square)
        remaining = remaining.halve()
    return result


def pow_direct(base: BigInt, exponent: BigInt) -> BigInt:
    """Repeated multiplication using only the lowest word of the exponent."""
    size = _require_same_size(base, exponent)
    if exponent.is_zero():
        return BigInt.from_int(1, size)
    result = base
    for _ in range(1, exponent.value & WORD_MASK):
        result = result.mul(base)
    return result


def power(base: BigInt, exponent: BigInt) -> BigInt:
    """Pick direct multiplication for small exponents, squaring otherwise."""
    if exponent.value & WORD_MASK > _DIRECT_LIMIT:
        _log.debug("using fast exponentiation")
        return pow_fast(base, exponent)
    _log.debug("using direct exponentiation")
    return pow_direct(base, exponent)


def isqrt(n: BigInt) -> BigInt:
    """Integer square root by Newton's iteration starting from ``n / 2``."""
    if n.value < 2:
        return n
    x = n.halve()
    while True:
        quotient, _ = n.div_booth(x)
        candidate = x.add(quotient).halve()
        if candidate.compare(x) >= 0:
            return x
        x = candidate