"""Fractions whose numerator and denominator are fixed-width BigInts."""

from __future__ import annotations

from dataclasses import dataclass

from .bigfloat import BigFloat, divide_to_bigfloat
from .bigint import BigInt


@dataclass(frozen=True)
class BigFraction:
    """``numerator / denominator``, kept unreduced; arithmetic wraps like BigInt."""

    numerator: BigInt
    denominator: BigInt

    def add(self, other: BigFraction) -> BigFraction:
        """Cross-multiply and add: ``(a*d + c*b) / (b*d)``."""
        left = self.numerator.mul(other.denominator)
        right = other.numerator.mul(self.denominator)
        return BigFraction(left.add(right), self.denominator.mul(other.denominator))

    def subtract(self, other: BigFraction) -> BigFraction:
        """Cross-multiply and subtract: ``(a*d - c*b) / (b*d)``, wrapping below zero."""
        left = self.numerator.mul(other.denominator)
        right = other.numerator.mul(self.denominator)
        return BigFraction(left.sub(right), self.denominator.mul(other.denominator))

    def multiply(self, other: BigFraction) -> BigFraction:
        return BigFraction(
            self.numerator.mul(other.numerator),
            self.denominator.mul(other.denominator),
        )

    def divide(self, other: BigFraction) -> BigFraction:
        """Multiply by the reciprocal of ``other``.

        Raises ZeroDivisionError when either fraction has a zero denominator.
        """
        if self.denominator.is_zero() or other.denominator.is_zero():
            raise ZeroDivisionError("fraction denominator is zero")
        return BigFraction(
            self.numerator.mul(other.denominator),
            self.denominator.mul(other.numerator),
        )

    @classmethod
    def from_bigfloat(cls, number: BigFloat) -> BigFraction:
        """Turn ``mantissa * 10**exponent`` into a fraction; the sign is ignored."""
        size = number.mantissa.size
        exponent = number.exponent
        if exponent < 0:
            denominator = BigInt.from_string("1" + "0" * -exponent, size)
            return cls(number.mantissa, denominator)
        one = BigInt.from_string("1", size)
        if exponent == 0:
            return cls(number.mantissa, one)
        factor = BigInt.from_string("1" + "0" * exponent, size)
        return cls(number.mantissa.mul(factor), one)

    def to_decimal_string(self, number_decimals: int) -> str:
        """Decimal expansion with up to ``2 * number_decimals`` places."""
        result, _ = divide_to_bigfloat(
            self.numerator, self.denominator, number_decimals * 2
        )
        return result.to_string()

    def __str__(self) -> str:
        return f"{self.numerator.decimal_string()} / {self.denominator.decimal_string()}"


def factorial(n: int, size: int) -> BigInt:
    """``n!`` in ``size`` words, wrapping on overflow."""
    result = BigInt.from_string("1", size)
    for i in range(2, n + 1):
        result = result.mul(BigInt.from_string(str(i), size))
    return result


def pow_fraction(x: BigFraction, n: int, size: int) -> BigFraction:
    """``x ** n`` by repeated multiplication, starting from ``1/1`` of ``size`` words."""
    one = BigInt.from_string("1", size)
    result = BigFraction(one, one)
    for _ in range(n):
        result = result.multiply(x)
    return result