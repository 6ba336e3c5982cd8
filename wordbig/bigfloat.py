"""Decimal floating-point values built on a BigInt mantissa."""

from __future__ import annotations

from dataclasses import dataclass

from .bigint import WORD_BITS, WORD_MASK, BigInt

_WORD_DECIMAL_SHIFT = 9
_TOP_WORD_LIMIT = 1_000_000_000


@dataclass(frozen=True)
class BigFloat:
    """The value ``mantissa * 10 ** exponent``, negated when ``negative`` is set."""

    mantissa: BigInt
    exponent: int = 0
    negative: bool = False

    def normalize(self) -> BigFloat:
        """Return the mantissa with its words rearranged and the exponent adjusted.

        Low zero words are dropped (nine decimal places per word), a full
        mantissa whose top word reaches 10**9 loses its lowest word, and a
        positive exponent is folded into the mantissa while its lowest word
        is zero.
        """
        size = self.mantissa.size
        mask = (1 << (size * WORD_BITS)) - 1
        value = self.mantissa.value
        exponent = self.exponent

        low_zero_words = 0
        while (
            low_zero_words < size
            and (value >> (WORD_BITS * low_zero_words)) & WORD_MASK == 0
        ):
            low_zero_words += 1
        if 0 < low_zero_words < size:
            value >>= WORD_BITS * low_zero_words
            exponent -= low_zero_words * _WORD_DECIMAL_SHIFT

        used_words = (value.bit_length() + WORD_BITS - 1) // WORD_BITS
        top_word = value >> (WORD_BITS * (size - 1))
        if used_words == size and top_word >= _TOP_WORD_LIMIT:
            value >>= WORD_BITS
            exponent += _WORD_DECIMAL_SHIFT

        if value & WORD_MASK == 0 and exponent > 0:
            # Each step shifts a zero word in at the bottom, so the lowest
            # word stays zero until the exponent is used up.
            value = (value << (WORD_BITS * min(exponent, size))) & mask
            exponent = 0

        return BigFloat(BigInt(value, size), exponent, self.negative)

    def to_string(self) -> str:
        """Render as decimal text with the point placed by the exponent."""
        digits = self.mantissa.decimal_string()
        width = len(digits)
        point = width + self.exponent
        sign = "-" if self.negative else ""
        if point <= 0:
            return f"{sign}0.{'0' * -point}{digits}"
        if point >= width:
            return f"{sign}{digits}{'0' * (point - width)}"
        return f"{sign}{digits[:point]}.{digits[point:]}"

    def __str__(self) -> str:
        return self.to_string()


def divide_to_bigfloat(a: BigInt, b: BigInt, num_digits: int) -> tuple[BigFloat, int]:
    """Divide ``a`` by ``b`` producing up to ``num_digits`` decimal places.

    Returns the quotient and the number of decimal places actually produced;
    digit generation stops early once the remainder reaches zero.
    """
    if a.size != b.size:
        raise ValueError(f"BigInt sizes differ: {a.size} and {b.size}")
    if b.is_zero():
        raise ZeroDivisionError("division by zero")

    quotient, remainder = a.div_booth(b)
    result = BigFloat(quotient)
    if remainder.is_zero():
        return result, 0

    mantissa = quotient
    exponent = 0
    obtained = 0
    while not remainder.is_zero() and obtained < num_digits:
        obtained += 1
        digit, remainder = remainder.times_ten().div_booth(b)
        mantissa = mantissa.times_ten().add(digit)
        exponent -= 1
    return BigFloat(mantissa, exponent).normalize(), obtained