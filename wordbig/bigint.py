"""Fixed-width unsigned integers stored as little-endian 32-bit words."""

from __future__ import annotations

import string
from dataclasses import dataclass

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1

_HEX_RATIO = 82


def _len_decimal(hex_digits: int) -> int:
    """Estimate how many decimal digits a number with ``hex_digits`` hex digits has."""
    return (hex_digits * 100 + _HEX_RATIO // 2) // _HEX_RATIO


def _check_word(value: int) -> None:
    if not 0 <= value <= WORD_MASK:
        raise ValueError(f"{value!r} does not fit in a {WORD_BITS}-bit word")


def add_with_overflow(a: int, b: int) -> int:
    """Add two words by carry propagation.

    The low 32 bits of the result hold the truncated sum; bit 32 is set when
    the final propagation step lost its carry off the top of the word.
    """
    _check_word(a)
    _check_word(b)
    carry = 0
    while b:
        carry = a & b
        a ^= b
        b = (carry << 1) & WORD_MASK
    if carry:
        return (1 << WORD_BITS) | a
    return a


@dataclass(frozen=True)
class BigInt:
    """An unsigned integer of ``size`` 32-bit words; arithmetic wraps modulo 2**(32*size)."""

    value: int
    size: int

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError("a BigInt needs at least one word")
        if not 0 <= self.value < (1 << self._bits):
            raise ValueError(f"{self.value} does not fit in {self.size} words")

    @property
    def _bits(self) -> int:
        return self.size * WORD_BITS

    @property
    def _mask(self) -> int:
        return (1 << self._bits) - 1

    def _words(self) -> list[int]:
        return [(self.value >> (WORD_BITS * i)) & WORD_MASK for i in range(self.size)]

    def _with(self, value: int) -> BigInt:
        return BigInt(value & self._mask, self.size)

    def _check_same_size(self, other: BigInt) -> None:
        if self.size != other.size:
            raise ValueError(f"BigInt sizes differ: {self.size} and {other.size}")

    @classmethod
    def zero(cls, size: int) -> BigInt:
        """Return zero with ``size`` words."""
        return cls(0, size)

    @classmethod
    def from_int(cls, value: int, size: int) -> BigInt:
        """Build from a Python int, wrapping it into ``size`` words."""
        if size < 1:
            raise ValueError("a BigInt needs at least one word")
        return cls(value % (1 << (size * WORD_BITS)), size)

    @classmethod
    def from_string(cls, text: str, size: int) -> BigInt:
        """Parse decimal text, or hexadecimal text with a ``0x`` prefix.

        Characters that are not digits of the base are skipped, and digits
        beyond the capacity of ``size`` words are dropped.
        """
        if size < 1:
            raise ValueError("a BigInt needs at least one word")
        bits = size * WORD_BITS
        if len(text) >= 2 and text[0] == "0" and text[1] in "xX":
            digits = [c for c in reversed(text[2:]) if c in string.hexdigits]
            digits = digits[: bits // 4]
            value = 0
            for position, char in enumerate(digits):
                value |= int(char, 16) << (4 * position)
            return cls(value, size)
        mask = (1 << bits) - 1
        value = 0
        for char in text:
            if "0" <= char <= "9":
                value = (value * 10 + ord(char) - ord("0")) & mask
        return cls(value, size)

    def to_int(self) -> int:
        """Return the value as a Python int."""
        return self.value

    def __int__(self) -> int:
        return self.value

    def hex_string(self) -> str:
        """Every word as eight upper-case hex digits, most significant first."""
        return f"{self.value:0{self.size * 8}X}"

    def decimal_string(self) -> str:
        """Decimal digits, left-padded with zeros to the estimated decimal width."""
        return str(self.value).zfill(_len_decimal(self.count_hex_digits()))

    def count_hex_digits(self) -> int:
        """Number of significant hex digits; zero counts as one digit."""
        if self.value == 0:
            return 1
        return (self.value.bit_length() + 3) // 4

    def is_zero(self) -> bool:
        return self.value == 0

    def compare(self, other: BigInt) -> int:
        """Return 1, 0 or -1 as ``self`` is greater than, equal to or less than ``other``."""
        self._check_same_size(other)
        return (self.value > other.value) - (self.value < other.value)

    def add(self, other: BigInt) -> BigInt:
        self._check_same_size(other)
        return self._with(self.value + other.value)

    def sub(self, other: BigInt) -> BigInt:
        self._check_same_size(other)
        return self.add(other.twos_complement())

    def twos_complement(self) -> BigInt:
        return self._with((self.value ^ self._mask) + 1)

    def mul(self, other: BigInt) -> BigInt:
        self._check_same_size(other)
        return self._with(self.value * other.value)

    def div_booth(self, divisor: BigInt) -> tuple[BigInt, BigInt]:
        """Shift-and-subtract division over the full word width.

        Returns ``(quotient, remainder)``; exact whenever the divisor is
        non-zero and its top bit is clear.
        """
        self._check_same_size(divisor)
        bits = self._bits
        mask = self._mask
        top = bits - 1
        quotient = self.value
        accumulator = 0
        extra_bit = 0
        m = divisor.value
        for _ in range(bits):
            msb_a = (accumulator >> top) & 1
            accumulator = ((accumulator << 1) | (quotient >> top)) & mask
            quotient = ((quotient << 1) | extra_bit) & mask
            extra_bit = msb_a
            if msb_a:
                accumulator = (accumulator + m) & mask
                quotient |= 1
            else:
                accumulator = (accumulator - m) & mask
                if (accumulator >> top) & 1:
                    accumulator = (accumulator + m) & mask
                else:
                    quotient |= 1
        return BigInt(quotient, self.size), BigInt(accumulator, self.size)

    def halve(self) -> BigInt:
        return BigInt(self.value >> 1, self.size)

    def times_ten(self) -> BigInt:
        return self._with(self.value * 10)

    def div_ten(self) -> BigInt:
        """Divide by ten word by word, carrying remainders in units of 10**9."""
        words = self._words()
        remainder = 0
        for index in reversed(range(self.size)):
            current = remainder * 1_000_000_000 + words[index]
            words[index] = (current // 10) & WORD_MASK
            remainder = current % 10
        value = 0
        for index, word in enumerate(words):
            value |= word << (WORD_BITS * index)
        return BigInt(value, self.size)

    def _check_shift(self, shift: int) -> None:
        if not 0 <= shift <= self.size:
            raise ValueError(f"word shift {shift} out of range for {self.size} words")

    def lshift_words(self, shift: int) -> BigInt:
        """Move words ``shift`` places toward the least significant end."""
        self._check_shift(shift)
        return BigInt(self.value >> (WORD_BITS * shift), self.size)

    def rshift_words(self, shift: int) -> BigInt:
        """Move words ``shift`` places toward the most significant end."""
        self._check_shift(shift)
        return self._with(self.value << (WORD_BITS * shift))