# wordbig

Fixed-width unsigned big integers made of 32-bit words, with decimal
floating values and fractions built on top of them.

Every value has a fixed word count. Arithmetic wraps modulo `2**(32*size)`,
the same way a fixed-size register does. The package needs nothing beyond
the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Integers (`wordbig.bigint`)

`BigInt` is a frozen dataclass holding `value` and `size` (the number of
words). Every operation returns a new `BigInt`.

```python
from wordbig.bigint import BigInt

a = BigInt.from_string("123456789012345678901234567890", 5)
b = BigInt.from_string("0xDEADBEEF", 5)

print(a.add(b).decimal_string())
print(a.hex_string())            # every word as 8 hex digits, highest word first
q, r = a.div_booth(b)            # quotient and remainder
print(q.to_int(), r.to_int())
```

- Constructors: `BigInt.zero(size)`, `BigInt.from_int(value, size)` (wraps
  the value into the width), `BigInt.from_string(text, size)` (decimal, or
  hexadecimal with a `0x`/`0X` prefix; other characters are skipped and
  digits beyond the width are dropped).
- Conversion: `to_int()`, `int(x)`, `hex_string()`, `decimal_string()`
  (left-padded with zeros to an estimated decimal width derived from the
  hex digit count), `count_hex_digits()` (zero counts as one digit).
- Arithmetic: `add`, `sub`, `mul`, `twos_complement`, `halve`, `times_ten`,
  `div_ten`, `div_booth`. `div_booth` is a shift-and-subtract division over
  the full width; its result is exact when the divisor is non-zero and its
  top bit is clear.
- Word shifts: `lshift_words(n)` moves words toward the least significant
  end, `rshift_words(n)` toward the most significant end; `n` must be
  between 0 and `size`.
- Comparison: `compare` returns 1, 0 or -1; `is_zero`.

Binary operations require both operands to have the same number of words
and raise `ValueError` otherwise.

`add_with_overflow(a, b)` adds two single words by carry propagation and
sets bit 32 of the result when the last propagation step lost a carry.

## Powers and roots (`wordbig.powers`)

```python
from wordbig.bigint import BigInt
from wordbig.powers import modpow, power, isqrt

base = BigInt.from_int(4, 4)
exp = BigInt.from_int(13, 4)
mod = BigInt.from_int(497, 4)
print(modpow(base, exp, mod).to_int())           # 445
print(power(BigInt.from_int(2, 4), BigInt.from_int(20, 4)).to_int())
print(isqrt(BigInt.from_int(1000, 4)).to_int())  # 31
```

- `modpow(base, exponent, modulus)`: square-and-multiply, reducing after
  each product; raises `ZeroDivisionError` for a zero modulus.
- `pow_fast(base, exponent)`: exponentiation by squaring.
- `pow_direct(base, exponent)`: repeated multiplication, using only the
  lowest word of the exponent.
- `power(base, exponent)`: uses `pow_direct` when the exponent's lowest word
  is at most 10, `pow_fast` otherwise, and logs the choice at debug level.
- `isqrt(n)`: integer square root by Newton's iteration.

## Decimal floats (`wordbig.bigfloat`)

`BigFloat(mantissa, exponent=0, negative=False)` stands for
`mantissa * 10**exponent`. `to_string()` (also `str()`) renders it with the
decimal point placed by the exponent; `normalize()` returns a rearranged
copy.

```python
from wordbig.bigint import BigInt
from wordbig.bigfloat import divide_to_bigfloat

value, digits = divide_to_bigfloat(BigInt.from_int(5, 5), BigInt.from_int(6, 5), 10)
print(value.to_string(), digits)
```

`divide_to_bigfloat(a, b, num_digits)` returns the quotient and the number
of decimal places actually produced, stopping early when the remainder
reaches zero. It raises `ZeroDivisionError` when `b` is zero.

## Fractions (`wordbig.fraction`)

```python
from wordbig.bigint import BigInt
from wordbig.fraction import BigFraction, factorial, pow_fraction

half = BigFraction(BigInt.from_int(1, 5), BigInt.from_int(2, 5))
third = BigFraction(BigInt.from_int(1, 5), BigInt.from_int(3, 5))
total = half.add(third)
print(total.numerator.to_int(), "/", total.denominator.to_int())   # 5 / 6
print(half.divide(third).to_decimal_string(32))

print(factorial(20, 4).to_int())
print(pow_fraction(half, 3, 5).denominator.to_int())               # 8
```

`BigFraction` has `add`, `subtract`, `multiply` and `divide` (which raises
`ZeroDivisionError` when either denominator is zero). Results are never
reduced, and a subtraction below zero wraps like `BigInt.sub`.
`to_decimal_string(n)` expands the fraction to up to `2 * n` decimal places.
`BigFraction.from_bigfloat` turns a `BigFloat` into a fraction with a
power-of-ten denominator, ignoring its sign. `str()` gives
`"numerator / denominator"`.

`factorial(n, size)` and `pow_fraction(x, n, size)` work in `size` words.

## Demo

```
wordbig-demo
```

Prints the sum, difference, product and quotient of 1/2 and 1/3, the sum
expanded as a decimal, and 123.45 turned into a fraction.

## What it does not do

- Integers are unsigned only; there is no signed `BigInt`.
- There is no square root of a `BigFloat`, only `isqrt` on integers.
- There are no trigonometric or other series functions on fractions.
- Fractions are never reduced to lowest terms.