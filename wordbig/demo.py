"""Walk through fraction arithmetic and decimal conversion on sample values."""

from __future__ import annotations

import argparse

from .bigfloat import BigFloat, divide_to_bigfloat
from .bigint import BigInt
from .fraction import BigFraction

_SIZE = 5
_BIG_SIZE = 10


def _show(label: str, fraction: BigFraction) -> None:
    print(f"{label}: {fraction}")


def main(argv: list[str] | None = None) -> int:
    """Print sums, differences, products and quotients of 1/2 and 1/3."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    frac1 = BigFraction(BigInt.from_int(1, _SIZE), BigInt.from_int(2, _SIZE))
    frac2 = BigFraction(BigInt.from_int(1, _SIZE), BigInt.from_int(3, _SIZE))

    total = frac1.add(frac2)
    difference = frac1.subtract(frac2)
    product = frac1.multiply(frac2)
    quotient = frac1.divide(frac2)

    _show("Fraction 1", frac1)
    _show("Fraction 2", frac2)
    _show("Sum", total)
    _show("Subtraction", difference)
    _show("Multiplication", product)
    print(f"Division: {quotient} = {quotient.to_decimal_string(32)}")
    print()

    as_float, _ = divide_to_bigfloat(total.numerator, total.denominator, _SIZE * 2)
    print(f"Sum (as float grande): {total} = {as_float}")

    number = BigFloat(BigInt.from_string("12345", _BIG_SIZE), -2)
    converted = BigFraction.from_bigfloat(number)
    print(number)
    print(converted)
    print(f"resultado: {converted.to_decimal_string(32)}")
    print("adios")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())