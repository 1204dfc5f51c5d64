"""Number-theoretic checks and small integer sequences."""

from __future__ import annotations

__all__ = [
    "is_armstrong",
    "max_consecutive_ones",
    "next_beautiful_year",
    "factorial",
    "fibonacci",
    "is_prime",
]

_INT_MASK = 0xFFFFFFFF


def is_armstrong(x: int) -> bool:
    """Return True when x equals the sum of its digits each raised to the digit count.

    Digits of a negative number carry its sign, so -153 qualifies like 153.
    """
    digits = str(abs(x))
    sign = -1 if x < 0 else 1
    order = len(digits)
    return sum((sign * int(digit)) ** order for digit in digits) == x


def max_consecutive_ones(x: int) -> int:
    """Return the length of the longest run of 1 bits in x.

    Negative values are read as 32-bit two's complement.
    """
    bits = x & _INT_MASK if x < 0 else x
    count = 0
    while bits:
        bits &= bits << 1
        count += 1
    return count


def next_beautiful_year(year: int) -> int | None:
    """Return the first year after the given one whose four digits are all distinct.

    Only years 1000 through 10000 are considered; None is returned when none fits.
    """
    return next(
        (
            candidate
            for candidate in range(max(1000, year + 1), 10001)
            if len(set(str(candidate))) == len(str(candidate))
        ),
        None,
    )


def factorial(n: int) -> int:
    """Return n!, raising ValueError for negative n."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def fibonacci(n: int) -> list[int]:
    """Return the first n Fibonacci numbers, always including the leading 0 and 1."""
    terms = [0, 1]
    while len(terms) < n:
        terms.append(terms[-1] + terms[-2])
    return terms


def is_prime(n: int) -> bool:
    """Return True when n is a prime number."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))