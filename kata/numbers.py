"""Small number puzzles: divisors, digits, primes, series and tariffs."""

from __future__ import annotations

import math

__all__ = [
    "gcd",
    "lcm",
    "multiplication_table",
    "is_even",
    "is_armstrong",
    "electricity_bill",
    "binary_to_decimal",
    "decimal_to_binary",
    "factorial",
    "fibonacci",
    "largest_of_three",
    "is_leap_year",
    "reverse_number",
    "is_palindrome_number",
    "sign_name",
    "power",
    "is_prime",
    "primes_between",
    "digit_sum",
    "harmonic_sum",
]


def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value}")


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    _require_positive(a=a, b=b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    _require_positive(a=a, b=b)
    return a * b // gcd(a, b)


def multiplication_table(n: int) -> list[str]:
    """Lines ``n * i = product`` for i from 1 to 10."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 11)]


def is_even(n: int) -> bool:
    """True if ``n`` is divisible by two."""
    return n % 2 == 0


def _digits(n: int) -> list[int]:
    """Decimal digits of ``n``, least significant first, carrying its sign."""
    sign = -1 if n < 0 else 1
    return [sign * int(ch) for ch in reversed(str(abs(n)))] if n else []


def is_armstrong(n: int) -> bool:
    """True if ``n`` equals the sum of its digits each raised to the digit count."""
    digits = _digits(n)
    return sum(d ** len(digits) for d in digits) == n


def electricity_bill(units: int) -> float:
    """Bill for consumed units under a three-tier tariff."""
    if units <= 50:
        return units * 0.50
    if units <= 150:
        return 25 + (units - 50) * 0.75
    return 100 + (units - 150) * 1.20


def binary_to_decimal(digits: str | int) -> int:
    """Value of a string (or integer) of binary digits."""
    text = str(digits).strip()
    try:
        return int(text, 2)
    except ValueError:
        raise ValueError(f"not a binary number: {digits!r}") from None


def decimal_to_binary(n: int) -> str:
    """Binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    if n == 0:
        return "0"
    bits = []
    while n:
        n, bit = divmod(n, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def factorial(n: int) -> int:
    """Product of the integers from 1 to ``n``."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return math.prod(range(1, n + 1))


def fibonacci(count: int) -> list[int]:
    """The first ``count`` terms of the Fibonacci series, starting at 0."""
    terms = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


def largest_of_three(a, b, c):
    """The largest of three values."""
    return max(a, b, c)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def reverse_number(n: int) -> int:
    """Digits of ``n`` in reverse order, keeping its sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """True if ``n`` reads the same reversed."""
    return reverse_number(n) == n


def sign_name(n: int) -> str:
    """``Positive``, ``Negative`` or ``Zero``."""
    if n > 0:
        return "Positive"
    if n < 0:
        return "Negative"
    return "Zero"


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative integer ``exponent``."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_prime(n: int) -> bool:
    """True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % i for i in range(2, n // 2 + 1))


def primes_between(low: int, high: int) -> list[int]:
    """Primes ``p`` with ``low <= p < high``."""
    return [n for n in range(low, high) if is_prime(n)]


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of a positive integer; 0 otherwise."""
    if n <= 0:
        return 0
    return sum(int(ch) for ch in str(n))


def harmonic_sum(n: int) -> float:
    """Sum of 1/i for i from 1 to ``n``."""
    total = 0.0
    for i in range(1, n + 1):
        total += 1.0 / i
    return total