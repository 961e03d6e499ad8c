"""Integer helpers: divisibility, primality, bit counts, roots and digit reversal."""

from __future__ import annotations

import math

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_UINT32_MASK = 0xFFFFFFFF


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of ``a`` and ``b``."""
    while b:
        a, b = b, a % b
    return abs(a)


def lcm(a: int, b: int) -> int:
    """Least common multiple of ``a`` and ``b``.

    Raises ZeroDivisionError when both are zero.
    """
    return (a // gcd(a, b)) * b


def factorial(n: int) -> int:
    """``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(2, n + 1))


def triangular_number(n: int) -> int:
    """Sum of the integers from 1 to ``n``."""
    return n * (n + 1) // 2


def is_prime(x: int) -> bool:
    """Whether ``x`` is a prime number."""
    if x < 2:
        return False
    return all(x % d for d in range(2, math.isqrt(x) + 1))


def is_perfect_square(x: float) -> bool:
    """Whether ``x`` is the square of a whole number."""
    if x < 0:
        return False
    if isinstance(x, int):
        return math.isqrt(x) ** 2 == x
    return math.sqrt(x).is_integer()


def hamming_weight(n: int) -> int:
    """Number of set bits in ``n`` taken as an unsigned 32-bit integer."""
    return bin(n & _UINT32_MASK).count("1")


def integer_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    Returns 0 when the result does not fit a signed 32-bit integer.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    if not INT32_MIN <= result <= INT32_MAX:
        return 0
    return result