"""Parity, factorial and binomial coefficients."""

from math import prod


def is_even(num: int) -> bool:
    """Return True when ``num`` is divisible by two."""
    return num % 2 == 0


def factorial(num: int) -> int:
    """Return the product ``1 * 2 * ... * num``; 1 for zero or less."""
    return prod(range(1, num + 1))


def combination(n: int, r: int) -> int:
    """Return ``n! / (r! * (n - r)!)``.

    Raises ValueError when ``r`` exceeds ``n``.
    """
    if r > n:
        raise ValueError(f"invalid combination: r={r} is greater than n={n}")
    return factorial(n) // (factorial(r) * factorial(n - r))