"""Exact integer GCD / LCM helpers used for chord ratio reduction."""

from functools import reduce
from typing import Iterable


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm; gcd(a, 0) == a."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers."""
    return a * b // gcd(a, b)


def gcd_of_sequence(values: Iterable[int]) -> int:
    """
    Fold gcd over a sequence.

    A single-element sequence returns that element unchanged.

    Raises:
        ValueError: If the sequence is empty.
    """
    values = list(values)
    if not values:
        raise ValueError("gcd_of_sequence() requires at least one value")
    return reduce(gcd, values)


def lcm_of_sequence(values: Iterable[int]) -> int:
    """
    Fold lcm over a sequence.

    Raises:
        ValueError: If the sequence is empty.
    """
    values = list(values)
    if not values:
        raise ValueError("lcm_of_sequence() requires at least one value")
    return reduce(lcm, values)
