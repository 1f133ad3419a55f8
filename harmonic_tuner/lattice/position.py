"""Lattice positions - integer exponent vectors over a set of primes.

A position (e2, e3, e5) over primes (2, 3, 5) names the exact ratio
2^e2 * 3^e3 * 5^e5. Ratios are compared and reduced with Python ints and
Fractions; only `ratio_from_position` hands back a float.
"""

from fractions import Fraction
from functools import cmp_to_key
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..core.constants import PRIMES
from .rational import gcd_of_sequence, lcm_of_sequence

LatticePosition = Tuple[int, ...]


def position_sum(a: Sequence[int], b: Sequence[int]) -> LatticePosition:
    """Component-wise sum of two positions of equal length."""
    if len(a) != len(b):
        raise ValueError(
            f"Cannot add positions of different lengths: {len(a)} and {len(b)}"
        )
    return tuple(x + y for x, y in zip(a, b))


def exact_ratio(position: Sequence[int], primes: Sequence[int] = PRIMES) -> Fraction:
    """Exact ratio product(primes[i] ** position[i]) as a Fraction."""
    ratio = Fraction(1)
    for prime, exponent in zip(primes, position):
        ratio *= Fraction(prime) ** exponent
    return ratio


def ratio_from_position(position: Sequence[int], primes: Sequence[int] = PRIMES) -> float:
    """Frequency ratio of a position."""
    return float(exact_ratio(position, primes))


def distance(position: Sequence[int], primes: Sequence[int] = PRIMES) -> int:
    """Harmonic distance: sum of (prime_i * e_i)^2 over all dimensions."""
    weighted = np.asarray(primes, dtype=np.int64) * np.asarray(position, dtype=np.int64)
    return int(np.sum(np.square(weighted)))


def compare_positions(
    a: Sequence[int], b: Sequence[int], primes: Sequence[int] = PRIMES
) -> int:
    """Sort comparator: -1, 0 or 1 as the ratio of `a` is below, equal to or above `b`."""
    ratio_a = exact_ratio(a, primes)
    ratio_b = exact_ratio(b, primes)
    return (ratio_a > ratio_b) - (ratio_a < ratio_b)


def sort_positions(
    positions: Iterable[Sequence[int]], primes: Sequence[int] = PRIMES
) -> List[LatticePosition]:
    """Positions in ascending ratio order (stable for equal ratios)."""
    return sorted(
        (tuple(p) for p in positions),
        key=cmp_to_key(lambda a, b: compare_positions(a, b, primes)),
    )


def split_position(
    position: Sequence[int], primes: Sequence[int] = PRIMES
) -> Tuple[int, int]:
    """Split a position into (numerator, denominator) integer products."""
    numerator = 1
    denominator = 1
    for prime, exponent in zip(primes, position):
        if exponent > 0:
            numerator *= prime ** exponent
        elif exponent < 0:
            denominator *= prime ** -exponent
    return numerator, denominator


def integer_chord_ratio(
    positions: Iterable[Sequence[int]], primes: Sequence[int] = PRIMES
) -> List[int]:
    """
    Reduce a chord's positions to an integer chord ratio.

    Positions are sorted ascending by ratio and split into numerator and
    denominator products. With L the LCM of all denominators and G the GCD
    of all numerators, note i becomes (L * num_i) / (G * den_i).

    Args:
        positions: One lattice position per sounding note
        primes: Prime for each lattice dimension

    Returns:
        Integers in ascending pitch order, e.g. [4, 5, 6] for a major triad
    """
    parts = [split_position(p, primes) for p in sort_positions(positions, primes)]
    if not parts:
        return []

    numerators = [num for num, _ in parts]
    denominators = [den for _, den in parts]
    common_den = lcm_of_sequence(denominators)
    common_num = gcd_of_sequence(numerators)

    return [
        (common_den * num) // (common_num * den)
        for num, den in parts
    ]


def format_chord_ratio(values: Sequence[int]) -> str:
    """Render integers as "a : b : c (L)" where L is their LCM."""
    if not values:
        return ""
    joined = " : ".join(str(v) for v in values)
    return f"{joined} ({lcm_of_sequence(values)})"
