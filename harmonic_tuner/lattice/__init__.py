"""Lattice layer - exact rational arithmetic over prime exponent vectors.

- Integer GCD / LCM (pairwise and folded over sequences)
- Lattice position addition, ratio and harmonic distance
- Integer chord ratio reduction shared by the just-intonation strategies
"""

from .rational import gcd, lcm, gcd_of_sequence, lcm_of_sequence
from .position import (
    LatticePosition,
    position_sum,
    exact_ratio,
    ratio_from_position,
    distance,
    compare_positions,
    sort_positions,
    split_position,
    integer_chord_ratio,
    format_chord_ratio,
)

__all__ = [
    # Rational
    "gcd",
    "lcm",
    "gcd_of_sequence",
    "lcm_of_sequence",
    # Positions
    "LatticePosition",
    "position_sum",
    "exact_ratio",
    "ratio_from_position",
    "distance",
    "compare_positions",
    "sort_positions",
    "split_position",
    "integer_chord_ratio",
    "format_chord_ratio",
]
