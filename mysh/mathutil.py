"""Small integer helpers."""

from __future__ import annotations

import math
from typing import Iterable


def power(nb: int, p: int) -> int:
    """Return ``nb`` raised to ``p``; negative exponents give 0."""
    if p < 0:
        return 0
    return nb**p


def exact_square_root(nb: int) -> int:
    """Return the integer square root of a perfect square, else 0."""
    if nb <= 0:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def is_prime(nb: int) -> bool:
    """Return True when ``nb`` is prime."""
    if nb < 2:
        return False
    return all(nb % divisor for divisor in range(2, math.isqrt(nb) + 1))


def next_prime(nb: int) -> int:
    """Return the smallest prime greater than or equal to ``nb``."""
    candidate = max(nb, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def sort_ints(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)