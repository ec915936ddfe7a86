"""
hofkit Standard Library - Math Module.

Ready-made transforms, predicates and combine functions for numbers:
- Transforms: add_one, square, increase_by_percent
- Predicates: is_even, divisible_by, between
- Combine functions: add, multiply
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

import numpy as np

Number = Union[int, float]


# =============================================================================
# Transforms
# =============================================================================


def add_one(x: Number) -> Number:
    """Return x + 1."""
    return x + 1


def square(x: Number) -> Number:
    """Return x * x."""
    return x * x


def increase_by_percent(pct: Number) -> Callable[[Number], Number]:
    """
    Build a transform that grows a value by ``pct`` percent.

    Integral input is truncated back to an int, so growing 1000 by 10
    percent gives 1100 rather than 1100.0000000000002. Float input stays
    a float.

    Examples:
        >>> increase_by_percent(10)(6000)
        6600
        >>> increase_by_percent(50)(1.5)
        2.25
    """
    factor = 1 + pct / 100

    def transform(value: Number) -> Number:
        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            return int(np.trunc(np.multiply(float(value), factor)))
        return float(np.multiply(value, factor))

    return transform


# =============================================================================
# Predicates
# =============================================================================


def is_even(x: int) -> bool:
    """Return True if x is divisible by 2."""
    return x % 2 == 0


def divisible_by(n: int) -> Callable[[int], bool]:
    """Build a predicate that checks divisibility by n."""
    if n == 0:
        raise ValueError("divisible_by() divisor must be non-zero")
    return lambda x: x % n == 0


def between(lo: Number, hi: Number) -> Callable[[Number], bool]:
    """
    Build a closed-interval membership predicate: lo <= x <= hi.

    Example:
        filter_seq([1, 2, 3, 4, 5, 6, 890], between(4, 6)) -> [4, 5, 6]
    """
    return lambda x: lo <= x <= hi


# =============================================================================
# Combine Functions
# =============================================================================


def add(acc: Number, x: Number) -> Number:
    return acc + x


def multiply(acc: Number, x: Number) -> Number:
    return acc * x
