"""
Shared value types for closed interval lookups.

An interval returned by a lookup is a plain 2-tuple. Its bounds are either
points supplied by the caller or one of the two infinity sentinels, which
mark the rays before the first and after the last point.
"""

from enum import Enum
from typing import Tuple, TypeVar, Union

T = TypeVar('T')


class Infinity(Enum):
    """Sentinels for the open ends of the covered range."""
    NEG = "-inf"
    POS = "+inf"

    def __str__(self):
        return self.value


NEG_INF = Infinity.NEG
POS_INF = Infinity.POS


class Ordering(Enum):
    """Position of a sought value relative to a stored point."""
    LESS = "lt"
    EQUAL = "eq"
    GREATER = "gt"


class InvalidArgument(ValueError):
    """Raised when an index cannot be built or queried from the given input."""


Bound = Union[T, Infinity]
Interval = Tuple[Bound, Bound]


def is_ray(interval: Interval) -> bool:
    """True for the synthetic (-inf, p) and (p, +inf) intervals."""
    return interval[0] is NEG_INF or interval[1] is POS_INF
