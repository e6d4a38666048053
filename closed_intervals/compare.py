"""
Comparison helpers for index points.

``Indexed`` pairs a position (``idx``) with arbitrary data, which is how a
step function is stored: several points may share one ``idx`` while carrying
different data. ``compare`` orders numbers, datetimes and ``Indexed`` values,
and ``navigator`` turns it into the function ``get_all_intervals_by`` expects.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .interval import InvalidArgument, Ordering

T = TypeVar('T')


@dataclass(frozen=True)
class Indexed(Generic[T]):
    """A point positioned at ``idx`` and carrying ``data``."""
    idx: Any
    data: T = None


def idx_of(point):
    """Position of a point; plain values are their own position."""
    return point.idx if isinstance(point, Indexed) else point


def compare(lhs, rhs) -> Ordering:
    """
    Three-way comparison on positions.

    Raises TypeError for values Python cannot order and InvalidArgument for
    unordered values such as NaN.
    """
    lhs, rhs = idx_of(lhs), idx_of(rhs)
    if lhs < rhs:
        return Ordering.LESS
    if lhs == rhs:
        return Ordering.EQUAL
    if lhs > rhs:
        return Ordering.GREATER
    raise InvalidArgument(f"{lhs!r} and {rhs!r} are unordered")


def navigator(value, compare: Callable[[Any, Any], Ordering] = compare) -> Callable[[Any], Ordering]:
    """Navigation function locating ``value`` relative to stored points."""
    def navigate(point):
        return compare(value, point)
    return navigate


@dataclass(frozen=True)
class KeyOrder:
    """``<=`` on ``key(point)``. Equal keys give equal relations."""
    key: Callable[[Any], Any]

    def __call__(self, a, b) -> bool:
        return self.key(a) <= self.key(b)


@dataclass(frozen=True)
class KeyEq:
    """``==`` on ``key(point)``."""
    key: Callable[[Any], Any]

    def __call__(self, a, b) -> bool:
        return self.key(a) == self.key(b)


def order_by(key: Callable[[Any], Any] = idx_of) -> KeyOrder:
    return KeyOrder(key)


def eq_by(key: Callable[[Any], Any] = idx_of) -> KeyEq:
    return KeyEq(key)
