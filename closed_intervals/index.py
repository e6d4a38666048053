"""
IntervalIndex: the public face of the closed interval tree.

An index keeps the tree together with the ``order`` relation it was sorted
with and an optional ``eq`` relation. ``order`` is a ``<=``-like predicate,
``eq`` decides when a query value is tied to a stored point and so belongs
to the intervals on both sides of it.
"""

import inspect
import operator
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Generic, Iterable, List, Optional, Sequence, Tuple, TypeVar

from . import tree as _tree
from .interval import NEG_INF, POS_INF, Interval, InvalidArgument, Ordering, is_ray
from .tree import Tree

T = TypeVar('T')
U = TypeVar('U')

Relation = Callable[[T, T], bool]


def _check_relation(name: str, relation) -> None:
    """Raise unless ``relation`` can be called with two positional arguments."""
    message = f"Expecting {name} to be a function of two arguments"
    if not callable(relation):
        raise InvalidArgument(message)
    try:
        inspect.signature(relation).bind(None, None)
    except TypeError:
        raise InvalidArgument(message) from None
    except ValueError:
        # Some builtins carry no signature; trust them.
        pass


def _sort(points: Iterable[T], order: Relation) -> List[T]:
    def _cmp(a, b):
        before, after = order(a, b), order(b, a)
        if before == after:
            return 0
        return -1 if before else 1

    return sorted(points, key=cmp_to_key(_cmp))


@dataclass(frozen=True)
class IntervalIndex(Generic[T]):
    """
    Immutable lookup structure over a sorted set of points.

    The points split the line into adjacent closed intervals plus the rays
    (-inf, first] and [last, +inf). Build one with ``from_points`` or
    ``from_leaf_intervals``.
    """
    tree: Tree[T]
    order: Relation
    eq: Optional[Relation] = None

    # --- Construction ---

    @classmethod
    def from_points(
        cls,
        points: Iterable[T],
        order: Optional[Relation] = None,
        eq: Optional[Relation] = None,
    ) -> 'IntervalIndex[T]':
        """
        Create an index from points in any order.

        Args:
            points: At least two points.
            order: ``<=``-like relation, defaults to ``operator.le``. It should
                hold for equal points so that sorting stays stable.
            eq: Optional equality used by the lookups to detect ties.

        Raises:
            InvalidArgument: fewer than two points, or a relation that does not
                take two arguments.
        """
        if order is None:
            order = operator.le
        _check_relation("order", order)
        if eq is not None:
            _check_relation("eq", eq)

        sorted_points = _sort(points, order)
        if len(sorted_points) < 2:
            raise InvalidArgument("Need at least two points to construct ClosedIntervals")

        return cls(tree=_tree.construct(sorted_points), order=order, eq=eq)

    @classmethod
    def from_leaf_intervals(
        cls,
        leaf_intervals: Sequence[Tuple[T, T]],
        order: Optional[Relation] = None,
        eq: Optional[Relation] = None,
    ) -> 'IntervalIndex[T]':
        """Rebuild an index from the output of ``leaf_intervals()``."""
        if order is None:
            order = operator.le
        _check_relation("order", order)
        if eq is not None:
            _check_relation("eq", eq)

        leaves = [_tree.from_bounds(bounds) for bounds in leaf_intervals]
        return cls(tree=_tree.from_leaf_intervals(leaves), order=order, eq=eq)

    # --- Properties ---

    @property
    def left_bound(self) -> T:
        return self.tree.left_bound

    @property
    def right_bound(self) -> T:
        return self.tree.right_bound

    # --- Lookups ---

    def get_all_intervals(self, value) -> List[Interval]:
        """
        Return every interval containing ``value``, left to right.

        Outside the covered range the matching ray comes first. A value tied to
        the first or last point also gets the adjacent leaf interval(s); a value
        strictly outside gets only the ray.
        """
        left, right = self.tree.left_bound, self.tree.right_bound

        if self.order(value, left):
            if not self.order(left, value):
                return [(NEG_INF, left)]
            ray = [(NEG_INF, left)]
        elif self.order(right, value):
            if not self.order(value, right):
                return [(right, POS_INF)]
            ray = [(right, POS_INF)]
        else:
            ray = []

        return ray + _tree.get_all_intervals(self.tree, value, self.eq, self.order)

    def get_interval(self, value) -> Interval:
        """
        Return the single interval ``value`` belongs to.

        Raises:
            InvalidArgument: ``value`` ties an interior cut point and lies in
                several intervals; use ``get_all_intervals`` for such values.
        """
        intervals = self.get_all_intervals(value)
        if len(intervals) == 1:
            return intervals[0]

        if is_ray(intervals[0]):
            return intervals[0]

        raise InvalidArgument(
            f"{value!r} lies in {len(intervals)} intervals; use get_all_intervals"
        )

    def get_all_intervals_by(self, navigate: Callable[[T], Ordering]) -> List[Interval]:
        """
        Lookup steered by ``navigate(point) -> Ordering``.

        ``navigate`` reports where the sought value lies relative to a stored
        point. The outer bounds produce rays the same way ``get_all_intervals``
        does.
        """
        left, right = self.tree.left_bound, self.tree.right_bound

        at_left = navigate(left)
        if at_left is Ordering.LESS:
            return [(NEG_INF, left)]
        at_right = navigate(right)
        if at_right is Ordering.GREATER:
            return [(right, POS_INF)]

        if at_left is Ordering.EQUAL:
            ray = [(NEG_INF, left)]
        elif at_right is Ordering.EQUAL:
            ray = [(right, POS_INF)]
        else:
            ray = []

        return ray + _tree.get_all_intervals_by(self.tree, navigate)

    # --- Serialization and transforms ---

    def leaf_intervals(self) -> List[Tuple[T, T]]:
        """All elementary intervals between adjacent points, left to right."""
        return _tree.leaf_intervals(self.tree)

    def to_list(self) -> List[T]:
        """The sorted points; ``from_points(index.to_list())`` gives back an equal index."""
        return _tree.to_list(self.tree)

    def map(self, mapper: Callable[[T], U]) -> 'IntervalIndex[U]':
        """
        Return a new index with ``mapper`` applied to every stored point.

        The shape is kept and nothing is re-sorted, so ``mapper`` must preserve
        the order of the points.
        """
        return IntervalIndex(tree=_tree.map_points(self.tree, mapper), order=self.order, eq=self.eq)
