"""
Balanced tree of adjacent closed intervals.

The tree is built once from a sorted point sequence and never changes
afterwards. Leaves hold one elementary interval between two neighbouring
points. Internal nodes hold the cut point shared by their two children:
the cut is the right bound of the left subtree and at the same time the
left bound of the right subtree.

Everything here is a plain function over ``Leaf``/``Node`` values. The order
and equality relations are passed in by the caller (see ``IntervalIndex``),
so trees stay free of behaviour and compare by value.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

from .interval import InvalidArgument, Ordering

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True, slots=True)
class Leaf(Generic[T]):
    """The elementary closed interval [left_bound, right_bound]."""
    left_bound: T
    right_bound: T


@dataclass(frozen=True, slots=True)
class Node(Generic[T]):
    """Two adjacent subtrees joined at ``cut``."""
    cut: T
    left: 'Tree[T]'
    right: 'Tree[T]'
    left_bound: T
    right_bound: T


Tree = Union[Leaf[T], Node[T]]


# --- Construction ---

def construct(sorted_points: Sequence[T]) -> Tree[T]:
    """
    Build a tree from points already sorted by the index order.

    The middle point goes into both halves so that it becomes the shared
    boundary of the two subtrees.
    """
    if len(sorted_points) < 2:
        raise InvalidArgument("Need at least two points to construct a tree")
    if len(sorted_points) == 2:
        return Leaf(sorted_points[0], sorted_points[1])

    middle = len(sorted_points) // 2
    left = construct(sorted_points[:middle + 1])
    right = construct(sorted_points[middle:])
    return Node(
        cut=sorted_points[middle],
        left=left,
        right=right,
        left_bound=left.left_bound,
        right_bound=right.right_bound,
    )


def from_bounds(bounds: Tuple[T, T]) -> Leaf[T]:
    """Create a leaf from a (left, right) pair."""
    try:
        left, right = bounds
    except (TypeError, ValueError):
        raise InvalidArgument(f"Expected a (left, right) pair, got {bounds!r}") from None
    return Leaf(left, right)


def from_leaf_intervals(leaves: Sequence[Tree[T]]) -> Tree[T]:
    """
    Join adjacent leaves back into a tree.

    Splits at ceil(n / 2), which gives the same shape ``construct`` produces
    for the corresponding point list.
    """
    if not leaves:
        raise InvalidArgument("Need at least one leaf interval to construct a tree")
    if len(leaves) == 1:
        return leaves[0]

    middle = (len(leaves) + 1) // 2
    left_half, right_half = leaves[:middle], leaves[middle:]

    cut = left_half[-1].right_bound
    if cut != right_half[0].left_bound:
        raise InvalidArgument(
            f"Expected a shared cut point between the two halves, "
            f"got {cut!r} and {right_half[0].left_bound!r}"
        )

    left = from_leaf_intervals(left_half)
    right = from_leaf_intervals(right_half)
    return Node(
        cut=cut,
        left=left,
        right=right,
        left_bound=left.left_bound,
        right_bound=right.right_bound,
    )


# --- Traversal ---

def iter_leaves(tree: Tree[T]) -> Iterator[Leaf[T]]:
    """Yield the leaves from left to right."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def leaf_intervals(tree: Tree[T]) -> List[Tuple[T, T]]:
    return [(leaf.left_bound, leaf.right_bound) for leaf in iter_leaves(tree)]


def to_list(tree: Tree[T]) -> List[T]:
    """The sorted points the tree was built from."""
    intervals = leaf_intervals(tree)
    return [left for left, _ in intervals] + [intervals[-1][1]]


def left_bound(tree: Tree[T]) -> T:
    return tree.left_bound


def right_bound(tree: Tree[T]) -> T:
    return tree.right_bound


def map_points(tree: Tree[T], mapper: Callable[[T], U]) -> Tree[U]:
    """
    Apply ``mapper`` to every bound and cut, keeping the shape.

    ``mapper`` has to preserve the order the tree was built with, otherwise
    lookups on the result are meaningless.
    """
    if isinstance(tree, Leaf):
        return Leaf(mapper(tree.left_bound), mapper(tree.right_bound))
    return Node(
        cut=mapper(tree.cut),
        left=map_points(tree.left, mapper),
        right=map_points(tree.right, mapper),
        left_bound=mapper(tree.left_bound),
        right_bound=mapper(tree.right_bound),
    )


# --- Search Methods ---

def get_all_intervals(
    tree: Tree[T],
    value,
    eq: Optional[Callable[[T, T], bool]],
    order: Callable[[T, T], bool],
) -> List[Tuple[T, T]]:
    """
    Collect every leaf interval containing ``value``.

    A value tied to a cut (``eq``) belongs to both neighbouring subtrees,
    otherwise ``order`` picks one side. Results come out left to right.
    """
    result = []

    def _search(node):
        if isinstance(node, Leaf):
            result.append((node.left_bound, node.right_bound))
        elif eq is not None and eq(value, node.cut):
            _search(node.left)
            _search(node.right)
        elif order(value, node.cut):
            _search(node.left)
        else:
            _search(node.right)

    _search(tree)
    return result


def get_all_intervals_by(
    tree: Tree[T],
    navigate: Callable[[T], Ordering],
) -> List[Tuple[T, T]]:
    """
    Like ``get_all_intervals`` but steered by a single function.

    ``navigate(point)`` tells where the sought value lies relative to
    ``point``: EQUAL descends both sides, LESS the left, GREATER the right.
    """
    result = []

    def _search(node):
        if isinstance(node, Leaf):
            result.append((node.left_bound, node.right_bound))
            return
        direction = navigate(node.cut)
        if direction is Ordering.EQUAL:
            _search(node.left)
            _search(node.right)
        elif direction is Ordering.LESS:
            _search(node.left)
        elif direction is Ordering.GREATER:
            _search(node.right)
        else:
            raise InvalidArgument(f"Navigation function returned {direction!r}, expected an Ordering")

    _search(tree)
    return result
