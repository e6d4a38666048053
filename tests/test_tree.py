import pytest

from closed_intervals import tree
from closed_intervals.compare import navigator
from closed_intervals.interval import InvalidArgument, Ordering
from closed_intervals.tree import Leaf, Node


def check_invariants(node):
    if isinstance(node, Leaf):
        return
    assert node.left_bound == node.left.left_bound
    assert node.right_bound == node.right.right_bound
    assert node.cut == node.left.right_bound == node.right.left_bound
    check_invariants(node.left)
    check_invariants(node.right)


def test_construct_two_points_is_leaf():
    assert tree.construct([1, 2]) == Leaf(1, 2)


def test_construct_three_points():
    assert tree.construct([1, 2, 3]) == Node(
        cut=2, left=Leaf(1, 2), right=Leaf(2, 3), left_bound=1, right_bound=3
    )


def test_construct_duplicates_pivot():
    assert tree.construct([1, 2, 3, 4, 5]) == Node(
        cut=3,
        left=Node(cut=2, left=Leaf(1, 2), right=Leaf(2, 3), left_bound=1, right_bound=3),
        right=Node(cut=4, left=Leaf(3, 4), right=Leaf(4, 5), left_bound=3, right_bound=5),
        left_bound=1,
        right_bound=5,
    )


@pytest.mark.parametrize("size", [2, 3, 4, 7, 16, 33])
def test_construct_invariants(size):
    check_invariants(tree.construct(list(range(size))))


@pytest.mark.parametrize("points", [[], [1]])
def test_construct_needs_two_points(points):
    with pytest.raises(InvalidArgument):
        tree.construct(points)


def test_leaf_intervals_and_to_list():
    t = tree.construct([1, 2, 5, 9])
    assert tree.leaf_intervals(t) == [(1, 2), (2, 5), (5, 9)]
    assert tree.to_list(t) == [1, 2, 5, 9]
    assert tree.left_bound(t) == 1
    assert tree.right_bound(t) == 9


def test_from_bounds():
    assert tree.from_bounds((3, 4)) == Leaf(3, 4)


@pytest.mark.parametrize("bounds", [(1,), (1, 2, 3), 5, None])
def test_from_bounds_rejects_non_pairs(bounds):
    with pytest.raises(InvalidArgument, match="pair"):
        tree.from_bounds(bounds)


@pytest.mark.parametrize("size", range(2, 40))
def test_from_leaf_intervals_rebuilds_same_shape(size):
    original = tree.construct(list(range(size)))
    leaves = [tree.from_bounds(bounds) for bounds in tree.leaf_intervals(original)]
    assert tree.from_leaf_intervals(leaves) == original


def test_from_leaf_intervals_single_leaf():
    assert tree.from_leaf_intervals([Leaf(1, 2)]) == Leaf(1, 2)


def test_from_leaf_intervals_rejects_gap():
    with pytest.raises(InvalidArgument, match="shared cut point"):
        tree.from_leaf_intervals([Leaf(1, 2), Leaf(3, 4)])


def test_from_leaf_intervals_rejects_gap_deep_in_tree():
    leaves = [Leaf(1, 2), Leaf(3, 4), Leaf(4, 5), Leaf(5, 6), Leaf(6, 7)]
    with pytest.raises(InvalidArgument):
        tree.from_leaf_intervals(leaves)


def test_from_leaf_intervals_rejects_empty():
    with pytest.raises(InvalidArgument):
        tree.from_leaf_intervals([])


def test_map_points_keeps_shape():
    t = tree.construct([1, 2, 3, 4, 5])
    mapped = tree.map_points(t, lambda x: x * 10)
    assert mapped == tree.construct([10, 20, 30, 40, 50])
    assert t == tree.construct([1, 2, 3, 4, 5])


def test_get_all_intervals_single_path_without_eq():
    t = tree.construct([1, 2, 3, 4])
    order = lambda a, b: a <= b
    assert tree.get_all_intervals(t, 2.5, None, order) == [(2, 3)]
    # a tie on a cut follows the order relation
    assert tree.get_all_intervals(t, 2, None, order) == [(1, 2)]
    assert tree.get_all_intervals(t, 2, None, lambda a, b: a < b) == [(2, 3)]


def test_get_all_intervals_branches_on_tie():
    t = tree.construct([1, 2, 3, 3, 4])
    order = lambda a, b: a <= b
    eq = lambda a, b: a == b
    assert tree.get_all_intervals(t, 3, eq, order) == [(2, 3), (3, 3), (3, 4)]


def test_get_all_intervals_by():
    t = tree.construct([1, 2, 3, 3, 4])
    assert tree.get_all_intervals_by(t, navigator(2.5)) == [(2, 3)]
    assert tree.get_all_intervals_by(t, navigator(3)) == [(2, 3), (3, 3), (3, 4)]
    assert tree.get_all_intervals_by(t, lambda point: Ordering.LESS) == [(1, 2)]
    assert tree.get_all_intervals_by(t, lambda point: Ordering.GREATER) == [(3, 4)]


def test_get_all_intervals_by_rejects_bad_navigation():
    t = tree.construct([1, 2, 3])
    with pytest.raises(InvalidArgument):
        tree.get_all_intervals_by(t, lambda point: None)
