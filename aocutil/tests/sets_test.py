import pytest

from aocutil.geometry import Coordinate
from aocutil.sets import abs_diff, intersect_all


def test_intersect_all():
    assert intersect_all([[3, 1, 2], [2, 3], [3, 2, 9]]) == [2, 3]


def test_intersect_all_strings():
    # Rucksack-style: the one character every line has in common
    assert intersect_all([
        "vJrwpWtwJgWrhcsFMMfFFhFp",
        "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
        "PmmdzqPrVvPwwTWBwg",
    ]) == ["r"]


def test_intersect_all_single():
    assert intersect_all([[5, 1, 5]]) == [1, 5]


def test_intersect_all_disjoint():
    assert intersect_all([[1, 2], [3, 4]]) == []


def test_intersect_all_coordinates():
    a = Coordinate(3, 3).points_between(Coordinate(3, 7))
    b = Coordinate(0, 5).points_between(Coordinate(6, 5))
    assert intersect_all([a, b]) == [Coordinate(3, 5)]


def test_intersect_all_empty():
    with pytest.raises(ValueError):
        intersect_all([])


def test_abs_diff():
    assert abs_diff(3, 10) == 7
    assert abs_diff(10, 3) == 7
    assert abs_diff(4, 4) == 0
