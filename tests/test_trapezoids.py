import pytest

from puzzlekit.trapezoids import count_horizontal_trapezoids, count_trapezoids

MOD = 1_000_000_007


@pytest.mark.parametrize(
    ("points", "expected"),
    [
        ([[1, 0], [2, 0], [3, 0], [2, 2], [3, 2]], 3),
        ([[0, 0], [1, 0], [0, 1], [2, 1]], 1),
    ],
    ids=["example-1", "example-2"],
)
def test_horizontal_official_examples(points, expected):
    assert count_horizontal_trapezoids(points) == expected


def test_horizontal_large_counts_are_reduced():
    size = 40_000
    points = [[0, 1]] * size + [[0, 2]] * size
    pairs = size * (size - 1) // 2
    assert count_horizontal_trapezoids(points) == (pairs % MOD) * (pairs % MOD) % MOD


def test_horizontal_single_level_has_none():
    assert count_horizontal_trapezoids([[0, 0], [1, 0], [2, 0]]) == 0


@pytest.mark.parametrize(
    ("points", "expected"),
    [
        ([[-3, 2], [3, 0], [2, 3], [3, 2], [2, -3]], 2),
        ([[0, 0], [1, 0], [0, 1], [2, 1]], 1),
        ([[0, 0], [0, 1], [1, 0], [1, 1]], 1),
        ([[0, -1], [0, 1], [0, 2], [0, -2]], 0),
    ],
    ids=["example-1", "example-2", "parallelogram", "collinear-shared-midpoint"],
)
def test_general_cases(points, expected):
    assert count_trapezoids(points) == expected


def test_general_needs_four_points():
    assert count_trapezoids([[0, 0], [1, 0], [0, 1]]) == 0


def test_general_is_independent_of_point_order():
    points = [[-3, 2], [3, 0], [2, 3], [3, 2], [2, -3]]
    assert count_trapezoids(list(reversed(points))) == 2