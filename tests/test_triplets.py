import pytest

from puzzlekit.triplets import special_triplets


@pytest.mark.parametrize(
    ("nums", "expected"),
    [
        ([6, 3, 6], 1),
        ([0, 1, 0, 0], 1),
    ],
    ids=["example-1", "example-2"],
)
def test_official_examples(nums, expected):
    assert special_triplets(nums) == expected


def test_too_short_has_no_triplets():
    assert special_triplets([4, 2]) == 0


def test_order_matters():
    assert special_triplets([3, 6, 6]) == 0


def test_multiple_choices_are_counted():
    # Two choices for the left 8, one middle 4, two choices for the right 8.
    assert special_triplets([8, 8, 4, 8, 8]) == 4


def test_all_zeros():
    assert special_triplets([0, 0, 0, 0]) == 4