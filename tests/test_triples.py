import pytest

from puzzlekit.triples import count_triples


@pytest.mark.parametrize(
    ("n", "expected"),
    [(5, 2), (10, 4)],
    ids=["example-1", "example-2"],
)
def test_count_triples_examples(n, expected):
    assert count_triples(n) == expected


@pytest.mark.parametrize("n", [1, 2, 4])
def test_no_triples_below_five(n):
    assert count_triples(n) == 0


def test_count_is_even():
    for n in range(1, 60):
        assert count_triples(n) % 2 == 0


def test_count_is_non_decreasing():
    counts = [count_triples(n) for n in range(1, 60)]
    assert counts == sorted(counts)