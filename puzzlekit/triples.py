"""Counting Pythagorean triples with bounded sides."""

from math import isqrt


def count_triples(n: int) -> int:
    """Return the number of ordered triples ``(a, b, c)`` with ``a² + b² = c²``
    and ``1 <= a, b, c <= n``."""
    limit = n * n
    unordered = 0
    for a in range(1, n):
        for b in range(1, a):
            square = a * a + b * b
            if square > limit:
                break
            if isqrt(square) ** 2 == square:
                unordered += 1
    return unordered * 2