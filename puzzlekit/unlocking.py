"""Counting orders in which computers can be unlocked."""

from collections.abc import Sequence

MOD = 1_000_000_007


def count_permutations(complexity: Sequence[int]) -> int:
    """Return, modulo 10**9 + 7, the number of unlocking orders.

    Computer 0 starts unlocked. Every other computer must be strictly more
    complex than computer 0, otherwise no order works and 0 is returned.
    """
    if not complexity:
        return 1
    root, *rest = complexity
    ways = 1
    for position, value in enumerate(rest, start=1):
        if value <= root:
            return 0
        ways = ways * position % MOD
    return ways