"""Counting triplets whose outer values are twice the middle one."""

from collections import Counter
from collections.abc import Iterable

MOD = 1_000_000_007


def special_triplets(nums: Iterable[int]) -> int:
    """Return, modulo 10**9 + 7, the number of index triples ``i < j < k``
    with ``nums[i] == nums[k] == 2 * nums[j]``."""
    seen: Counter[int] = Counter()
    pairs: Counter[int] = Counter()
    total = 0
    for num in nums:
        if num % 2 == 0:
            total += pairs[num // 2]
        pairs[num] += seen[num * 2]
        seen[num] += 1
    return total % MOD