"""Counting ways to split an array into parts."""

from collections import deque
from collections.abc import Sequence

MOD = 1_000_000_007


def count_even_partitions(nums: Sequence[int]) -> int:
    """Return how many split points leave two non-empty halves whose sums
    differ by an even number."""
    if len(nums) < 2:
        return 0
    if sum(nums) % 2:
        return 0
    return len(nums) - 1


def count_bounded_partitions(nums: Sequence[int], k: int) -> int:
    """Return, modulo 10**9 + 7, the number of ways to split ``nums`` into
    contiguous segments whose maximum minus minimum is at most ``k``."""
    ways = [1] + [0] * len(nums)
    min_queue: deque[int] = deque()
    max_queue: deque[int] = deque()
    window_sum = 0
    left = 0

    for i, x in enumerate(nums):
        window_sum = (window_sum + ways[i]) % MOD

        while min_queue and x <= nums[min_queue[-1]]:
            min_queue.pop()
        min_queue.append(i)

        while max_queue and x >= nums[max_queue[-1]]:
            max_queue.pop()
        max_queue.append(i)

        while nums[max_queue[0]] - nums[min_queue[0]] > k:
            window_sum = (window_sum - ways[left]) % MOD
            left += 1
            if min_queue[0] < left:
                min_queue.popleft()
            if max_queue[0] < left:
                max_queue.popleft()

        ways[i + 1] = window_sum

    return ways[-1]