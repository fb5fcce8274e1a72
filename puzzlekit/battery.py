"""Longest time a group of computers can run on a shared pool of batteries."""

from collections.abc import Iterable


def max_run_time(n: int, batteries: Iterable[int]) -> int:
    """Return the maximum number of minutes ``n`` computers can all run at once.

    Batteries may be swapped between computers freely, but a battery can
    power only one computer at a time.
    """
    charges = list(batteries)
    total = sum(charges)

    def feasible(target: int) -> bool:
        usable = sum(min(charge, target) for charge in charges)
        return usable >= n * target

    low, high = 0, total // n
    while low < high:
        mid = (high - low + 1) // 2 + low
        if feasible(mid):
            low = mid
        else:
            high = mid - 1
    return low