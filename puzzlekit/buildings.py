"""Counting buildings covered on all four sides on a grid."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass
class Bounds:
    """Smallest and largest coordinate seen along one grid line."""

    low: float = float("inf")
    high: float = float("-inf")

    def update(self, x: int) -> None:
        """Widen the bounds to include ``x``."""
        self.high = max(self.high, x)
        self.low = min(self.low, x)

    def covers(self, val: int) -> bool:
        """Return whether ``val`` lies strictly between the bounds."""
        return self.low < val < self.high


def count_covered_buildings(n: int, buildings: Iterable[Sequence[int]]) -> int:
    """Return how many buildings have another building above, below, left
    and right of them on an ``n`` by ``n`` grid."""
    positions = [(p[0], p[1]) for p in buildings]
    rows = [Bounds() for _ in range(n + 1)]
    cols = [Bounds() for _ in range(n + 1)]

    for x, y in positions:
        rows[x].update(y)
        cols[y].update(x)

    return sum(1 for x, y in positions if rows[x].covers(y) and cols[y].covers(x))