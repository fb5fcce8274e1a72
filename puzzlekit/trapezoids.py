"""Counting trapezoids formed by points in the plane."""

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from math import gcd

MOD = 1_000_000_007


def _pairs_with_different_keys(counts: Counter) -> int:
    """Number of unordered pairs of items whose keys differ."""
    total = 0
    running = 0
    for count in counts.values():
        total += running * count
        running += count
    return total


def count_horizontal_trapezoids(points: Iterable[Sequence[int]]) -> int:
    """Return, modulo 10**9 + 7, the number of trapezoids with two
    horizontal sides that can be built from ``points``."""
    per_level = Counter(p[1] for p in points)
    total = 0
    prefix_pairs = 0
    for count in per_level.values():
        if count < 2:
            continue
        pairs = count * (count - 1) // 2
        total = (total + prefix_pairs * pairs) % MOD
        prefix_pairs = (prefix_pairs + pairs) % MOD
    return total


def _slope(dx: int, dy: int) -> tuple[int, int]:
    if dx == 0:
        return 1, 0
    if dy == 0:
        return 0, 1
    if dx < 0:
        dx, dy = -dx, -dy
    g = gcd(dx, dy)
    return dy // g, dx // g


def count_trapezoids(points: Sequence[Sequence[int]]) -> int:
    """Return the number of distinct trapezoids (quadrilaterals with at
    least one pair of parallel sides) whose corners are among ``points``."""
    coords = [(p[0], p[1]) for p in points]
    if len(coords) < 4:
        return 0

    lines_by_slope: defaultdict[tuple[int, int], Counter[int]] = defaultdict(Counter)
    slopes_by_midpoint: defaultdict[tuple[int, int], Counter[tuple[int, int]]] = (
        defaultdict(Counter)
    )

    for i, (x1, y1) in enumerate(coords):
        for x2, y2 in coords[i + 1:]:
            slope = _slope(x1 - x2, y1 - y2)
            dy, dx = slope
            lines_by_slope[slope][-dy * x1 + dx * y1] += 1
            slopes_by_midpoint[(x1 + x2, y1 + y2)][slope] += 1

    parallel = sum(_pairs_with_different_keys(lines) for lines in lines_by_slope.values())
    parallelograms = sum(
        _pairs_with_different_keys(slopes) for slopes in slopes_by_midpoint.values()
    )
    return parallel - parallelograms