# puzzlekit

This is a small set of pure-Python routines for counting and optimisation puzzles. Each one takes plain Python values such as ints, strings and lists, and returns a number or a list. The package depends only on the standard library.

## Installation

```
pip install puzzlekit
```

## What is inside

| Module | Name | Purpose |
| --- | --- | --- |
| `puzzlekit.battery` | `max_run_time(n, batteries)` | Longest time `n` computers can all run at once on shared, swappable batteries |
| `puzzlekit.odds` | `count_odds(low, high)` | Count of odd integers in `[low, high]` |
| `puzzlekit.triples` | `count_triples(n)` | Ordered triples `(a, b, c)` with `a² + b² = c²` and every value between 1 and `n` |
| `puzzlekit.collisions` | `count_collisions(directions)` | Collisions on a road of `L`/`R`/`S` cars; any character other than `L` or `S` counts as moving right |
| `puzzlekit.partitions` | `count_even_partitions(nums)` | Split points that leave two non-empty halves whose sums differ by an even number |
| `puzzlekit.partitions` | `count_bounded_partitions(nums, k)` | Splits into contiguous segments with max − min ≤ `k` (mod 10⁹+7) |
| `puzzlekit.buildings` | `count_covered_buildings(n, buildings)` | Buildings with another building above, below, left and right of them on an `n` by `n` grid |
| `puzzlekit.buildings` | `Bounds` | Smallest (`low`) and largest (`high`) coordinate seen on one grid line, with `update(x)` and `covers(val)` (strictly between) |
| `puzzlekit.unlocking` | `count_permutations(complexity)` | Unlocking orders (mod 10⁹+7); 0 when some computer is not strictly more complex than computer 0 |
| `puzzlekit.triplets` | `special_triplets(nums)` | Index triples `i < j < k` with `nums[i] == nums[k] == 2 * nums[j]` (mod 10⁹+7) |
| `puzzlekit.coupons` | `validate_coupons(code, business_line, is_active)` | Filter and order coupon codes |
| `puzzlekit.coupons` | `is_valid(s)` | Whether a code is non-empty and uses only letters, digits and underscores |
| `puzzlekit.trapezoids` | `count_horizontal_trapezoids(points)` | Trapezoids with two horizontal sides (mod 10⁹+7) |
| `puzzlekit.trapezoids` | `count_trapezoids(points)` | Distinct trapezoids with at least one pair of parallel sides |

## Examples

```python
from puzzlekit.battery import max_run_time
from puzzlekit.collisions import count_collisions
from puzzlekit.partitions import count_bounded_partitions
from puzzlekit.coupons import validate_coupons
from puzzlekit.trapezoids import count_trapezoids

max_run_time(2, [3, 3, 3])                    # 4
count_collisions("RLRSLL")                    # 5
count_bounded_partitions([9, 4, 1, 3, 7], 4)  # 6

validate_coupons(
    ["SAVE20", "", "PHARMA5", "SAVE@20"],
    ["restaurant", "grocery", "pharmacy", "restaurant"],
    [True, True, True, True],
)                                             # ['PHARMA5', 'SAVE20']

count_trapezoids([[0, 0], [1, 0], [0, 1], [2, 1]])  # 1
```

## Coupon rules

`validate_coupons` keeps a code only when all three of these hold:

- the code is active;
- the code passes `is_valid`;
- its business line is one of `electronics`, `grocery`, `pharmacy` or `restaurant`.

The kept codes come back grouped by business line in that order, and each group is sorted. If `business_line` or `is_active` is shorter than `code`, it raises `ValueError`.

## Scope

puzzlekit is a library only. It has no command-line tool, and it does not read input files or store results. You call its functions from your own Python code.

## Running the tests

```
pip install puzzlekit[test]
pytest
```