"""Counting and optimisation routines for small combinatorial and geometric puzzles."""

__version__ = "0.1.0"

__all__ = [
    "battery",
    "buildings",
    "collisions",
    "coupons",
    "odds",
    "partitions",
    "trapezoids",
    "triples",
    "triplets",
    "unlocking",
]