"""Counting odd numbers in a closed interval."""


def count_odds(low: int, high: int) -> int:
    """Return how many odd integers lie in ``[low, high]``."""
    if low % 2 == 0 and high % 2 == 0:
        return (high - low) // 2
    return (high - low) // 2 + 1