"""Counting collisions of cars on a one-lane road."""


def count_collisions(directions: str) -> int:
    """Return the number of collisions for cars described by ``directions``.

    Each character is ``'L'`` (moving left), ``'R'`` (moving right) or
    ``'S'`` (stationary); any character other than ``'L'`` or ``'S'`` is
    treated as moving right.
    """
    count = 0
    previous = "L"
    moving_right = 0

    for car in directions:
        if car == "L":
            if previous == "S":
                count += 1
            elif previous == "R":
                count += 1 + moving_right
                moving_right = 0
                previous = "S"
        elif car == "S":
            if previous == "R":
                count += moving_right
                moving_right = 0
            previous = "S"
        else:
            moving_right += 1
            previous = "R"
    return count