"""
Dataset Generator
=================

Builds the ascending list of magnitudes a chart is drawn over: a fixed
1-2-5 ladder from 1 to 1,000,000, capped at the user's magnitude (but
never below 100), with the user's magnitude spliced in when it lies in
``(0, 1_000_000]``.
"""

from typing import List


LADDER = (
    1, 2, 5, 10, 20, 50,
    100, 200, 500,
    1000, 2000, 5000,
    10000, 20000, 50000,
    100000, 200000, 500000,
    1000000,
)

MIN_CAP = 100
MAX_CAP = 1_000_000


def generate_sizes(user_n: int) -> List[int]:
    """
    Magnitudes to benchmark for a chart around ``user_n``.

    >>> generate_sizes(37)
    [1, 2, 5, 10, 20, 37, 50, 100]
    """
    cap = max(MIN_CAP, min(MAX_CAP, user_n))
    sizes = [p for p in LADDER if p <= cap]

    if 0 < user_n <= MAX_CAP and user_n not in sizes:
        sizes.append(user_n)
        sizes.sort()

    return sizes
