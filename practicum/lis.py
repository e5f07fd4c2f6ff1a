"""Longest strictly increasing subsequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def longest_increasing_subsequence(array: Sequence[int]) -> list[int]:
    """Return a longest strictly increasing subsequence of ``array``.

    Among all longest increasing subsequences the lexicographically
    smallest one is returned.
    """
    # tails[j] is the smallest value ending an increasing run of length j+1
    tails: list[int] = []
    tail_index: list[int] = []
    previous: list[int | None] = []

    for i, value in enumerate(array):
        j = bisect_left(tails, value)
        previous.append(tail_index[j - 1] if j > 0 else None)
        if j == len(tails):
            tails.append(value)
            tail_index.append(i)
        else:
            tails[j] = value
            tail_index[j] = i

    result: list[int] = []
    current = tail_index[-1] if tail_index else None
    while current is not None:
        result.append(array[current])
        current = previous[current]
    result.reverse()
    return result