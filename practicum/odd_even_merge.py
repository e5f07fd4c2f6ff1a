"""Batcher's odd-even merge sort and a helper for random test data."""

from __future__ import annotations

import random


def odd_even_merge_sort(array: list[int]) -> None:
    """Sort a list in place with Batcher's odd-even merge network."""
    size = len(array)
    p = 1
    while p < size:
        k = p
        while k > 0:
            for j in range(k % p, size - k, 2 * k):
                for i in range(size - j - k):
                    low, high = i + j, i + j + k
                    if low // (2 * p) == high // (2 * p) and array[low] > array[high]:
                        array[low], array[high] = array[high], array[low]
            k //= 2
        p *= 2


def random_array(size: int) -> list[int]:
    """Return ``size`` random integers from 0 to 9."""
    if size < 0:
        raise ValueError("size must not be negative")
    return [random.randrange(10) for _ in range(size)]