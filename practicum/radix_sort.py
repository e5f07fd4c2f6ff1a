"""LSD radix sort of integers, one byte per pass over 32 bits."""

from __future__ import annotations

from itertools import chain

_BITS = 8
_BASE = 1 << _BITS
_MASK = _BASE - 1
_PASSES = 32 // _BITS


def make_sort(array: list[int] | None) -> None:
    """Sort a list of integers in place.

    Keys are the low 32 bits in two's complement, so negative values are
    ordered after non-negative ones, as unsigned 32-bit numbers are.
    """
    if array is None:
        raise ValueError("Input array parameter is null")
    if not array:
        return
    for rank in range(_PASSES):
        shift = _BITS * rank
        buckets: list[list[int]] = [[] for _ in range(_BASE)]
        for value in array:
            buckets[(value >> shift) & _MASK].append(value)
        array[:] = chain.from_iterable(buckets)


def get_sorted(values: list[int]) -> list[int]:
    """Return a sorted copy of the given integers."""
    result = list(values)
    make_sort(result)
    return result