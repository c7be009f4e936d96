"""
Counting sort, stable variant.

Time O(n + k), space O(n + k) where k = max - min + 1.

The histogram is turned into cumulative positions, then the input is scanned
right to left and each element is written to `count[v - min] - 1` before that
slot is decremented. The right-to-left scan is what keeps equal elements in
their original relative order.
"""

from __future__ import annotations

from typing import List, MutableSequence

from .common import make_sort_entrypoint, value_bounds, value_range

DISPLAY_NAME = "Counting Sort (Stable)"

__all__ = ["DISPLAY_NAME", "counting_sort_stable", "sort"]


def counting_sort_stable(a: MutableSequence[int]) -> None:
    """Sort `a` ascending in place, preserving the order of equal elements."""
    if len(a) == 0:
        return

    lo, hi = value_bounds(a)
    k = value_range(lo, hi)

    # Histogram
    count = [0] * k
    for v in a:
        count[v - lo] += 1

    # Cumulative positions
    for i in range(1, k):
        count[i] += count[i - 1]

    output: List[int] = [0] * len(a)
    for i in range(len(a) - 1, -1, -1):
        v = a[i]
        count[v - lo] -= 1
        output[count[v - lo]] = v

    a[:] = output


sort = make_sort_entrypoint(counting_sort_stable)
