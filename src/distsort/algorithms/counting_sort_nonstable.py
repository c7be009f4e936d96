"""
Counting sort, non-stable variant.

Builds the same histogram as the stable variant but skips the cumulative-sum
and output-buffer steps: the list is rewritten directly by walking the holes in
ascending order and emitting `i + min` as many times as it was counted.

The values written back are freshly computed ints, not the original elements,
so nothing about relative order survives. For plain integers this is
indistinguishable from a stable sort; it only shows once elements carry more
than their value (see tests/test_stability.py).
"""

from __future__ import annotations

from typing import MutableSequence

from .common import make_sort_entrypoint, value_bounds, value_range

DISPLAY_NAME = "Counting Sort (Non-Stable)"

__all__ = ["DISPLAY_NAME", "counting_sort_nonstable", "sort"]


def counting_sort_nonstable(a: MutableSequence[int]) -> None:
    """Sort `a` ascending in place by re-emitting counted values."""
    if len(a) == 0:
        return

    lo, hi = value_bounds(a)
    k = value_range(lo, hi)

    count = [0] * k
    for v in a:
        count[v - lo] += 1

    idx = 0
    for i in range(k):
        c = count[i]
        while c > 0:
            a[idx] = i + lo
            idx += 1
            c -= 1


sort = make_sort_entrypoint(counting_sort_nonstable)
