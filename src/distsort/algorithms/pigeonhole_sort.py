"""
Pigeonhole sort.

Time O(n + k), space O(n + k) where k = max - min + 1.

One hole per distinct value in [min, max]. Elements are appended to their hole
in input order and the holes are concatenated back, so the sort is stable.
Memory grows with the value range regardless of n, which makes it a poor fit
for sparse, wide-range data.
"""

from __future__ import annotations

from typing import List, MutableSequence

from .common import make_sort_entrypoint, value_bounds, value_range

DISPLAY_NAME = "Pigeonhole Sort"

__all__ = ["DISPLAY_NAME", "pigeonhole_sort", "sort"]


def pigeonhole_sort(a: MutableSequence[int]) -> None:
    if len(a) == 0:
        return

    lo, hi = value_bounds(a)
    holes: List[List[int]] = [[] for _ in range(value_range(lo, hi))]

    for v in a:
        holes[v - lo].append(v)

    idx = 0
    for hole in holes:
        for v in hole:
            a[idx] = v
            idx += 1


sort = make_sort_entrypoint(pigeonhole_sort)
