"""
Bucket sort with proportional bucket mapping.

Average O(n + k), worst case O(n^2) when values cluster into a few buckets,
since each bucket is finished with an insertion sort.

- Bucket count: max(1, n).
- Bucket index for v: ((v - min) * (buckets - 1)) // (max - min + 1),
  clamped to buckets - 1.
- Buckets are concatenated in ascending index order.

If min == max the input is uniform and the function returns without
distributing anything.

Stability: the mapping depends only on the value, so equal elements share a
bucket and insertion sort keeps their order. That is an observation, not a
guarantee this module makes.
"""

from __future__ import annotations

from typing import List, MutableSequence

from .common import make_sort_entrypoint, value_bounds, value_range

DISPLAY_NAME = "Bucket Sort"

__all__ = ["DISPLAY_NAME", "bucket_index", "insertion_sort", "bucket_sort", "sort"]


def insertion_sort(bucket: MutableSequence[int]) -> None:
    """In-place insertion sort; shifts only strictly greater elements."""
    for i in range(1, len(bucket)):
        key = bucket[i]
        j = i - 1
        while j >= 0 and bucket[j] > key:
            bucket[j + 1] = bucket[j]
            j -= 1
        bucket[j + 1] = key


def bucket_index(value: int, lo: int, k: int, bucket_count: int) -> int:
    """Proportional bucket index of `value` within a range of size `k` starting at `lo`."""
    idx = ((value - lo) * (bucket_count - 1)) // k
    return min(idx, bucket_count - 1)


def bucket_sort(a: MutableSequence[int]) -> None:
    """Sort `a` ascending in place."""
    if len(a) == 0:
        return

    lo, hi = value_bounds(a)
    if lo == hi:
        return

    bucket_count = max(1, len(a))
    k = value_range(lo, hi)

    buckets: List[List[int]] = [[] for _ in range(bucket_count)]
    for v in a:
        buckets[bucket_index(v, lo, k, bucket_count)].append(v)

    for bucket in buckets:
        insertion_sort(bucket)

    idx = 0
    for bucket in buckets:
        for v in bucket:
            a[idx] = v
            idx += 1


sort = make_sort_entrypoint(bucket_sort)
