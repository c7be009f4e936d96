"""
Property helpers for validating sorting results.

Public API (stable):
    is_nondecreasing(xs: Sequence[int]) -> bool
    first_nondecreasing_violation_index(xs: Sequence[int]) -> int | None
    is_permutation(a: Sequence[int], b: Sequence[int]) -> bool
    permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> dict[int, int]
    assert_no_mutation(before: Sequence[int], after: Sequence[int]) -> None

Notes
-----
- Values alone cannot reveal stability: equal ints are indistinguishable.
  Stability checks live in `distsort.validate.stability` and work on
  tagged ints instead.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Optional, Sequence


__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
]


def is_nondecreasing(xs: Sequence[int]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[int]) -> Optional[int]:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    `verify_sorted` uses this to name the offending pair in its log line.
    """
    return next((i for i, (x, y) in enumerate(zip(xs, xs[1:])) if x > y), None)


def permutation_counter_diff(a: Sequence[int], b: Sequence[int]) -> Dict[int, int]:
    """
    Value -> (count in `a` - count in `b`), listing only values whose counts differ.

    An empty dict means `b` is a rearrangement of `a`.
    """
    diff = Counter(a)
    diff.subtract(b)
    return {v: d for v, d in diff.items() if d}


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """True iff `a` and `b` hold the same multiset of values."""
    return Counter(a) == Counter(b)


def assert_no_mutation(before: Sequence[int], after: Sequence[int]) -> None:
    """
    Raise AssertionError unless `after` still equals the `before` snapshot.

    Used on a baseline dataset after a by-value call, to show the algorithm
    only ever saw a copy. The message names the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(f"Input mutated: length changed from {len(before)} to {len(after)}")
    i = next((i for i, (x, y) in enumerate(zip(before, after)) if x != y), None)
    if i is not None:
        raise AssertionError(f"Input mutated at index {i}: before={before[i]}, after={after[i]}")
