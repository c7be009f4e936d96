"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: a correct, deterministic,
stable total order over integers.

Public API (stable):
    oracle_sort(a: Sequence[int]) -> list[int]
    equals_oracle(a: Sequence[int], out: Sequence[int]) -> bool

The oracle never mutates its input and always returns a **new** list.
"""

from __future__ import annotations

from typing import List, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[int]) -> List[int]:
    """Return a new list holding the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence[int], out: Sequence[int]) -> bool:
    """
    Check whether an algorithm's output matches the oracle exactly.

    Parameters
    ----------
    a : Sequence[int]
        The original input (before sorting).
    out : Sequence[int]
        The algorithm's output to check.

    Returns
    -------
    bool
        True iff `list(out)` equals `oracle_sort(a)`.
    """
    return list(out) == oracle_sort(a)
