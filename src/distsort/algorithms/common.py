"""
Shared helpers for the distribution sorts.

Public API (stable):
    SortFn                        # Callable[[MutableSequence[int]], None]
    value_bounds(a) -> (min, max)
    value_range(lo, hi) -> int
    make_sort_entrypoint(inplace_fn) -> sort(a, *, config=None) -> list[int]

Conventions:
- Every algorithm in this package sorts its argument **in place** and returns None.
- The harness-facing `sort(a, *, config=None)` wrapper never mutates `a`; it
  copies, sorts the copy in place and returns the copy.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, MutableSequence, Optional, Sequence, Tuple

SortFn = Callable[[MutableSequence[int]], None]

__all__ = ["SortFn", "value_bounds", "value_range", "make_sort_entrypoint"]


def value_bounds(a: Sequence[int]) -> Tuple[int, int]:
    """
    Return (min, max) of `a` in a single scan.

    The caller must guard against empty input; an empty sequence raises
    ValueError (same as the builtins).
    """
    if len(a) == 0:
        raise ValueError("value_bounds() arg is an empty sequence")
    lo = hi = a[0]
    for v in a:
        if v < lo:
            lo = v
        elif v > hi:
            hi = v
    return lo, hi


def value_range(lo: int, hi: int) -> int:
    """Number of distinct slots between lo and hi inclusive (hi - lo + 1)."""
    return hi - lo + 1


def make_sort_entrypoint(inplace_fn: SortFn) -> Callable[..., List[int]]:
    """Wrap an in-place sort as `sort(a, *, config=None) -> list[int]`."""

    def sort(a: Sequence[int], *, config: Optional[Dict[str, Any]] = None) -> List[int]:
        out = list(a)
        inplace_fn(out)
        return out

    sort.__name__ = "sort"
    sort.__doc__ = f"Return a sorted copy of `a` using {inplace_fn.__name__}; `config` is unused."
    return sort
