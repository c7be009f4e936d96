"""
Reference baseline: Python's built-in `list.sort()` (Timsort).

Not one of the distribution sorts; it gives the benchmark tables a
comparison row against a general-purpose comparison sort.
"""

from __future__ import annotations

from typing import MutableSequence

from .common import make_sort_entrypoint

DISPLAY_NAME = "Built-in Timsort"

__all__ = ["DISPLAY_NAME", "builtin_timsort", "sort"]


def builtin_timsort(a: MutableSequence[int]) -> None:
    a[:] = sorted(a)


sort = make_sort_entrypoint(builtin_timsort)
