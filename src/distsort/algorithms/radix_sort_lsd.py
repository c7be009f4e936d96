"""
LSD (least significant digit) radix sort, base 10.

Time O(d * (n + b)) where d is the number of decimal digits of max(a) and b = 10.
Space O(n + b).

Each pass is a stable counting sort keyed on one decimal digit; composing
stable passes from low to high significance makes the whole sort stable.

Precondition: every element must be >= 0. This is NOT checked. Negative inputs
produce an unsorted result rather than an exception (floor division and modulo
map negative values onto the wrong digits), and if max(a) < 1 no pass runs at all.

Public API (stable):
    BASE
    counting_sort_by_digit(a, digit_position) -> None
    radix_sort_lsd(a) -> None
    sort(a, *, config=None) -> list[int]
"""

from __future__ import annotations

from typing import List, MutableSequence

from .common import make_sort_entrypoint

BASE = 10
DISPLAY_NAME = "Radix Sort (LSD)"

__all__ = ["BASE", "DISPLAY_NAME", "counting_sort_by_digit", "radix_sort_lsd", "sort"]


def counting_sort_by_digit(a: MutableSequence[int], digit_position: int) -> None:
    """
    Stable counting sort of `a` keyed on the decimal digit at `digit_position`.

    Parameters
    ----------
    a : MutableSequence[int]
        Non-negative integers; sorted in place.
    digit_position : int
        Power of ten selecting the digit (1, 10, 100, ...).
    """
    n = len(a)
    if n == 0:
        return

    count = [0] * BASE
    for v in a:
        count[(v // digit_position) % BASE] += 1

    for i in range(1, BASE):
        count[i] += count[i - 1]

    # Right to left for stability
    output: List[int] = [0] * n
    for i in range(n - 1, -1, -1):
        v = a[i]
        digit = (v // digit_position) % BASE
        count[digit] -= 1
        output[count[digit]] = v

    a[:] = output


def radix_sort_lsd(a: MutableSequence[int]) -> None:
    """Sort non-negative integers in `a` ascending, in place."""
    if len(a) == 0:
        return

    max_value = max(a)

    digit_position = 1
    while max_value // digit_position > 0:
        counting_sort_by_digit(a, digit_position)
        digit_position *= BASE


sort = make_sort_entrypoint(radix_sort_lsd)
