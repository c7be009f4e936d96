"""
Post-sort verification used by the timing harness.

Purely diagnostic: a failed check is logged at ERROR level and reported back as
False, but nothing is raised and the run carries on.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .properties import first_nondecreasing_violation_index

logger = logging.getLogger(__name__)

__all__ = ["verify_sorted"]


def verify_sorted(algo_name: str, out: Sequence[int]) -> bool:
    """Return True if `out` is nondecreasing; otherwise log the first violation."""
    i = first_nondecreasing_violation_index(out)
    if i is None:
        return True
    logger.error(
        "%s did not sort correctly! first violation at index %d: %r > %r (n=%d)",
        algo_name,
        i,
        out[i],
        out[i + 1],
        len(out),
    )
    return False
