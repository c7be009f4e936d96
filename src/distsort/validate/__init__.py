"""
Validation utilities public API.

Re-exports:
    - Oracle:
        ORACLE_NAME
        oracle_sort
        equals_oracle

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        assert_no_mutation

    - Stability:
        TaggedInt
        tag_values
        first_stability_violation
        is_stable

    - Verification (logs, never raises):
        verify_sorted
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_no_mutation,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    permutation_counter_diff,
)
from .stability import TaggedInt, first_stability_violation, is_stable, tag_values
from .verify import verify_sorted

__all__ = [
    "ORACLE_NAME",
    "oracle_sort",
    "equals_oracle",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "TaggedInt",
    "tag_values",
    "first_stability_violation",
    "is_stable",
    "verify_sorted",
]
