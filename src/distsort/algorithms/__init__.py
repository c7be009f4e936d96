"""
Algorithms package public API.

Every algorithm sorts a list of ints in place and returns None. The registry
maps the config-facing names to those functions:

    from distsort.algorithms import ALGORITHMS, get_algorithm
    get_algorithm("radix_sort_lsd")(data)

Each module additionally exposes `DISPLAY_NAME` and a non-mutating
`sort(a, *, config=None) -> list[int]`.
"""

from typing import Dict

from .bucket_sort import DISPLAY_NAME as _BUCKET_NAME, bucket_sort, insertion_sort
from .builtin_timsort import DISPLAY_NAME as _TIMSORT_NAME, builtin_timsort
from .common import SortFn
from .counting_sort_nonstable import DISPLAY_NAME as _CS_NONSTABLE_NAME, counting_sort_nonstable
from .counting_sort_stable import DISPLAY_NAME as _CS_STABLE_NAME, counting_sort_stable
from .pigeonhole_sort import DISPLAY_NAME as _PIGEONHOLE_NAME, pigeonhole_sort
from .radix_sort_lsd import DISPLAY_NAME as _RADIX_NAME, counting_sort_by_digit, radix_sort_lsd

# Order here is the row order of benchmark tables.
ALGORITHMS: Dict[str, SortFn] = {
    "counting_sort_stable": counting_sort_stable,
    "counting_sort_nonstable": counting_sort_nonstable,
    "radix_sort_lsd": radix_sort_lsd,
    "pigeonhole_sort": pigeonhole_sort,
    "bucket_sort": bucket_sort,
    "builtin_timsort": builtin_timsort,
}

DISPLAY_NAMES: Dict[str, str] = {
    "counting_sort_stable": _CS_STABLE_NAME,
    "counting_sort_nonstable": _CS_NONSTABLE_NAME,
    "radix_sort_lsd": _RADIX_NAME,
    "pigeonhole_sort": _PIGEONHOLE_NAME,
    "bucket_sort": _BUCKET_NAME,
    "builtin_timsort": _TIMSORT_NAME,
}

# The five distribution sorts (excludes the builtin baseline).
CORE_ALGORITHMS = (
    "counting_sort_stable",
    "counting_sort_nonstable",
    "radix_sort_lsd",
    "pigeonhole_sort",
    "bucket_sort",
)

STABLE_ALGORITHMS = ("counting_sort_stable", "radix_sort_lsd", "pigeonhole_sort")


def get_algorithm(name: str) -> SortFn:
    """Look up an in-place sort by registry name; KeyError lists the known names."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise KeyError(f"Unknown algorithm {name!r}. Known: {list(ALGORITHMS)}") from None


__all__ = [
    "ALGORITHMS",
    "CORE_ALGORITHMS",
    "DISPLAY_NAMES",
    "STABLE_ALGORITHMS",
    "SortFn",
    "get_algorithm",
    "bucket_sort",
    "builtin_timsort",
    "counting_sort_by_digit",
    "counting_sort_nonstable",
    "counting_sort_stable",
    "insertion_sort",
    "pigeonhole_sort",
    "radix_sort_lsd",
]
