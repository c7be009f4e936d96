"""
Correctness tests for the distribution sorts against the oracle (Python's built-in sorted).

Each algorithm module exposes:
    <algo>(a) -> None                    # in-place
    sort(a, *, config=None) -> list[int] # non-mutating wrapper

What we check:
- Output exactly matches the oracle (strongest guarantee)
- Nondecreasing order (diagnostic)
- Permutation preservation (no lost/duplicated elements)
- No input mutation through `sort()`; in-place mutation through the core function
- Determinism (same input -> same output)

Radix sort is only exercised on non-negative inputs (its documented precondition).
"""

from __future__ import annotations

import importlib
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from distsort.algorithms import ALGORITHMS, CORE_ALGORITHMS, get_algorithm
from distsort.datasets import DEMO_ARRAY
from distsort.validate import is_nondecreasing, is_permutation, oracle_sort

SIGNED_SAFE = [name for name in CORE_ALGORITHMS if name != "radix_sort_lsd"]
# Sorts whose memory does not grow with the value range
RANGE_FREE = ["radix_sort_lsd", "bucket_sort", "builtin_timsort"]


def _sort_fn(name: str):
    return importlib.import_module(f"distsort.algorithms.{name}").sort


# ------------------------- helpers ------------------------- #

def _check_one(name: str, a: List[int]) -> None:
    """Common assertion bundle for one input."""
    sort = _sort_fn(name)

    a_before = list(a)
    out = sort(a, config={})

    assert a == a_before, f"{name}: sort() must not mutate its input"
    assert out == oracle_sort(a), f"{name}: output must exactly match the oracle"
    assert is_nondecreasing(out), f"{name}: output is not nondecreasing"
    assert is_permutation(a, out), f"{name}: output is not a permutation of input"

    out2 = sort(a)
    assert out2 == out, f"{name}: must be deterministic"

    # Core in-place entry point agrees with the wrapper
    inplace = list(a)
    assert get_algorithm(name)(inplace) is None
    assert inplace == out


# ------------------------- unit tests (deterministic) ------------------------- #

UNSIGNED_CASES = [
    [],
    [5],
    [0],
    [2, 1],
    [1, 2, 3, 4],
    [4, 3, 2, 1],
    [7, 7, 7, 7],
    [1, 3, 2, 3, 1, 2],
    list(range(20)),
    list(range(20))[::-1],
    [10, 0, 100, 7, 7, 3, 999],
    [1000000, 0, 1],
]


@pytest.mark.parametrize("name", CORE_ALGORITHMS)
@pytest.mark.parametrize("a", UNSIGNED_CASES)
def test_unit_cases(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", SIGNED_SAFE)
@pytest.mark.parametrize(
    "a",
    [
        [0, -1, 5, -10, 3, 3, 2],
        [-3, -3, -1, -2],
        [-5],
        [-(2**20), 2**20, 0],
    ],
)
def test_unit_cases_with_negatives(name: str, a: List[int]) -> None:
    _check_one(name, a)


@pytest.mark.parametrize("name", CORE_ALGORITHMS)
def test_demo_array(name: str) -> None:
    data = list(DEMO_ARRAY)
    get_algorithm(name)(data)
    assert data == [2, 24, 45, 66, 75, 90, 170, 802]


@pytest.mark.parametrize("name", CORE_ALGORITHMS)
def test_sorted_input_is_left_unchanged(name: str) -> None:
    data = [1, 2, 2, 3, 10, 10, 42]
    expected = list(data)
    get_algorithm(name)(data)
    assert data == expected


@pytest.mark.parametrize("name", CORE_ALGORITHMS)
def test_empty_input_is_noop(name: str) -> None:
    data: List[int] = []
    get_algorithm(name)(data)
    assert data == []


@pytest.mark.parametrize("name", CORE_ALGORITHMS)
def test_sorts_in_place_at_same_binding(name: str) -> None:
    data = [3, 1, 2]
    alias = data
    get_algorithm(name)(data)
    assert alias is data
    assert alias == [1, 2, 3]


def test_registry_covers_all_modules() -> None:
    for name in ALGORITHMS:
        mod = importlib.import_module(f"distsort.algorithms.{name}")
        assert callable(mod.sort)
        assert isinstance(mod.DISPLAY_NAME, str)


def test_unknown_algorithm_raises_keyerror() -> None:
    with pytest.raises(KeyError, match="shell_sort"):
        get_algorithm("shell_sort")


# ------------------------- property-based tests (randomized) ------------------------- #

small_ints = st.integers(min_value=-10_000, max_value=10_000)


@settings(deadline=None, max_examples=100)
@given(st.lists(small_ints, min_size=0, max_size=400))
def test_property_signed_small_range(a: List[int]) -> None:
    for name in SIGNED_SAFE:
        _check_one(name, a)


@settings(deadline=None, max_examples=100)
@given(st.lists(st.integers(min_value=0, max_value=20_000), min_size=0, max_size=400))
def test_property_nonnegative_all_algorithms(a: List[int]) -> None:
    for name in CORE_ALGORITHMS:
        _check_one(name, a)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(min_value=0, max_value=2**31 - 1), min_size=0, max_size=200))
def test_property_full_range(a: List[int]) -> None:
    for name in RANGE_FREE:
        _check_one(name, a)


@settings(deadline=None, max_examples=60)
@given(
    st.lists(
        st.integers(min_value=0, max_value=255),  # small range encourages duplicates
        min_size=0,
        max_size=600,
    )
)
def test_property_many_duplicates(a: List[int]) -> None:
    for name in CORE_ALGORITHMS:
        _check_one(name, a)


@settings(deadline=None, max_examples=50)
@given(st.integers(min_value=-1000, max_value=1000), st.integers(min_value=0, max_value=50))
def test_property_all_equal_is_unchanged(value: int, n: int) -> None:
    for name in SIGNED_SAFE:
        data = [value] * n
        get_algorithm(name)(data)
        assert data == [value] * n
