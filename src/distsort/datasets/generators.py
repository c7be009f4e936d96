"""
Dataset generators for the distribution-sort benchmarks.

Currently implemented:
- dist == "uniform":
    Integers drawn uniformly from an inclusive range. Varying the range and
    size of this one distribution covers the range sweep, the scalability
    sweep, the bucket-sort worst case ([0, 10]), sparse wide-range data
    ([0, 1000000]) and the many-duplicates case ([0, 9]).

- dist == "normal":
    Gaussian draws (default mean 500, std 150), clipped to an inclusive range
    (default [0, 1000]) and truncated toward zero.

- dist == "skewed":
    Right-skewed data: exponential draws with rate 0.003 (mean ~333),
    truncated toward zero and capped (default cap 1000). Most values are small.

- dist == "exponential":
    Same shape as "skewed" with a default rate of 0.005 (mean 200).

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]
    DEMO_ARRAY

Conventions:
- All ranges are **inclusive** on both ends.
- Every distribution produces non-negative values unless a caller asks for a
  negative "uniform" range; radix sort's precondition is the caller's concern.
- Returns a Python `list[int]` (algorithms stay NumPy-agnostic).
- The caller supplies the RNG (for reproducibility across runs).
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "uniform",
    "normal",
    "skewed",
    "exponential",
}

# Fixed input used by the demo command.
DEMO_ARRAY: Tuple[int, ...] = (170, 45, 75, 90, 802, 24, 2, 66)

_DEFAULT_RATES = {"skewed": 0.003, "exponential": 0.005}

__all__ = ["DEMO_ARRAY", "SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset according to `spec`, using the provided RNG.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    spec : dict
        Distribution specification.

        Uniform:
            {
                "dist": "uniform",
                "params": { "range": [min_int, max_int] }  # inclusive, required
            }

        Normal:
            {
                "dist": "normal",
                "params": {
                    "mean": 500.0,                         # optional
                    "std": 150.0,                          # optional; > 0
                    "clip": [0, 1000]                      # optional; inclusive
                }
            }

        Skewed / Exponential:
            {
                "dist": "skewed",                          # or "exponential"
                "params": {
                    "rate": 0.003,                         # optional; > 0 (0.005 for "exponential")
                    "cap": 1000                            # optional; >= 0
                }
            }

    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).

    Returns
    -------
    list[int]
        A list of length `n` containing integers consistent with `spec`.

    Raises
    ------
    ValueError
        If inputs are invalid or if the distribution is unsupported.
    """
    _validate_n(n)

    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "uniform":
        lo, hi = _parse_inclusive_range(params, "range", dist)
        if n == 0:
            return []
        # Generator.integers is half-open [low, high); +1 makes it inclusive.
        arr = rng.integers(lo, hi + 1, size=n, dtype=np.int64)
        return arr.tolist()

    if dist == "normal":
        mean = _parse_float(params, "mean", 500.0, dist)
        std = _parse_float(params, "std", 150.0, dist)
        if std <= 0:
            raise ValueError(f"normal.params.std must be > 0; got {std}")
        lo, hi = _parse_inclusive_range(params, "clip", dist, default=(0, 1000))
        if n == 0:
            return []
        draws = rng.normal(mean, std, size=n)
        # Truncate toward zero first, then clamp, so the bounds stay reachable.
        arr = np.clip(np.trunc(draws), lo, hi).astype(np.int64)
        return arr.tolist()

    # "skewed" and "exponential" share one shape
    rate = _parse_float(params, "rate", _DEFAULT_RATES[dist], dist)
    if rate <= 0:
        raise ValueError(f"{dist}.params.rate must be > 0; got {rate}")
    cap = params.get("cap", 1000)
    if not _is_int_like(cap) or int(cap) < 0:
        raise ValueError(f"{dist}.params.cap must be a nonnegative integer; got {cap!r}")
    if n == 0:
        return []
    # numpy parameterises the exponential by scale = 1 / rate
    draws = rng.exponential(1.0 / rate, size=n)
    # Cap while still float; huge draws would overflow the int64 cast
    arr = np.minimum(draws, int(cap)).astype(np.int64)
    return arr.tolist()


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_inclusive_range(
    params: Dict[str, Any],
    key: str,
    dist: str,
    default: Tuple[int, int] | None = None,
) -> Tuple[int, int]:
    """
    Validate and parse an inclusive integer range stored under params[key].

    If `default` is None the key is required.
    """
    if key not in params:
        if default is None:
            raise ValueError(
                f"{dist}.params.{key} must be provided as [min, max] (inclusive)"
            )
        return default

    spec = params[key]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.{key} must be a 2-element list/tuple [min, max]")

    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.{key} values must be integers")

    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.{key} invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_float(params: Dict[str, Any], key: str, default: float, dist: str) -> float:
    val = params.get(key, default)
    try:
        return float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{dist}.params.{key} must be a number; got {val!r}") from e


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types (but not bools)
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
