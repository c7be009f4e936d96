"""
Timing harness for in-place sorting algorithms.

Each sample times exactly one call `algo_fn(arg)` on a fresh copy of the
baseline input, using a monotonic high-resolution clock. Copying, GC control,
warmup and verification all happen outside the timed block. The baseline
itself is never handed to the algorithm, so every algorithm (and every sample)
sees the same unmodified data.

Public API (stable):
    time_sort_call(... ) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
        "verified": bool,                   # False if any sample came back unsorted
    }
"""

from __future__ import annotations

import gc
import logging
import time
from typing import Any, Dict, List, Sequence

from distsort.algorithms import SortFn
from distsort.validate import verify_sorted

logger = logging.getLogger(__name__)

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: SortFn,
    a: Sequence[int],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated by-value calls to the in-place sort `algo_fn`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : SortFn
        In-place sort, `algo_fn(a: list[int]) -> None`.
    a : Sequence[int]
        Baseline input. Copied before every call; never mutated.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call on a copy before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample exceeding it is kept, status becomes
        "timeout" and sampling stops.

    Returns
    -------
    dict
        See module docstring for exact schema.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    samples: List[int] = []
    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": samples,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "verified": True,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a))
        except Exception as e:
            logger.warning("%s: warmup failed: %r", algo_name, e)
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                algo_fn(arg)
                t1 = time.perf_counter_ns()
            except Exception as e:
                logger.warning("%s: run failed at repeat %d: %r", algo_name, r, e)
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            samples.append(int(elapsed))

            if not verify_sorted(algo_name, arg):
                result["verified"] = False

            if elapsed > threshold_ns:
                logger.info(
                    "%s: sample %d took %.1f ms (> %.1f ms); stopping",
                    algo_name,
                    r,
                    elapsed / 1e6,
                    timeout_seconds * 1e3,
                )
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
