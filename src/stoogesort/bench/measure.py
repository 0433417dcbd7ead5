"""
Timing harness for in-place sorts.

One timed sample is exactly one call to `sort_fn(seq)`. The sort mutates its
argument, so every sample (and the warmup) gets a fresh copy of the input made
OUTSIDE the timed block; GC control also happens outside it.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "variant": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # populated if status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Sequence

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    variant: str,
    sort_fn: Callable[[List[Any]], None],
    a: Sequence[Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
) -> Dict[str, Any]:
    """
    Time repeated in-place sorts of copies of `a`.

    Parameters
    ----------
    variant : str
        Logical name of the entry point being timed (for records).
    sort_fn : Callable[[list], None]
        In-place sort taking the list to reorder.
    a : Sequence
        Input data; never passed to `sort_fn` directly.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call first.
    disable_gc : bool
        If True, collect and disable GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A sample exceeding it is kept, the status becomes
        "timeout", and sampling stops.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "variant": variant,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            sort_fn(list(a))
        except Exception as e:
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
                sort_fn(arg)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(elapsed)
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result
