"""
Seeded input generators for stooge sort tests and benchmark sweeps.

Distributions:
- "random":        integers uniform over an inclusive params["range"] (required).
- "nearly_sorted": [0, 1, ..., n-1] degraded by ceil(swap_frac * n) random swaps.
- "few_uniques":   at most k distinct integers, resampled to length n.
- "small_range":   integers uniform over [min_val, max_val] (default [0, 255]).
- "reversed":      [n-1, ..., 0]; ignores params and RNG.
- "floats":        floats uniform over half-open params["range"] (default [-1000.0, 1000.0)).

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list

Conventions:
- Integer ranges are inclusive on both ends; the float range is half-open,
  matching numpy's `Generator.uniform`.
- Results are plain Python lists (the sort is list-agnostic; numpy stays here).
- The caller owns and seeds the RNG.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[Any]:
    """
    Generate a dataset of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements (>= 0).
    spec : dict
        {"dist": <name>, "params": {...}}; see module docstring for names.
    rng : numpy.random.Generator
        Caller-owned RNG.

    Raises
    ------
    ValueError
        On invalid n, unknown dist or malformed params.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist) if isinstance(dist, str) else None
    if gen is None:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(int(n), params, rng)


# ------------------------- generators ------------------------- #

def _gen_random(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _int_range(params["range"], "random")
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    swap_frac = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(swap_frac)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float; got {swap_frac!r}") from e
    if not 0.0 <= swap_frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    arr = list(range(n))
    swaps = int(np.ceil(swap_frac * n))
    if n == 0 or swaps == 0:
        return arr
    pairs = rng.integers(0, n, size=(swaps, 2))
    for i, j in pairs.tolist():
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _gen_few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _int_range(params.get("range", (0, 2**32 - 1)), "few_uniques")
    if n == 0:
        return []

    k = min(k, n, hi - lo + 1)
    values: List[int] = []
    seen = set()
    while len(values) < k:
        for v in rng.integers(lo, hi + 1, size=2 * (k - len(values))).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == k:
                    break
    return [values[i] for i in rng.integers(0, k, size=n).tolist()]


def _gen_small_range(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _int_range(params["range"], "small_range")
    else:
        lo, hi = _int_range((params.get("min_val", 0), params.get("max_val", 255)), "small_range")
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_reversed(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _gen_floats(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[float]:
    bounds = params.get("range", (-1000.0, 1000.0))
    if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
        raise ValueError("floats.params.range must be a 2-element list/tuple [min, max)")
    try:
        lo, hi = float(bounds[0]), float(bounds[1])
    except (TypeError, ValueError) as e:
        raise ValueError("floats.params.range values must be numbers") from e
    if not lo < hi:
        raise ValueError(f"floats.params.range invalid: need min < max, got [{lo}, {hi})")
    return rng.uniform(lo, hi, size=n).tolist()


_GENERATORS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[Any]]] = {
    "random": _gen_random,
    "nearly_sorted": _gen_nearly_sorted,
    "few_uniques": _gen_few_uniques,
    "small_range": _gen_small_range,
    "reversed": _gen_reversed,
    "floats": _gen_floats,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #

def _int_range(spec: Any, dist: str) -> Tuple[int, int]:
    """Parse an inclusive [min, max] integer pair."""
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo, hi = spec
    if not _is_int_like(lo) or not _is_int_like(hi):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo), int(hi)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    # Python ints and NumPy integer scalars, but not bool
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
