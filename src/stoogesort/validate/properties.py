"""
Property helpers for validating in-place sorting results.

Public API (stable):
    is_ordered(xs, cmp=None) -> bool
    first_order_violation_index(xs, cmp=None) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_sorted_in_place(before, seq, cmp=None) -> None

Notes
-----
- `cmp` is a three-way comparator; None means natural order (`<=` between
  neighbours).
- Multiset checks use `collections.Counter`, so elements must be hashable.
- Stability is *not* checked: stooge sort does not promise it. A stability
  test would need (key, id) pairs and is deliberately absent.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Dict, Optional, Sequence

from stoogesort.core import natural_order

__all__ = [
    "is_ordered",
    "first_order_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_sorted_in_place",
]


def is_ordered(xs: Sequence[Any], cmp: Optional[Callable[[Any, Any], int]] = None) -> bool:
    """Return True iff no neighbour pair compares greater under `cmp`."""
    return first_order_violation_index(xs, cmp) is None


def first_order_violation_index(
    xs: Sequence[Any], cmp: Optional[Callable[[Any, Any], int]] = None
) -> int | None:
    """
    Return the first index i where xs[i] compares greater than xs[i+1], or None.

    Useful for precise error messages:
        i = first_order_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]} > {out[i+1]}"
    """
    if cmp is None:
        cmp = natural_order
    for i in range(len(xs) - 1):
        if cmp(xs[i], xs[i + 1]) > 0:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    Return True iff `a` and `b` contain exactly the same multiset of values.
    """
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Any], b: Sequence[Any]) -> Dict[Any, int]:
    """
    Return a dict of value -> count difference (count_a - count_b).

    Empty dict means identical multiplicities.
    """
    ca = Counter(a)
    cb = Counter(b)
    diff: Dict[Any, int] = {}
    for k in set(ca) | set(cb):
        d = ca[k] - cb[k]
        if d != 0:
            diff[k] = d
    return diff


def assert_sorted_in_place(
    before: Sequence[Any],
    seq: Sequence[Any],
    cmp: Optional[Callable[[Any, Any], int]] = None,
) -> None:
    """
    Assert that `seq` is an ordered permutation of the snapshot `before`.

    Raises AssertionError naming the first problem found.
    """
    if len(before) != len(seq):
        raise AssertionError(f"Length changed from {len(before)} to {len(seq)}")
    diff = permutation_counter_diff(before, seq)
    if diff:
        raise AssertionError(f"Multiset changed (count_before - count_after): {diff}")
    i = first_order_violation_index(seq, cmp)
    if i is not None:
        raise AssertionError(f"Out of order at index {i}: {seq[i]!r} > {seq[i + 1]!r}")
