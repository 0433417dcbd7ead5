"""
Oracle for sorting correctness.

We use Python's built-in `sorted()` as the ground-truth oracle:
- Correct total order for any naturally ordered element type
- Accepts the same three-way comparators as the stooge sort (via cmp_to_key)
- Never mutates its input

Public API (stable):
    oracle_sort(a, cmp=None) -> list
    equals_oracle(a, out, cmp=None) -> bool

Conventions:
- The oracle always returns a **new** list.
- `equals_oracle` is only meaningful for total orders where equal elements are
  indistinguishable; stooge sort is not stable, so for comparators that tie
  distinct elements compare with `is_ordered` + `is_permutation` instead.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, List, Optional, Sequence

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any], cmp: Optional[Callable[[Any, Any], int]] = None) -> List[Any]:
    """
    Return the ground-truth sorted output for `a`.

    Parameters
    ----------
    a : Sequence
        Input elements. Not mutated.
    cmp : Callable[[Any, Any], int] | None
        Optional three-way comparator; natural order when None.

    Returns
    -------
    list
        A new list with the same elements as `a`, in nondecreasing order.
    """
    if cmp is None:
        return sorted(a)
    return sorted(a, key=cmp_to_key(cmp))


def equals_oracle(
    a: Sequence[Any],
    out: Sequence[Any],
    cmp: Optional[Callable[[Any, Any], int]] = None,
) -> bool:
    """True iff `out` is element-wise equal to `oracle_sort(a, cmp)`."""
    return list(out) == oracle_sort(a, cmp)
