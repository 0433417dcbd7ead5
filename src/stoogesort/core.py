"""
Stooge sort over mutable, randomly indexable sequences.

The algorithm sorts the half-open range [lo, hi) by:
    1. swapping the endpoints if they are out of order,
    2. recursively sorting the first two-thirds,
    3. recursively sorting the last two-thirds,
    4. recursively sorting the first two-thirds again.

Worst-case time is O(n^(log 3 / log 1.5)) ~ O(n^2.7095); recursion depth is
about log_1.5(n), so even very large inputs stay far below Python's recursion
limit (long before that the running time becomes the problem).

Public API (stable):
    stooge_sort(seq) -> None
    stooge_sort_by(seq, cmp) -> None
    stooge_sort_by_key(seq, key) -> None
    natural_order(a, b) -> int
    key_order(key) -> Comparator
    reverse_order(cmp) -> Comparator

Conventions:
- All sorts are in place and return None, like `list.sort`.
- Comparators follow the `functools.cmp_to_key` convention: negative if a < b,
  zero if equal, positive if a > b.
- Ties never swap. Overall stability is NOT guaranteed.
- Exceptions raised by a comparator or key function propagate unchanged; the
  sequence may be left partially reordered.
"""

from __future__ import annotations

from typing import Any, Callable, MutableSequence, Protocol, TypeVar

__all__ = [
    "Comparator",
    "NaturallyOrdered",
    "natural_order",
    "key_order",
    "reverse_order",
    "stooge_sort",
    "stooge_sort_by",
    "stooge_sort_by_key",
]

Comparator = Callable[[Any, Any], int]


class NaturallyOrdered(Protocol):
    """Element types with an intrinsic total order (int, float, str, ...)."""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar("T")
N = TypeVar("N", bound=NaturallyOrdered)


# ------------------------- comparators ------------------------- #

def natural_order(a: NaturallyOrdered, b: NaturallyOrdered) -> int:
    """
    Three-way compare using the elements' own `<` and `>`.

    Pairs that are neither less nor greater (equal, or incomparable such as
    NaN) compare as 0 and are therefore never swapped.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def key_order(key: Callable[[T], NaturallyOrdered]) -> Comparator:
    """Build a comparator that compares `key(a)` with `key(b)`."""

    def _cmp(a: T, b: T) -> int:
        return natural_order(key(a), key(b))

    return _cmp


def reverse_order(cmp: Comparator) -> Comparator:
    """Flip a comparator so the sort becomes descending."""

    def _cmp(a: Any, b: Any) -> int:
        return cmp(b, a)

    return _cmp


# ------------------------- entry points ------------------------- #

def stooge_sort(seq: MutableSequence[N]) -> None:
    """
    Sort `seq` ascending in place by its elements' natural order.

    Example
    -------
    >>> v = [-5, 4, 1, -3, 2]
    >>> stooge_sort(v)
    >>> v
    [-5, -3, 1, 2, 4]
    """
    stooge_sort_by(seq, natural_order)


def stooge_sort_by(seq: MutableSequence[T], cmp: Callable[[T, T], int]) -> None:
    """
    Sort `seq` in place using a three-way comparator.

    Parameters
    ----------
    seq : MutableSequence
        Anything supporting len(), item reads and item assignment.
    cmp : Callable[[T, T], int]
        Comparator in the `functools.cmp_to_key` convention. It should define a
        total order over the elements present; if it does not, the resulting
        order is unspecified but the sort still terminates and no element is
        lost or duplicated.

    Example
    -------
    >>> floats = [5.0, 4.0, 1.0, 3.0, 2.0]
    >>> stooge_sort_by(floats, lambda a, b: (a > b) - (a < b))
    >>> floats
    [1.0, 2.0, 3.0, 4.0, 5.0]
    """
    _stooge(seq, 0, len(seq), cmp)


def stooge_sort_by_key(seq: MutableSequence[T], key: Callable[[T], NaturallyOrdered]) -> None:
    """
    Sort `seq` in place, ascending by `key(elem)`.

    The key is recomputed on every comparison (no decorate-sort-undecorate),
    so cost grows with the key function's own cost.

    Example
    -------
    >>> v = [-5, 4, 1, -3, 2]
    >>> stooge_sort_by_key(v, abs)
    >>> v
    [1, 2, -3, 4, -5]
    """
    stooge_sort_by(seq, key_order(key))


# ------------------------- algorithm ------------------------- #

def _stooge(seq: MutableSequence[T], lo: int, hi: int, cmp: Callable[[T, T], int]) -> None:
    n = hi - lo
    if n <= 1:
        return

    last = hi - 1
    if cmp(seq[lo], seq[last]) > 0:
        seq[lo], seq[last] = seq[last], seq[lo]

    # A single compare-and-swap fully orders two elements.
    if n < 3:
        return

    third = n // 3
    _stooge(seq, lo, hi - third, cmp)
    _stooge(seq, lo + third, hi, cmp)
    _stooge(seq, lo, hi - third, cmp)
