"""
Method-call style access to the stooge sort entry points.

Python cannot attach methods to built-in types such as `list`, so the
operations are offered two ways:
    - free functions taking the sequence first (see `stoogesort.core`), and
    - the `Stooge` mixin, which adds them as methods to any mutable sequence
      type that inherits from it.

    >>> from stoogesort import StoogeList
    >>> v = StoogeList([3, 2, 1, -5])
    >>> v.stooge_sort()
    >>> v
    [-5, 1, 2, 3]

A custom container only needs to inherit from `Stooge` alongside a
`MutableSequence` base (list, collections.UserList, or its own ABC-based
implementation).
"""

from __future__ import annotations

from typing import Any, Callable

from .core import NaturallyOrdered, stooge_sort, stooge_sort_by, stooge_sort_by_key

__all__ = ["Stooge", "StoogeList"]


class Stooge:
    """Mixin adding in-place stooge sort methods to a mutable sequence."""

    __slots__ = ()

    def stooge_sort(self) -> None:
        """Sort ascending by the elements' natural order."""
        stooge_sort(self)  # type: ignore[arg-type]

    def stooge_sort_by(self, cmp: Callable[[Any, Any], int]) -> None:
        """Sort with a three-way comparator (negative / zero / positive)."""
        stooge_sort_by(self, cmp)  # type: ignore[arg-type]

    def stooge_sort_by_key(self, key: Callable[[Any], NaturallyOrdered]) -> None:
        """Sort ascending by `key(elem)`."""
        stooge_sort_by_key(self, key)  # type: ignore[arg-type]


class StoogeList(Stooge, list):
    """A plain `list` that also carries the stooge sort methods."""

    __slots__ = ()
