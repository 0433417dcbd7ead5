"""
stoogesort: in-place stooge sort for mutable sequences.

Re-export the sort entry points so callers can write:
    from stoogesort import stooge_sort, stooge_sort_by, stooge_sort_by_key
or use the method form via the `Stooge` mixin / `StoogeList`.
"""

from .core import (
    Comparator,
    NaturallyOrdered,
    key_order,
    natural_order,
    reverse_order,
    stooge_sort,
    stooge_sort_by,
    stooge_sort_by_key,
)
from .extension import Stooge, StoogeList

__version__ = "0.1.0"

__all__ = [
    "Comparator",
    "NaturallyOrdered",
    "natural_order",
    "key_order",
    "reverse_order",
    "stooge_sort",
    "stooge_sort_by",
    "stooge_sort_by_key",
    "Stooge",
    "StoogeList",
]
