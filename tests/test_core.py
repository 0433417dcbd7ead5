"""
Behavioural tests for the sorting engine and the method-style extension.

Covers the base cases (comparator call counts, recursion), comparator
adaptation, partial orders, exception propagation, and the range of mutable
sequence types the sort accepts.
"""

from __future__ import annotations

import array
import math
import pathlib
import sys
from collections import Counter, UserList
from typing import Any, List

import numpy as np
import pytest
from hypothesis import given, settings, strategies as st

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from stoogesort import (
    Stooge,
    StoogeList,
    core,
    key_order,
    natural_order,
    reverse_order,
    stooge_sort,
    stooge_sort_by,
    stooge_sort_by_key,
)


class CountingCmp:
    """Natural-order comparator that records how often it is called."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, a: Any, b: Any) -> int:
        self.calls += 1
        return natural_order(a, b)


@pytest.fixture
def stooge_calls(monkeypatch: pytest.MonkeyPatch) -> List[int]:
    """Count every invocation of the recursive procedure, top-level included."""
    calls: List[int] = []
    original = core._stooge

    def _counting(seq, lo, hi, cmp):
        calls.append(hi - lo)
        original(seq, lo, hi, cmp)

    monkeypatch.setattr(core, "_stooge", _counting)
    return calls


# ------------------------- base cases ------------------------- #

@pytest.mark.parametrize("a", [[], [5]])
def test_trivial_inputs_never_compare(a: List[int]) -> None:
    cmp = CountingCmp()
    seq = list(a)
    stooge_sort_by(seq, cmp)
    assert seq == a
    assert cmp.calls == 0


def test_two_elements_single_compare_no_recursion(stooge_calls: List[int]) -> None:
    cmp = CountingCmp()
    seq = [2, 1]
    stooge_sort_by(seq, cmp)
    assert seq == [1, 2]
    assert cmp.calls == 1
    assert stooge_calls == [2]


def test_three_elements_recurse_three_times(stooge_calls: List[int]) -> None:
    cmp = CountingCmp()
    seq = [3, 1, 2]
    stooge_sort_by(seq, cmp)
    assert seq == [1, 2, 3]
    assert stooge_calls == [3, 2, 2, 2]
    assert cmp.calls == 4


def test_ties_do_not_swap() -> None:
    a, b = (1, "a"), (1, "b")
    seq = [a, b]
    stooge_sort_by_key(seq, lambda t: t[0])
    assert seq[0] is a and seq[1] is b


# ------------------------- documented scenarios ------------------------- #

def test_natural_order_example() -> None:
    seq = [3, 2, 1, -5]
    stooge_sort(seq)
    assert seq == [-5, 1, 2, 3]


def test_float_comparator_example() -> None:
    seq = [0.1, 0.0, 1.0, -1.6]
    stooge_sort_by(seq, lambda a, b: (a > b) - (a < b))
    assert seq == [-1.6, 0.0, 0.1, 1.0]


def test_by_key_example() -> None:
    seq = [-5, 4, 1, -3, 2]
    stooge_sort_by_key(seq, abs)
    assert seq == [1, 2, -3, 4, -5]


def test_natural_sort_is_comparator_sort_with_natural_order(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = []
    monkeypatch.setattr(core, "stooge_sort_by", lambda seq, cmp: seen.append(cmp))
    core.stooge_sort([1, 2])
    assert seen == [natural_order]


# ------------------------- comparators ------------------------- #

def test_natural_order_values() -> None:
    assert natural_order(1, 2) == -1
    assert natural_order(2, 1) == 1
    assert natural_order("a", "a") == 0
    assert natural_order(float("nan"), 1.0) == 0


def test_key_order_and_reverse_order() -> None:
    by_len = key_order(len)
    assert by_len("aa", "b") == 1
    assert by_len("a", "bb") == -1
    assert reverse_order(by_len)("aa", "b") == -1


# ------------------------- failures & partial orders ------------------------- #

def test_comparator_exception_propagates() -> None:
    class Boom(Exception):
        pass

    def cmp(a: int, b: int) -> int:
        if 0 in (a, b):
            raise Boom("cannot compare zero")
        return natural_order(a, b)

    seq = [3, 2, 0, 1]
    with pytest.raises(Boom):
        stooge_sort_by(seq, cmp)
    assert sorted(seq) == [0, 1, 2, 3]


def test_mixed_types_raise_type_error() -> None:
    with pytest.raises(TypeError):
        stooge_sort([1, "a", 2])


def test_nan_terminates_and_preserves_elements() -> None:
    nan = float("nan")
    seq = [3.0, nan, 1.0, 2.0, nan]
    stooge_sort(seq)
    assert len(seq) == 5
    assert sum(math.isnan(x) for x in seq) == 2
    assert sorted(x for x in seq if not math.isnan(x)) == [1.0, 2.0, 3.0]


subsets = st.frozensets(st.integers(min_value=0, max_value=4), max_size=4)


@settings(deadline=None, max_examples=60)
@given(st.lists(subsets, max_size=25))
def test_partial_order_terminates_and_preserves_multiset(a: List[frozenset]) -> None:
    # frozenset `<` is proper-subset, a partial order
    seq = list(a)
    stooge_sort(seq)
    assert Counter(seq) == Counter(a)


@settings(deadline=None, max_examples=60)
@given(st.lists(st.integers(-50, 50), max_size=25))
def test_inconsistent_comparator_preserves_multiset(a: List[int]) -> None:
    def cmp(x: int, y: int) -> int:
        return 1 if (x + y) % 3 == 0 else -1

    seq = list(a)
    stooge_sort_by(seq, cmp)
    assert Counter(seq) == Counter(a)


# ------------------------- sequence types ------------------------- #

def test_bytearray() -> None:
    seq = bytearray(b"stooge")
    stooge_sort(seq)
    assert seq == bytearray(b"egoost")


def test_array_module() -> None:
    seq = array.array("i", [5, -1, 3, 0])
    stooge_sort(seq)
    assert seq.tolist() == [-1, 0, 3, 5]


def test_numpy_array_in_place() -> None:
    arr = np.array([3, 2, 1, -5, 8, 0])
    view = arr[:]
    stooge_sort(arr)
    np.testing.assert_array_equal(arr, [-5, 0, 1, 2, 3, 8])
    np.testing.assert_array_equal(view, arr)


# ------------------------- extension mixin ------------------------- #

def test_stooge_list_methods() -> None:
    v = StoogeList([3, 2, 1, -5])
    assert v.stooge_sort() is None
    assert v == [-5, 1, 2, 3]

    v.stooge_sort_by(reverse_order(natural_order))
    assert v == [3, 2, 1, -5]

    v.stooge_sort_by_key(abs)
    assert v == [1, 2, 3, -5]
    assert isinstance(v, list)


def test_mixin_on_user_sequence() -> None:
    class Deck(Stooge, UserList):
        pass

    d = Deck(["queen", "ace", "king", "jack"])
    d.stooge_sort_by_key(len)
    assert [len(c) for c in d] == [3, 4, 4, 5]
    d.stooge_sort()
    assert list(d) == ["ace", "jack", "king", "queen"]


@settings(deadline=None, max_examples=40)
@given(st.lists(st.integers(-100, 100), max_size=30))
def test_method_and_free_function_agree(a: List[int]) -> None:
    free = list(a)
    stooge_sort(free)
    method = StoogeList(a)
    method.stooge_sort()
    assert list(method) == free
