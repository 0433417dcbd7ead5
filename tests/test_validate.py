from __future__ import annotations

import pathlib
import sys

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from stoogesort import key_order, natural_order, reverse_order
from stoogesort.validate import (
    assert_sorted_in_place,
    equals_oracle,
    first_order_violation_index,
    is_ordered,
    is_permutation,
    oracle_sort,
    permutation_counter_diff,
)


def test_oracle_does_not_mutate_and_accepts_comparator() -> None:
    a = [3, 1, 2]
    assert oracle_sort(a) == [1, 2, 3]
    assert oracle_sort(a, reverse_order(natural_order)) == [3, 2, 1]
    assert a == [3, 1, 2]


def test_equals_oracle() -> None:
    assert equals_oracle([2, 1], [1, 2])
    assert not equals_oracle([2, 1], [2, 1])
    assert equals_oracle([2, 1], (1, 2))


def test_order_checks() -> None:
    assert is_ordered([])
    assert is_ordered([1, 1, 2])
    assert first_order_violation_index([1, 3, 2, 4]) == 1
    assert is_ordered([3, 2, 1], reverse_order(natural_order))
    assert is_ordered([1, -2, 3], key_order(abs))


def test_permutation_checks() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert not is_permutation([1, 1], [1, 2])
    assert permutation_counter_diff([1, 1, 3], [1, 2]) == {1: 1, 3: 1, 2: -1}
    assert permutation_counter_diff("abc", "cba") == {}


def test_assert_sorted_in_place_messages() -> None:
    assert_sorted_in_place([3, 1, 2], [1, 2, 3])

    with pytest.raises(AssertionError, match="Length changed"):
        assert_sorted_in_place([3, 1, 2], [1, 2])
    with pytest.raises(AssertionError, match="Multiset changed"):
        assert_sorted_in_place([3, 1, 2], [1, 2, 2])
    with pytest.raises(AssertionError, match="Out of order at index 0"):
        assert_sorted_in_place([3, 1, 2], [2, 1, 3])
