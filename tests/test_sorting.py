import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import bubble_sort, insertion_sort, merge_sort, quick_sort


@pytest.mark.parametrize(
    "values",
    [
        [12, 11, 13, 5, 6, 7],
        [2, 1, 5, 3, 9, 8],
        [12, 11, 13, 5, 6],
        [],
        [42],
        [3, 3, 3, 1, 1],
        [-5, 0, -5, 7, 2, 2],
    ],
)
def test_source_examples_sorted(values):
    expected = sorted(values)
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert insertion_sort(values) == expected
    assert bubble_sort(values) == expected


def test_input_not_modified():
    values = [5, 4, 3, 2, 1]
    snapshot = list(values)
    results = [
        merge_sort(values),
        quick_sort(values),
        insertion_sort(values),
        bubble_sort(values),
    ]
    assert values == snapshot
    for result in results:
        assert result == [1, 2, 3, 4, 5]


def test_accepts_iterables():
    assert merge_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quick_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_strings():
    words = ["pear", "apple", "fig", "apple"]
    expected = ["apple", "apple", "fig", "pear"]
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert insertion_sort(words) == expected
    assert bubble_sort(words) == expected


@given(values=st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert insertion_sort(values) == expected
    assert bubble_sort(values) == expected


@given(values=st.lists(st.integers(min_value=-50, max_value=50), max_size=60))
def test_result_is_ordered_permutation(values):
    results = [
        merge_sort(values),
        quick_sort(values),
        insertion_sort(values),
        bubble_sort(values),
    ]
    for result in results:
        assert all(a <= b for a, b in zip(result, result[1:]))
        assert sorted(result) == sorted(values)


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __le__(self, other):
        return self.key <= other.key

    def __gt__(self, other):
        return self.key > other.key


def _keyed_items():
    return [_Keyed(2, "a"), _Keyed(1, "b"), _Keyed(2, "c"), _Keyed(1, "d")]


def test_stable_sorts_keep_order_of_equal_items():
    expected = ["b", "d", "a", "c"]
    assert [item.tag for item in merge_sort(_keyed_items())] == expected
    assert [item.tag for item in insertion_sort(_keyed_items())] == expected
    assert [item.tag for item in bubble_sort(_keyed_items())] == expected