import random

import pytest

from dsalgo.sorting import (
    bubble_sort,
    insertion_sort,
    is_sorted,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
    sort_dictionary,
)

SORT_COUNT = 6


def _random_lists():
    rng = random.Random(20240611)
    return [[rng.randrange(100) for _ in range(size)] for size in (2, 3, 7, 8, 10, 31, 64)]


@pytest.mark.parametrize("values", _random_lists())
def test_matches_builtin_sort(values):
    results = [
        bubble_sort(values),
        selection_sort(values),
        insertion_sort(values),
        shell_sort(values),
        merge_sort(values),
        quick_sort(values),
    ]
    assert results == [sorted(values)] * SORT_COUNT


@pytest.mark.parametrize(
    "values",
    [[], [5], [1, 2, 3, 4, 5], [9, 8, 7, 6, 5, 4], [3, 3, 3, 3], [2, 1, 2, 1, 2, 1]],
)
def test_edge_cases(values):
    results = [
        bubble_sort(values),
        selection_sort(values),
        insertion_sort(values),
        shell_sort(values),
        merge_sort(values),
        quick_sort(values),
    ]
    assert results == [sorted(values)] * SORT_COUNT
    assert all(is_sorted(result) for result in results)


def test_floats_from_library_example():
    values = [2.1, 0.9, 1.6, 3.8, 1.2]
    expected = [0.9, 1.2, 1.6, 2.1, 3.8]
    assert bubble_sort(values) == expected
    assert selection_sort(values) == expected
    assert insertion_sort(values) == expected
    assert shell_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected


def test_input_left_untouched():
    values = [4, 1, 3, 2]
    snapshot = list(values)
    assert bubble_sort(values) == [1, 2, 3, 4]
    assert selection_sort(values) == [1, 2, 3, 4]
    assert insertion_sort(values) == [1, 2, 3, 4]
    assert shell_sort(values) == [1, 2, 3, 4]
    assert merge_sort(values) == [1, 2, 3, 4]
    assert quick_sort(values) == [1, 2, 3, 4]
    assert values == snapshot


def test_accepts_generators():
    values = [7, 3, 9, 1]
    expected = [1, 3, 7, 9]
    assert bubble_sort(v for v in values) == expected
    assert selection_sort(v for v in values) == expected
    assert insertion_sort(v for v in values) == expected
    assert shell_sort(v for v in values) == expected
    assert merge_sort(v for v in values) == expected
    assert quick_sort(v for v in values) == expected


def test_strings():
    words = ["do", "for", "if", "case", "else", "return", "function"]
    expected = ["case", "do", "else", "for", "function", "if", "return"]
    assert bubble_sort(words) == expected
    assert selection_sort(words) == expected
    assert insertion_sort(words) == expected
    assert shell_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([1, 1, 2]) is True
    assert is_sorted([2, 1]) is False


def test_sort_dictionary_orders_by_word():
    entries = [("pear", "fruit"), ("apple", "fruit"), ("kiwi", "bird"), ("dog", "animal")]
    result = sort_dictionary(entries)
    assert result == sorted(entries, key=lambda entry: entry[0])
    assert set(result) == set(entries)


def test_sort_dictionary_is_stable():
    entries = [("b", "1"), ("a", "x"), ("b", "2")]
    assert sort_dictionary(entries) == [("a", "x"), ("b", "1"), ("b", "2")]


def test_sort_dictionary_empty():
    assert sort_dictionary([]) == []