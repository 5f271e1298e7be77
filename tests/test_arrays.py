from collections import Counter

import pytest

from kata.arrays import (
    average,
    binary_search,
    bubble_sort,
    delete_at,
    grow,
    insert_at,
    largest,
    linear_search,
    merge,
    reversed_list,
    swap,
    total,
)

SORTED = [1, 3, 5, 7, 9, 11]
SEARCHABLE = [10, 20, 30, 40, 50]


def test_average_of_equal_values():
    assert average([4.0, 4.0, 4.0]) == 4.0


def test_average_lies_between_extremes():
    values = [2.5, -1.0, 8.0, 3.0]
    assert min(values) <= average(values) <= max(values)


def test_average_empty_raises():
    with pytest.raises(ValueError):
        average([])


def test_largest_is_member_and_upper_bound():
    values = [3.5, 9.25, -2.0, 9.0]
    result = largest(values)
    assert result in values
    assert all(v <= result for v in values)


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


def test_total_single_and_empty():
    assert total([5]) == 5
    assert total([]) == 0


def test_total_order_independent():
    values = [1, 2, 3, 4, 5]
    assert total(values) == total(reversed_list(values))


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_each(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("key", [0, 4, 12])
def test_binary_search_missing(key):
    assert binary_search(SORTED, key) is None


def test_binary_search_empty():
    assert binary_search([], 1) is None


@pytest.mark.parametrize("index", range(len(SEARCHABLE)))
def test_linear_search_finds_each(index):
    assert linear_search(SEARCHABLE, SEARCHABLE[index]) == index


def test_linear_search_missing():
    assert linear_search(SEARCHABLE, 35) is None


def test_linear_search_first_occurrence():
    values = [7, 1, 7]
    assert linear_search(values, 7) == values.index(7)


def test_bubble_sort_orders_and_keeps_elements():
    values = [5, -3, 9, 0, 5, 2, -3]
    result = bubble_sort(values)
    assert all(a <= b for a, b in zip(result, result[1:]))
    assert Counter(result) == Counter(values)


def test_bubble_sort_leaves_input_alone():
    values = [3, 2, 1]
    bubble_sort(values)
    assert values == [3, 2, 1]


def test_bubble_sort_already_sorted():
    assert bubble_sort(SORTED) == SORTED


def test_delete_then_insert_round_trip():
    for index, value in enumerate(SEARCHABLE):
        shorter = delete_at(SEARCHABLE, index)
        assert len(shorter) == len(SEARCHABLE) - 1
        assert value not in shorter
        assert insert_at(shorter, index, value) == SEARCHABLE


@pytest.mark.parametrize("index", [-1, 5])
def test_delete_out_of_range(index):
    with pytest.raises(IndexError):
        delete_at(SEARCHABLE, index)


def test_insert_places_value():
    values = [1, 2, 3, 4, 5]
    result = insert_at(values, 2, 99)
    assert result[2] == 99
    assert delete_at(result, 2) == values


def test_insert_at_end_appends():
    values = [1, 2]
    assert insert_at(values, len(values), 3)[-1] == 3


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        insert_at([1, 2], 3, 0)


def test_merge_keeps_both_parts():
    first, second = [1, 2], [3, 4]
    result = merge(first, second)
    assert result[: len(first)] == first
    assert result[len(first):] == second


def test_reversed_twice_is_identity():
    values = [1, 2, 3, 4, 5]
    once = reversed_list(values)
    assert once[0] == values[-1]
    assert reversed_list(once) == values


def test_swap():
    assert swap(5, 10) == (10, 5)


def test_grow_fills_positions():
    assert grow([1, 2], 4) == [1, 2, 3, 4]


def test_grow_keeps_existing_prefix():
    values = [9, 8]
    result = grow(values, 5)
    assert result[:2] == values
    assert len(result) == 5


def test_grow_shrinks():
    assert grow([1, 2, 3], 2) == [1, 2]


def test_grow_negative_raises():
    with pytest.raises(ValueError):
        grow([1], -1)