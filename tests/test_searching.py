import pytest

from algokit.searching import (
    binary_search,
    find_pivot,
    first_occurrence,
    last_occurrence,
    peak_index,
    prefix_sums,
    range_sum,
    search_rotated,
)


def test_binary_search_source_example():
    assert binary_search([1, 2, 3, 4, 5, 6], 5) == 4


@pytest.mark.parametrize("key", range(0, 40, 3))
def test_binary_search_finds_every_present_key(key):
    values = list(range(0, 40, 3))
    index = binary_search(values, key)
    assert values[index] == key


@pytest.mark.parametrize("key", [-1, 2, 100])
def test_binary_search_missing_raises(key):
    with pytest.raises(ValueError):
        binary_search([0, 1, 3, 5, 8], key)


def test_binary_search_empty_raises():
    with pytest.raises(ValueError):
        binary_search([], 1)


def test_first_and_last_occurrence_bracket_the_run():
    values = [1, 2, 2, 2, 2, 5, 7, 7]
    first = first_occurrence(values, 2)
    last = last_occurrence(values, 2)
    assert values[first] == 2 and values[last] == 2
    assert first == 0 or values[first - 1] != 2
    assert last == len(values) - 1 or values[last + 1] != 2
    assert last - first + 1 == values.count(2)


def test_occurrences_of_single_and_edge_values():
    values = [1, 2, 2, 2, 2, 5, 7, 7]
    assert first_occurrence(values, 1) == last_occurrence(values, 1) == values.index(1)
    assert last_occurrence(values, 7) == len(values) - 1


@pytest.mark.parametrize("func", [first_occurrence, last_occurrence])
def test_occurrence_missing_raises(func):
    with pytest.raises(ValueError):
        func([1, 3, 3, 9], 4)


def test_find_pivot_source_example():
    values = [11, 17, 20, 1, 4]
    assert find_pivot(values) == 3


@pytest.mark.parametrize("shift", range(1, 8))
def test_find_pivot_points_at_minimum_of_rotations(shift):
    base = list(range(10, 90, 10))
    rotated = base[shift:] + base[:shift]
    pivot = find_pivot(rotated)
    assert rotated[pivot] == min(rotated)


def test_find_pivot_unrotated_returns_last_index():
    values = [1, 2, 3, 4]
    assert find_pivot(values) == len(values) - 1


def test_find_pivot_empty_raises():
    with pytest.raises(ValueError):
        find_pivot([])


def test_peak_index_source_example():
    assert peak_index([0, 1, 2, 5, 0]) == 3


@pytest.mark.parametrize(
    "mountain", [[1, 2, 5, 0], [0, 5, 0], [3, 4, 6, 9, 8, 2, 1], [1, 9]]
)
def test_peak_index_hits_maximum(mountain):
    assert mountain[peak_index(mountain)] == max(mountain)


def test_peak_index_empty_raises():
    with pytest.raises(ValueError):
        peak_index([])


@pytest.mark.parametrize("shift", range(0, 7))
def test_search_rotated_finds_every_key(shift):
    base = [2, 5, 8, 13, 21, 34, 55]
    rotated = base[shift:] + base[:shift]
    for key in base:
        assert rotated[search_rotated(rotated, key)] == key


@pytest.mark.parametrize("key", [0, 6, 100])
def test_search_rotated_missing_raises(key):
    with pytest.raises(ValueError):
        search_rotated([21, 34, 55, 2, 5, 8, 13], key)


def test_search_rotated_empty_raises():
    with pytest.raises(ValueError):
        search_rotated([], 3)


def test_prefix_sums_shape_and_differences():
    values = [4, -1, 7, 0, 3]
    prefix = prefix_sums(values)
    assert len(prefix) == len(values) + 1
    assert prefix[0] == 0
    assert [b - a for a, b in zip(prefix, prefix[1:])] == values


def test_prefix_sums_empty():
    assert prefix_sums([]) == [0]


def test_range_sum_matches_slices():
    values = [4, -1, 7, 0, 3, 9]
    prefix = prefix_sums(values)
    for left in range(1, len(values) + 1):
        for right in range(left, len(values) + 1):
            assert range_sum(prefix, left, right) == sum(values[left - 1:right])


def test_range_sum_whole_range_is_total():
    values = [5, 6, 7]
    prefix = prefix_sums(values)
    assert range_sum(prefix, 1, len(values)) == prefix[-1]


@pytest.mark.parametrize("left,right", [(0, 2), (1, 4), (3, 1)])
def test_range_sum_out_of_range_raises(left, right):
    prefix = prefix_sums([1, 2, 3])
    with pytest.raises(IndexError):
        range_sum(prefix, left, right)