import random

import pytest

from leetkit.sorting import (
    MAX_CASE_LENGTH,
    MAX_CASE_VALUE,
    MIN_CASE_VALUE,
    counting_sort,
    heap_sort,
    in_place_merge_sort,
    insert_sort,
    plain_merge_sort,
    quick_sort,
    sort_test_cases,
)

IN_PLACE_SORTS = [insert_sort, plain_merge_sort, in_place_merge_sort, heap_sort, quick_sort]
ALL_SORTS = IN_PLACE_SORTS + [counting_sort]


@pytest.fixture(scope="module")
def cases():
    return sort_test_cases(random.Random(20240314))


@pytest.mark.parametrize("sort", ALL_SORTS, ids=lambda f: f.__name__)
def test_sorts_generated_cases(sort, cases):
    for unsorted, expected in cases:
        assert sort(list(unsorted)) == expected


def test_insert_sort_returns_same_list():
    data = [3, -1, 2, 2, 0]
    assert insert_sort(data) is data
    assert data == [-1, 0, 2, 2, 3]


def test_plain_merge_sort_returns_same_list():
    data = [3, -1, 2, 2, 0]
    assert plain_merge_sort(data) is data
    assert data == [-1, 0, 2, 2, 3]


def test_in_place_merge_sort_returns_same_list():
    data = [3, -1, 2, 2, 0]
    assert in_place_merge_sort(data) is data
    assert data == [-1, 0, 2, 2, 3]


def test_heap_sort_returns_same_list():
    data = [3, -1, 2, 2, 0]
    assert heap_sort(data) is data
    assert data == [-1, 0, 2, 2, 3]


def test_quick_sort_returns_same_list():
    data = [3, -1, 2, 2, 0]
    assert quick_sort(data) is data
    assert data == [-1, 0, 2, 2, 3]


@pytest.mark.parametrize(
    "data, expected",
    [
        ([], []),
        ([7], [7]),
        ([2, 1], [1, 2]),
        ([5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
        ([1, 1, 1], [1, 1, 1]),
        ([10, -10, 0, 5, -5, 5], [-10, -5, 0, 5, 5, 10]),
    ],
)
def test_small_inputs(data, expected):
    assert insert_sort(list(data)) == expected
    assert plain_merge_sort(list(data)) == expected
    assert in_place_merge_sort(list(data)) == expected
    assert heap_sort(list(data)) == expected
    assert quick_sort(list(data)) == expected
    assert counting_sort(list(data)) == expected


def test_large_random_input():
    rng = random.Random(7)
    data = [rng.randint(-1000, 1000) for _ in range(1500)]
    expected = sorted(data)
    assert insert_sort(list(data)) == expected
    assert plain_merge_sort(list(data)) == expected
    assert in_place_merge_sort(list(data)) == expected
    assert heap_sort(list(data)) == expected
    assert quick_sort(list(data)) == expected
    assert counting_sort(list(data)) == expected


def test_sort_test_cases_shape(cases):
    assert len(cases) == 4 * MAX_CASE_LENGTH
    lengths = [len(unsorted) for unsorted, _ in cases]
    assert lengths == list(range(MAX_CASE_LENGTH)) * 4


def test_sort_test_cases_expected_is_sorted_permutation(cases):
    for unsorted, expected in cases:
        assert expected == sorted(unsorted)
        assert all(MIN_CASE_VALUE <= v <= MAX_CASE_VALUE for v in unsorted)


def test_sort_test_cases_families(cases):
    zeros = cases[MAX_CASE_LENGTH:2 * MAX_CASE_LENGTH]
    ascending = cases[2 * MAX_CASE_LENGTH:3 * MAX_CASE_LENGTH]
    descending = cases[3 * MAX_CASE_LENGTH:]
    assert all(set(unsorted) <= {0} for unsorted, _ in zeros)
    assert all(unsorted == expected for unsorted, expected in ascending)
    assert all(unsorted == expected[::-1] for unsorted, expected in descending)


def test_sort_test_cases_deterministic_with_seed():
    first = sort_test_cases(random.Random(1))
    second = sort_test_cases(random.Random(1))
    assert first == second
    assert len(first) == 4 * MAX_CASE_LENGTH
    assert first[0] == ([], [])
    zero_case = first[MAX_CASE_LENGTH + 5]
    assert zero_case[0] == [0, 0, 0, 0, 0]
    assert zero_case[1] == [0, 0, 0, 0, 0]


def test_counting_sort_explicit_range():
    assert counting_sort([3, 1, 2], 0, 5) == [1, 2, 3]


def test_counting_sort_does_not_modify_input():
    data = [3, 1, 2]
    assert counting_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


@pytest.mark.parametrize("bounds", [(0, 2), (2, 5)])
def test_counting_sort_value_out_of_range(bounds):
    with pytest.raises(ValueError):
        counting_sort([1, 3], *bounds)