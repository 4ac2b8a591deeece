"""Classic comparison and counting sorts over lists of integers.

Every comparison sort here works in place: it reorders the list it is given
and returns that same list.  :func:`counting_sort` builds and returns a new
list.
"""

from __future__ import annotations

import random
from collections.abc import Callable

MAX_CASE_LENGTH = 100
MIN_CASE_VALUE = -23
MAX_CASE_VALUE = 23


def sort_test_cases(rng: random.Random | None = None) -> list[tuple[list[int], list[int]]]:
    """Build ``(unsorted, expected)`` pairs for exercising the sorts.

    Four families are produced, each with one list of every length from 0 to
    ``MAX_CASE_LENGTH - 1``: random values, all zeros, ascending random values
    and descending random values.  Random values lie in
    ``[MIN_CASE_VALUE, MAX_CASE_VALUE]``.
    """
    rng = rng if rng is not None else random.Random()

    def random_values(length: int) -> list[int]:
        return [rng.randint(MIN_CASE_VALUE, MAX_CASE_VALUE) for _ in range(length)]

    lengths = range(MAX_CASE_LENGTH)
    cases: list[list[int]] = []
    cases.extend(random_values(n) for n in lengths)
    cases.extend([0] * n for n in lengths)
    cases.extend(sorted(random_values(n)) for n in lengths)
    cases.extend(sorted(random_values(n), reverse=True) for n in lengths)

    return [(case, sorted(case)) for case in cases]


def insert_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place by insertion and return it."""
    for i in range(1, len(nums)):
        current = nums[i]
        j = i - 1
        while j >= 0 and nums[j] > current:
            nums[j + 1] = nums[j]
            j -= 1
        nums[j + 1] = current
    return nums


def _merge_with_buffer(nums: list[int], buffer: list[int], left: int, mid: int, right: int) -> None:
    if left >= mid or mid >= right:
        return
    buffer[left:mid] = nums[left:mid]
    out, j, k = left, mid, left
    while k < mid and j < right:
        if buffer[k] <= nums[j]:
            nums[out] = buffer[k]
            k += 1
        else:
            nums[out] = nums[j]
            j += 1
        out += 1
    remaining = mid - k
    nums[out:out + remaining] = buffer[k:mid]


def plain_merge_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` by top-down merge sort with an auxiliary buffer."""
    buffer = [0] * len(nums)

    def sort_range(left: int, right: int) -> None:
        if right - left <= 1:
            return
        mid = left + ((right - left) >> 1)
        sort_range(left, mid)
        sort_range(mid, right)
        _merge_with_buffer(nums, buffer, left, mid, right)

    sort_range(0, len(nums))
    return nums


def _merge_by_swapping(
    nums: list[int], left_begin: int, left_end: int, right_begin: int, right_end: int
) -> None:
    # The merged run is written by swaps into the workspace just before the
    # right run, so the displaced workspace values end up at the front.
    i, j = left_begin, right_begin
    k = right_end - (right_end - right_begin + left_end - left_begin)
    while i < left_end and j < right_end:
        if nums[i] <= nums[j]:
            nums[k], nums[i] = nums[i], nums[k]
            i += 1
        else:
            nums[k], nums[j] = nums[j], nums[k]
            j += 1
        k += 1
    while i < left_end:
        nums[k], nums[i] = nums[i], nums[k]
        i += 1
        k += 1


def _in_place_sort(nums: list[int], unsorted_begin: int, sorted_begin: int, sorted_end: int) -> None:
    """Sort ``[unsorted_begin, sorted_end)`` given ``[sorted_begin, sorted_end)`` is sorted."""
    while True:
        unsorted_end = sorted_begin
        if unsorted_end - unsorted_begin <= 1:
            i = unsorted_begin
            while i + 1 < sorted_end and nums[i] > nums[i + 1]:
                nums[i], nums[i + 1] = nums[i + 1], nums[i]
                i += 1
            return
        # The upper half of the unsorted part serves as workspace; it is at
        # least as large as the lower half being sorted.
        unsorted_mid = unsorted_begin + ((unsorted_end - unsorted_begin) >> 1)
        _in_place_sort(nums, unsorted_begin, unsorted_mid, unsorted_mid)
        _merge_by_swapping(nums, unsorted_begin, unsorted_mid, sorted_begin, sorted_end)
        sorted_begin = unsorted_begin + unsorted_end - unsorted_mid


def in_place_merge_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` by merge sort using part of the list itself as workspace."""
    _in_place_sort(nums, 0, len(nums), len(nums))
    return nums


def _sift_down(nums: list[int], index: int, heap_size: int) -> None:
    while True:
        left = 2 * index + 1
        if left >= heap_size:
            return
        largest = left if nums[left] > nums[index] else index
        right = left + 1
        if right < heap_size and nums[right] > nums[largest]:
            largest = right
        if largest == index:
            return
        nums[index], nums[largest] = nums[largest], nums[index]
        index = largest


def heap_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place with a binary max-heap and return it."""
    size = len(nums)
    for i in reversed(range(size // 2)):
        _sift_down(nums, i, size)
    for end in reversed(range(1, size)):
        nums[0], nums[end] = nums[end], nums[0]
        _sift_down(nums, 0, end)
    return nums


def _partition(nums: list[int], left: int, right: int) -> int:
    pivot = nums[right]
    boundary = left
    for i in range(left, right):
        if nums[i] < pivot:
            nums[i], nums[boundary] = nums[boundary], nums[i]
            boundary += 1
    nums[right], nums[boundary] = nums[boundary], nums[right]
    return boundary


def quick_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` in place by quicksort (last-element pivot) and return it."""
    pending = [(0, len(nums) - 1)]
    while pending:
        left, right = pending.pop()
        if right <= left:
            continue
        mid = _partition(nums, left, right)
        pending.append((mid + 1, right))
        pending.append((left, mid - 1))
    return nums


def counting_sort(
    nums: list[int], min_value: int | None = None, max_value: int | None = None
) -> list[int]:
    """Return a new sorted list made by counting sort.

    Bounds that are not given are taken from the data.  A value outside
    ``[min_value, max_value]`` raises :class:`ValueError`.
    """
    if not nums:
        return []
    if min_value is None:
        min_value = min(nums)
    if max_value is None:
        max_value = max(nums)

    counts = [0] * max(max_value - min_value + 1, 0)
    for num in nums:
        if not min_value <= num <= max_value:
            raise ValueError(f"value {num} outside range [{min_value}, {max_value}]")
        counts[num - min_value] += 1

    result: list[int] = []
    for offset, count in enumerate(counts):
        result.extend([min_value + offset] * count)
    return result


SORTS: dict[str, Callable[[list[int]], list[int]]] = {
    "insert": insert_sort,
    "plain_merge": plain_merge_sort,
    "in_place_merge": in_place_merge_sort,
    "heap": heap_sort,
    "quick": quick_sort,
    "counting": counting_sort,
}