# leetkit

A small collection of classic algorithms and data structures in plain
Python, with no runtime dependencies.

## What is inside

- `leetkit.sorting`
  - `insert_sort`, `plain_merge_sort`, `in_place_merge_sort`, `heap_sort`
    and `quick_sort` reorder the list they are given and return that same
    list.
  - `counting_sort(nums, min_value=None, max_value=None)` returns a new
    sorted list. Bounds that are left out are taken from the data; a value
    outside the given bounds raises `ValueError`.
  - `sort_test_cases(rng=None)` builds `(unsorted, expected)` pairs: random
    lists, all-zero lists, ascending lists and descending lists of every
    length from 0 to 99, with values between -23 and 23. Pass a
    `random.Random` to make the cases reproducible.
  - `SORTS` maps a short name (`"insert"`, `"plain_merge"`,
    `"in_place_merge"`, `"heap"`, `"quick"`, `"counting"`) to each sort.
- `leetkit.heap`
  - `PriorityQueue`: a max-priority queue of `(key, value)` pairs ordered by
    key only, with `push(key, value)`, `pop()` (removes and returns the pair
    with the largest key), `top()` and `len()`.
- `leetkit.linked`
  - `ForwardList`: grows and shrinks at its back end only (`push_back`,
    `pop_back`, `back`, `front`).
  - `DualList`: grows and shrinks at both ends (`push_back`, `pop_back`,
    `back`, `push_front`, `pop_front`, `front`).
  - Both support `len()`, iteration from front to back, and `to_list()`.
- `leetkit.problems`
  - `ListNode`, a singly linked integer node, with `create_list` and
    `list_values` to convert from and to Python lists.
  - `add_two_numbers`, `two_sum`, `length_of_longest_substring_linear`,
    `length_of_longest_substring_map`, `is_valid_parentheses`,
    `remove_duplicates`, `remove_element`, `reverse_list_recursive`,
    `reverse_list_iterative`, `max_subarray_dc`, `max_subarray_dp` and
    `fizz_buzz`.

## Installation

```
pip install .
```

## Examples

```python
from leetkit.sorting import quick_sort, counting_sort
from leetkit.heap import PriorityQueue
from leetkit.linked import DualList
from leetkit.problems import create_list, list_values, add_two_numbers, fizz_buzz

quick_sort([3, 1, 2])                   # [1, 2, 3]
counting_sort([3, -1, 2], -1, 3)        # [-1, 2, 3]

queue = PriorityQueue()
queue.push(5, "five")
queue.push(10, "ten")
queue.top()                             # (10, "ten")
queue.pop()                             # (10, "ten")

items = DualList()
items.push_back(1)
items.push_front(2)
items.to_list()                         # [2, 1]

total = add_two_numbers(create_list([2, 4, 3]), create_list([5, 6, 4]))
list_values(total)                      # [7, 0, 8]

fizz_buzz(5)                            # ["1", "2", "Fizz", "4", "Buzz"]
```

## Errors

- Popping from, or reading the top of, an empty `PriorityQueue` raises
  `IndexError`.
- Popping from, or reading the front or back of, an empty `ForwardList` or
  `DualList` raises `IndexError`.
- `max_subarray_dc` and `max_subarray_dp` raise `ValueError` for an empty
  list.

## What it does not do

leetkit is a library only: it installs no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```