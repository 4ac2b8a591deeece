"""Solutions to a handful of classic interview problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list of integers."""

    val: int = -1
    next: ListNode | None = None

    def __iter__(self) -> Iterator[int]:
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def create_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives ``None``."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    return list(head) if head is not None else []


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as little-endian digit lists and return the sum likewise."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    if carry:
        tail.next = ListNode(carry)
    return dummy.next


def two_sum(nums: list[int], target: int) -> list[int]:
    """Return indices ``[i, j]`` with ``nums[i] + nums[j] == target``, or ``[]``."""
    wanted: dict[int, int] = {}
    for index, num in enumerate(nums):
        if num in wanted:
            return [wanted[num], index]
        wanted[target - num] = index
    return []


def length_of_longest_substring_linear(s: str) -> int:
    """Length of the longest substring without repeated characters.

    Each new character is searched for linearly within the current window.
    """
    length = 0
    best = 0
    for i, char in enumerate(s):
        window_start = i - length
        repeat = s.find(char, window_start, i)
        length = length + 1 if repeat == -1 else i - repeat
        best = max(best, length)
    return best


def length_of_longest_substring_map(s: str) -> int:
    """Length of the longest substring without repeated characters.

    The last position of every character is remembered in a mapping.
    """
    last_seen: dict[str, int] = {}
    length = 0
    best = 0
    for i, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is not None and previous >= i - length:
            length = i - previous
        else:
            length += 1
        best = max(best, length)
        last_seen[char] = i
    return best


_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())


def is_valid_parentheses(s: str) -> bool:
    """Whether the brackets ``()[]{}`` in ``s`` are balanced; other characters are ignored."""
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif char in _CLOSING:
            if not stack or stack.pop() != _CLOSING[char]:
                return False
    return not stack


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list so its first ``k`` items are the distinct values; return ``k``."""
    if not nums:
        return 0
    last_unique = 0
    for value in nums[1:]:
        if value != nums[last_unique]:
            last_unique += 1
            nums[last_unique] = value
    return last_unique + 1


def remove_element(nums: list[int], val: int) -> int:
    """Move every item not equal to ``val`` to the front of ``nums``; return how many.

    Removed slots are filled from the end, so the kept items may change order.
    """
    last = len(nums) - 1
    i = 0
    while i <= last:
        if nums[i] == val:
            nums[i] = nums[last]
            last -= 1
        else:
            i += 1
    return last + 1


def reverse_list_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list recursively and return the new head."""
    if head is None or head.next is None:
        return head
    new_head = reverse_list_recursive(head.next)
    head.next.next = head
    head.next = None
    return new_head


def reverse_list_iterative(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list iteratively and return the new head."""
    previous: ListNode | None = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def _require_nonempty(nums: list[int]) -> None:
    if not nums:
        raise ValueError("maximum subarray of an empty list")


def _max_crossing(nums: list[int], left: int, mid: int, right: int) -> int:
    left_best = running = nums[mid]
    for value in reversed(nums[left:mid]):
        running += value
        left_best = max(left_best, running)
    right_best = running = nums[mid + 1]
    for value in nums[mid + 2:right + 1]:
        running += value
        right_best = max(right_best, running)
    return left_best + right_best


def _max_subarray_range(nums: list[int], left: int, right: int) -> int:
    if left == right:
        return nums[left]
    mid = left + ((right - left) >> 1)
    return max(
        _max_subarray_range(nums, left, mid),
        _max_subarray_range(nums, mid + 1, right),
        _max_crossing(nums, left, mid, right),
    )


def max_subarray_dc(nums: list[int]) -> int:
    """Largest sum of a non-empty contiguous subarray, by divide and conquer."""
    _require_nonempty(nums)
    return _max_subarray_range(nums, 0, len(nums) - 1)


def max_subarray_dp(nums: list[int]) -> int:
    """Largest sum of a non-empty contiguous subarray, by dynamic programming."""
    _require_nonempty(nums)
    best = running = nums[0]
    for value in nums[1:]:
        running = value + max(running, 0)
        best = max(best, running)
    return best


def fizz_buzz(n: int) -> list[str]:
    """Return the Fizz Buzz words for 1 to ``n``."""

    def word(i: int) -> str:
        text = ("Fizz" if i % 3 == 0 else "") + ("Buzz" if i % 5 == 0 else "")
        return text or str(i)

    return [word(i) for i in range(1, n + 1)]