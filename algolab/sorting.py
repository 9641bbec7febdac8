"""Classic comparison sorts that work in place on mutable sequences of integers."""

from __future__ import annotations

import heapq
import random
from collections.abc import Callable, MutableSequence, Sequence
from itertools import pairwise

__all__ = [
    "bubble_sort",
    "insertion_sort",
    "selection_sort",
    "heap_sort",
    "merge_sort",
    "quick_sort_middle",
    "quick_sort_right",
    "quick_sort_random",
    "index_of_smallest",
    "is_sorted",
    "generate_random_array",
    "format_array",
]


def bubble_sort(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place by repeated adjacent swaps and return it."""
    size = len(nums)
    for _ in range(size):
        for j in range(size - 1):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
    return nums


def insertion_sort(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place by insertion and return it."""
    for i in range(1, len(nums)):
        key = nums[i]
        j = i - 1
        while j >= 0 and nums[j] > key:
            nums[j + 1] = nums[j]
            j -= 1
        nums[j + 1] = key
    return nums


def index_of_smallest(nums: Sequence[int], start: int, end: int) -> int:
    """Index of the first smallest item in ``nums[start:end]``; ``start`` if empty."""
    return min(range(start, end), key=nums.__getitem__, default=start)


def selection_sort(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place by selecting the minimum of the tail and return it."""
    size = len(nums)
    for i in range(size):
        j = index_of_smallest(nums, i, size)
        if nums[i] != nums[j]:
            nums[i], nums[j] = nums[j], nums[i]
    return nums


def _sift_down(nums: MutableSequence[int], i: int, heapsize: int) -> None:
    while True:
        left = 2 * i + 1
        right = 2 * i + 2
        largest = left if left < heapsize and nums[left] > nums[i] else i
        if right < heapsize and nums[right] > nums[largest]:
            largest = right
        if largest == i:
            return
        nums[i], nums[largest] = nums[largest], nums[i]
        i = largest


def heap_sort(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place using a binary max-heap and return it."""
    size = len(nums)
    for i in range(size // 2 - 1, -1, -1):
        _sift_down(nums, i, size)
    for end in range(size - 1, 0, -1):
        nums[0], nums[end] = nums[end], nums[0]
        _sift_down(nums, 0, end)
    return nums


def _merge_range(nums: MutableSequence[int], low: int, high: int) -> None:
    mid = (low + high) // 2
    if mid > low:
        _merge_range(nums, low, mid)
    if high - mid > 1:
        _merge_range(nums, mid + 1, high)
    nums[low : high + 1] = list(heapq.merge(nums[low : mid + 1], nums[mid + 1 : high + 1]))


def merge_sort(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Sort ``nums`` in place with a stable top-down merge sort and return it."""
    if len(nums) > 1:
        _merge_range(nums, 0, len(nums) - 1)
    return nums


def _hoare_partition(nums: MutableSequence[int], p: int, r: int, pivot: int) -> int:
    i = p - 1
    j = r + 1
    while True:
        j -= 1
        while nums[j] > pivot:
            j -= 1
        i += 1
        while nums[i] < pivot:
            i += 1
        if i < j:
            nums[i], nums[j] = nums[j], nums[i]
        else:
            return j


def _quicksort(
    nums: MutableSequence[int],
    choose_pivot: Callable[[MutableSequence[int], int, int], int],
) -> MutableSequence[int]:
    pending = [(0, len(nums) - 1)]
    while pending:
        p, r = pending.pop()
        if p < r:
            q = _hoare_partition(nums, p, r, choose_pivot(nums, p, r))
            pending.append((q + 1, r))
            pending.append((p, q))
    return nums


def quick_sort_middle(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Quicksort in place, pivoting on the middle element; returns ``nums``."""
    return _quicksort(nums, lambda seq, p, r: seq[(p + r) // 2])


def _right_pivot(seq: MutableSequence[int], p: int, r: int) -> int:
    seq[p], seq[r] = seq[r], seq[p]
    return seq[p]


def quick_sort_right(nums: MutableSequence[int]) -> MutableSequence[int]:
    """Quicksort in place, pivoting on the rightmost element; returns ``nums``."""
    return _quicksort(nums, _right_pivot)


def quick_sort_random(
    nums: MutableSequence[int], rng: random.Random | None = None
) -> MutableSequence[int]:
    """Quicksort in place with a randomly chosen pivot; returns ``nums``."""
    generator = rng if rng is not None else random.Random()

    def random_pivot(seq: MutableSequence[int], p: int, r: int) -> int:
        k = generator.randrange(p, r + 1)
        seq[p], seq[k] = seq[k], seq[p]
        return seq[p]

    return _quicksort(nums, random_pivot)


def is_sorted(nums: Sequence[int]) -> bool:
    """True when ``nums`` is in non-decreasing order."""
    return all(a <= b for a, b in pairwise(nums))


def generate_random_array(
    amount: int, low: int, high: int, rng: random.Random | None = None
) -> list[int]:
    """Return ``amount`` random integers drawn from ``[low, high]`` inclusive."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if high < low:
        raise ValueError("high must not be smaller than low")
    generator = rng if rng is not None else random.Random()
    return [generator.randint(low, high) for _ in range(amount)]


def format_array(nums: Sequence[int]) -> str:
    """Render ``nums`` as ``Nums: {a, b, }``."""
    return "Nums: {" + "".join(f"{n}, " for n in nums) + "}"