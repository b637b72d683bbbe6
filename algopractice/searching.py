"""Searching, sorting and counting problems on integer arrays."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from math import inf
from typing import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the two numbers that add up to ``target``.

    Raises ValueError when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], index]
        seen[num] = index
    raise ValueError("No solution found")


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted arrays, by binary search over partitions."""
    short, long_ = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    total = len(short) + len(long_)
    if total == 0:
        raise ValueError("both arrays are empty")
    half = total // 2
    low, high = 0, len(short)
    while True:
        cut1 = (low + high) // 2
        cut2 = half - cut1
        upper_left = short[cut1 - 1] if cut1 > 0 else -inf
        upper_right = short[cut1] if cut1 < len(short) else inf
        lower_left = long_[cut2 - 1] if cut2 > 0 else -inf
        lower_right = long_[cut2] if cut2 < len(long_) else inf
        if upper_left > lower_right:
            high = cut1 - 1
        elif lower_left > upper_right:
            low = cut1 + 1
        elif total % 2:
            return float(min(upper_right, lower_right))
        else:
            return (max(upper_left, lower_left) + min(upper_right, lower_right)) / 2


def _index_of(values: Sequence[int], target: int, lo: int, hi: int) -> int | None:
    position = bisect_left(values, target, lo, hi)
    if position < hi and values[position] == target:
        return position
    return None


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array of distinct values, or -1."""
    if not nums:
        return -1
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[hi]:
            lo = mid + 1
        else:
            hi = mid
    pivot = lo
    found = _index_of(nums, target, 0, pivot)
    if found is None:
        found = _index_of(nums, target, pivot, len(nums))
    return -1 if found is None else found


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """One-based positions of two numbers in a sorted array adding up to ``target``.

    Raises ValueError when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left <= right:
        total = numbers[left] + numbers[right]
        if total < target:
            left += 1
        elif total > target:
            right -= 1
        else:
            return [left + 1, right + 1]
    raise ValueError("No solution found")


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, how many days until a warmer one; 0 if there is none."""
    result = [0] * len(temperatures)
    waiting: list[int] = []
    for day, temperature in enumerate(temperatures):
        while waiting and temperatures[waiting[-1]] < temperature:
            earlier = waiting.pop()
            result[earlier] = day - earlier
        waiting.append(day)
    return result


def _hoare_partition(items: list[int], lo: int, hi: int) -> int:
    pivot = items[lo + (hi - lo) // 2]
    i, j = lo - 1, hi + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        items[i], items[j] = items[j], items[i]


def sort_array(nums: Sequence[int]) -> list[int]:
    """Return a sorted copy of ``nums`` using quicksort with Hoare partitioning."""
    items = list(nums)
    ranges = [(0, len(items) - 1)]
    while ranges:
        lo, hi = ranges.pop()
        if lo >= hi:
            continue
        mid = _hoare_partition(items, lo, hi)
        ranges.append((lo, mid))
        ranges.append((mid + 1, hi))
    return items


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


def minimum_average_difference(nums: Sequence[int]) -> int:
    """Index where the rounded-down averages of the prefix and the rest differ least.

    Ties go to the smallest index.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    n = len(nums)
    total = sum(nums)
    prefix = 0
    best_index, best_diff = -1, None
    for index, num in enumerate(nums):
        prefix += num
        rest_count = n - index - 1
        left_avg = _truncating_div(prefix, index + 1)
        right_avg = _truncating_div(total - prefix, rest_count) if rest_count else 0
        diff = abs(left_avg - right_avg)
        if best_diff is None or diff < best_diff:
            best_index, best_diff = index, diff
    return best_index


def minimum_rounds(tasks: Sequence[int]) -> int:
    """Fewest rounds to finish tasks, two or three of one level per round, or -1."""
    if not tasks:
        raise ValueError("tasks must not be empty")
    rounds = 0
    for count in Counter(tasks).values():
        if count == 1:
            return -1
        rounds += -(-count // 3)
    return rounds


def count_subarrays(nums: Sequence[int], min_k: int, max_k: int) -> int:
    """Number of subarrays whose minimum is ``min_k`` and maximum is ``max_k``."""
    count = 0
    last_min = last_max = last_bad = -1
    for index, value in enumerate(nums):
        if value < min_k or value > max_k:
            last_bad = index
        if value == min_k:
            last_min = index
        if value == max_k:
            last_max = index
        count += max(0, min(last_min, last_max) - last_bad)
    return count