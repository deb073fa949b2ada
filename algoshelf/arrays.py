"""Array puzzles: majority element, shortest sub-array and the lone number."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from operator import xor


def majority_element(nums: Sequence[int]) -> int:
    """Return the most frequent value, the first to reach the top count; -1 when empty."""
    counts: Counter[int] = Counter()
    most, top = -1, 0
    for num in nums:
        counts[num] += 1
        if counts[num] > top:
            most, top = num, counts[num]
    return most


def majority_element_vote(nums: Sequence[int]) -> int:
    """Return the majority value by Boyer-Moore voting."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate, count = nums[0], 1
    for num in nums[1:]:
        if num == candidate:
            count += 1
        else:
            count -= 1
            if count == 0:
                candidate, count = num, 1
    return candidate


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest contiguous run summing to at least target, or 0."""
    if not nums:
        raise ValueError("nums must not be empty")
    if target <= 0:
        raise ValueError("target must be positive")
    shortest = len(nums) + 1
    left = total = 0
    for right, value in enumerate(nums):
        total += value
        while total >= target:
            shortest = min(shortest, right - left + 1)
            total -= nums[left]
            left += 1
    return 0 if shortest == len(nums) + 1 else shortest


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)