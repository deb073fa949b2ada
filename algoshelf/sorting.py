"""Descending heap sort, merge sort and quick sort."""

from __future__ import annotations

from collections.abc import Sequence


def heap_sort(numbers: Sequence[int]) -> list[int]:
    """Return the numbers in descending order, using a min-heap."""
    items = list(numbers)
    for start in range((len(items) - 1) // 2, -1, -1):
        _sift_down(items, len(items), start)
    for end in range(len(items) - 1, -1, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _sift_down(items: list[int], length: int, node: int) -> None:
    while True:
        smallest = node
        left, right = 2 * node + 1, 2 * node + 2
        if left < length and items[smallest] > items[left]:
            smallest = left
        if right < length and items[smallest] > items[right]:
            smallest = right
        if smallest == node:
            return
        items[node], items[smallest] = items[smallest], items[node]
        node = smallest


def merge_sort(numbers: Sequence[int]) -> list[int]:
    """Return the numbers in descending order."""
    if len(numbers) <= 1:
        return list(numbers)
    mid = len(numbers) // 2
    return merge(merge_sort(numbers[:mid]), merge_sort(numbers[mid:]))


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two descending sequences into one descending list."""
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] >= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def quick_sort(numbers: Sequence[int]) -> list[int]:
    """Return the numbers in descending order."""
    items = list(numbers)
    if len(items) <= 1:
        return items
    pivot = _partition(items)
    return quick_sort(items[:pivot]) + [items[pivot]] + quick_sort(items[pivot + 1 :])


def _partition(items: list[int]) -> int:
    """Move the first element to its place, larger values before it; return its index."""
    pivot, low, high = 0, 0, len(items) - 1
    from_right = True
    while low != high:
        if from_right:
            if items[high] > items[pivot]:
                items[high], items[pivot] = items[pivot], items[high]
                pivot = high
                low += 1
                from_right = False
            else:
                high -= 1
        else:
            if items[low] < items[pivot]:
                items[low], items[pivot] = items[pivot], items[low]
                pivot = low
                high -= 1
                from_right = True
            else:
                low += 1
    return low