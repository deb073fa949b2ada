"""Dynamic-programming problems on sequences: LCS, LIS and the 0/1 knapsack."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def lcs(x: Sequence[T], y: Sequence[T]) -> list[T]:
    """Return a longest common subsequence of ``x`` and ``y``.

    On ties the subsequence from the shorter prefix of ``x`` is preferred.
    """
    previous: list[tuple[int, tuple[T, ...]]] = [(0, ())] * (len(y) + 1)
    for item in x:
        current: list[tuple[int, tuple[T, ...]]] = [(0, ())]
        for j, other in enumerate(y, start=1):
            if item == other:
                length, found = previous[j - 1]
                current.append((length + 1, found + (item,)))
            elif previous[j][0] >= current[j - 1][0]:
                current.append(previous[j])
            else:
                current.append(current[j - 1])
        previous = current
    return list(previous[-1][1])


def lis(a: Sequence[int]) -> tuple[list[int], int]:
    """Find a longest strictly increasing subsequence.

    Returns the indices of its elements in ``a`` and its length.
    """
    if not a:
        raise ValueError("sequence must not be empty")
    best = [1] * len(a)
    previous = [-1] * len(a)
    longest, end = 1, 0
    for i, value in enumerate(a):
        reach = 0
        for j in range(i):
            if a[j] < value and best[j] > reach:
                reach = best[j]
                previous[i] = j
        best[i] = reach + 1
        if best[i] > longest:
            longest, end = best[i], i

    indices: list[int] = []
    while end != -1:
        indices.append(end)
        end = previous[end]
    indices.reverse()
    return indices, longest


def knapsack01(
    weight: Sequence[int], value: Sequence[int], capacity: int
) -> tuple[list[int], int]:
    """Solve the 0/1 knapsack problem.

    Returns the indices of the chosen items and their total value. For every
    item after the first, the item is only considered at capacities strictly
    greater than its weight.
    """
    if not weight:
        raise ValueError("at least one item is required")
    if len(weight) != len(value):
        raise ValueError("weight and value must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")

    first_weight, first_value = weight[0], value[0]
    best = [first_value if j >= first_weight else 0 for j in range(capacity + 1)]
    chosen: list[tuple[int, ...]] = [
        (0,) if j >= first_weight else () for j in range(capacity + 1)
    ]

    for item, (w, v) in enumerate(zip(weight[1:], value[1:]), start=1):
        row_best = [0]
        row_chosen: list[tuple[int, ...]] = [()]
        for j in range(1, capacity + 1):
            if j > w and best[j - w] + v > best[j]:
                row_best.append(best[j - w] + v)
                row_chosen.append(chosen[j - w] + (item,))
            else:
                row_best.append(best[j])
                row_chosen.append(chosen[j])
        best, chosen = row_best, row_chosen

    return list(chosen[capacity]), best[capacity]