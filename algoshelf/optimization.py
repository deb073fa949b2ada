"""Dynamic-programming optimisation problems."""

from __future__ import annotations

from collections.abc import Sequence

# Size in bits of the header written before every compressed segment.
_SEGMENT_HEADER = 11


def chorus_formation(heights: Sequence[int]) -> tuple[list[int], int]:
    """Pick the longest row of strictly rising then strictly falling heights.

    Returns the indices of the people who stay and how many must leave.
    """
    length = len(heights)
    if not length:
        raise ValueError("heights must not be empty")

    rising = [1] * length
    rising_prev = [-1] * length
    for i, height in enumerate(heights):
        reach = 0
        for j in range(i):
            if heights[j] < height and rising[j] > reach:
                reach = rising[j]
                rising_prev[i] = j
        rising[i] = reach + 1

    falling = [1] * length
    falling_next = [length] * length
    for i in range(length - 1, -1, -1):
        reach = 0
        for k in range(length - 1, i, -1):
            if heights[i] > heights[k] and falling[k] > reach:
                reach = falling[k]
                falling_next[i] = k
        falling[i] = reach + 1

    fewest_out, middle = length, 0
    for i in range(length):
        out = length - (rising[i] + falling[i] - 1)
        if out < fewest_out:
            fewest_out, middle = out, i

    kept: list[int] = []
    node = middle
    while node != -1:
        kept.append(node)
        node = rising_prev[node]
    kept.reverse()
    node = falling_next[middle]
    while node != length:
        kept.append(node)
        node = falling_next[node]
    return kept, fewest_out


def _bits_needed(value: int) -> int:
    if value < 0:
        raise ValueError("pixel values must not be negative")
    return max(value.bit_length(), 1)


def compress_grayscale(pixels: Sequence[int]) -> tuple[int, list[int]]:
    """Split grey levels into segments minimising the compressed size in bits.

    Each segment costs an 11-bit header plus its length times the bits its
    largest value needs. Returns the total size and the segment lengths.
    """
    bits = [_bits_needed(p) for p in pixels]
    size = [0] * (len(bits) + 1)
    last = [0] * (len(bits) + 1)
    for i in range(1, len(bits) + 1):
        widest = bits[i - 1]
        size[i] = size[i - 1] + widest
        last[i] = 1
        for span in range(2, i + 1):
            widest = max(widest, bits[i - span])
            candidate = size[i - span] + span * widest
            if size[i] > candidate:
                size[i] = candidate
                last[i] = span
        size[i] += _SEGMENT_HEADER

    segments: list[int] = []
    position = len(bits)
    while position > 0:
        segments.append(last[position])
        position -= last[position]
    segments.reverse()
    return size[-1], segments


def maximum_contiguous_sum(nums: Sequence[int]) -> tuple[int, int, int]:
    """Return the largest sum of a contiguous run and its first and last index.

    When no run has a positive sum the result is ``(0, 0, -1)``.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    best, begin, end = 0, 0, -1
    running, start = 0, 0
    if nums[0] > 0:
        running = best = nums[0]
        end = 0
    for i, value in enumerate(nums[1:], start=1):
        if running > 0:
            running += value
        else:
            running, start = value, i
        if best < running:
            best, begin, end = running, start, i
    return best, begin, end


def maximum_k_product(number: int, k: int) -> int:
    """Cut the decimal digits of ``number`` into k parts with the largest product."""
    if number < 0:
        raise ValueError("number must not be negative")
    digits = str(number)
    length = len(digits)
    if not 1 <= k <= length:
        raise ValueError("k must be between 1 and the number of digits")

    def part(begin: int, end: int) -> int:
        return int(digits[begin : end + 1])

    column = [part(0, i) for i in range(length)]
    for j in range(1, k):
        following = [0] * length
        following[j] = column[j - 1] * part(j, j)
        for i in range(j + 1, length):
            following[i] = max(column[h] * part(h + 1, i) for h in range(j - 1, i))
        column = following
    return column[-1]


def optimal_search_tree(names: Sequence[str], probabilities: Sequence[float]) -> float:
    """Return the expected search cost of an optimal binary search tree.

    ``probabilities`` alternates miss and hit probabilities:
    q0, p1, q1, p2, ..., pn, qn, so it holds 2n + 1 values for n names.
    """
    n = len(names)
    if len(probabilities) != 2 * n + 1:
        raise ValueError("probabilities must hold two values per name plus one")

    weight = [[0.0] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        for j in range(i, n + 1):
            weight[i][j] = sum(probabilities[2 * i - 2 : 2 * j + 1])

    cost = [[0.0] * (n + 2) for _ in range(n + 2)]
    for i in range(1, n + 1):
        cost[i][i] = weight[i][i]
    for span in range(1, n):
        for start in range(1, n - span + 1):
            end = start + span
            cost[start][end] = weight[start][end] + min(
                cost[start][root - 1] + cost[root + 1][end]
                for root in range(start, end + 1)
            )
    return cost[1][n]