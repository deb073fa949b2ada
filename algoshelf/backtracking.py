"""Backtracking searches: combination sums, phone letters, palindromes and IP addresses."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache
from itertools import combinations

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}

_DIGITS = frozenset("0123456789")


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of candidates, each usable repeatedly, that adds up to target.

    A combination lists its numbers in the order they appear among the
    candidates; combinations come in depth-first order.
    """
    if any(c <= 0 for c in candidates):
        raise ValueError("candidates must be positive")

    def search(chosen: list[int], total: int, pool: Sequence[int]) -> Iterator[list[int]]:
        for i, num in enumerate(pool):
            reached = total + num
            if reached < target:
                yield from search(chosen + [num], reached, pool[i:])
            elif reached == target:
                yield chosen + [num]

    return list(search([], 0, list(candidates)))


def combination_sum3(k: int, n: int) -> list[list[int]]:
    """Return every set of k distinct digits from 1 to 9 adding up to n, in ascending order."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]


def letter_combinations(digits: str) -> list[str]:
    """Return every letter string the digits can spell on a phone keypad.

    Strings are built digit by digit; the letter of the newest digit varies slowest.
    A digit without letters yields no strings at all.
    """
    if not digits:
        return []
    spelled = [""]
    for digit in digits:
        letters = _KEYPAD.get(digit, "")
        spelled = [prefix + letter for letter in letters for prefix in spelled]
    return spelled


def letter_combinations_backtracking(digits: str) -> list[str]:
    """Return every letter string the digits can spell, in lexicographic order."""
    if not digits:
        return []

    def spell(index: int, prefix: str) -> Iterator[str]:
        if index == len(digits):
            yield prefix
            return
        for letter in _KEYPAD.get(digits[index], ""):
            yield from spell(index + 1, prefix + letter)

    return list(spell(0, ""))


@lru_cache(maxsize=None)
def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def partition_palindromes(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromes, shorter first pieces first."""
    if len(s) == 1:
        return [[s]]

    def split(index: int, pieces: list[str]) -> Iterator[list[str]]:
        if index == len(s):
            yield pieces
        for end in range(index + 1, len(s) + 1):
            piece = s[index:end]
            if _is_palindrome(piece):
                yield from split(end, pieces + [piece])

    return list(split(0, []))


def restore_ip_addresses(s: str) -> list[str]:
    """Return every dotted IPv4 address that can be formed from the digit string ``s``."""
    if len(s) < 4:
        return []
    if not set(s) <= _DIGITS:
        raise ValueError("the string must contain only decimal digits")

    def restore(index: int, parts: tuple[int, ...]) -> Iterator[str]:
        if len(parts) == 4:
            if index == len(s):
                yield ".".join(map(str, parts))
            return
        if s[index] == "0":
            yield from restore(index + 1, parts + (0,))
            return
        remaining = len(s) - index
        needed = 4 - len(parts)
        if remaining > 3 * needed or remaining < needed:
            return
        for width in range(1, min(3, remaining - needed + 1) + 1):
            value = int(s[index : index + width])
            if value <= 255:
                yield from restore(index + width, parts + (value,))

    return list(restore(0, ()))