"""Small combinatorial puzzles: N queens, making change and digit permutations."""

from __future__ import annotations

from itertools import permutations

_COINS = (25, 10, 5)


def n_queen_solutions(n: int) -> list[list[int]]:
    """Return every placement of n non-attacking queens on an n by n board.

    Each solution lists, row by row, the column of the queen in that row.
    Solutions come in lexicographic order.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[int]] = []
    columns: list[int] = []

    def place(row: int) -> None:
        if row == n:
            solutions.append(list(columns))
            return
        for col in range(n):
            if all(
                col != other and row - col != r - other and row + col != r + other
                for r, other in enumerate(columns)
            ):
                columns.append(col)
                place(row + 1)
                columns.pop()

    place(0)
    return solutions


def n_queens(n: int) -> int:
    """Return the number of solutions to the n queens problem."""
    return len(n_queen_solutions(n))


def find_retail(n: int) -> tuple[int, int, int, int]:
    """Give change for n cents with the fewest coins of 25, 10, 5 and 1 cent.

    Returns the number of coins of each value, largest first.
    """
    if n < 0:
        raise ValueError("amount must not be negative")
    counts = []
    for coin in _COINS:
        count, n = divmod(n, coin)
        counts.append(count)
    return counts[0], counts[1], counts[2], n


def full_number_arrange(n: int) -> list[int]:
    """Return every permutation of the digits 1..n, each written as one number, in ascending order."""
    if n > 9:
        raise ValueError("at most nine digits can be arranged")
    if n <= 0:
        return []
    digits = "".join(str(d) for d in range(1, n + 1))
    return [int("".join(order)) for order in permutations(digits)]