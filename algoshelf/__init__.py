"""Classic algorithms: sorting, graphs, dynamic programming, scheduling, backtracking and linked lists."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "graph",
    "linked_list",
    "optimization",
    "puzzles",
    "scheduling",
    "sequences",
    "sorting",
]