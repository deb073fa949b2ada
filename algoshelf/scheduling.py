"""Scheduling problems: greedy multi-machine, round-robin tournaments and flow shop."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

# Starting bound for the batch-job search; schedules at or above it are never kept.
_BATCH_BOUND = 10000


@dataclass
class MachinePlan:
    """Greedy assignment of tasks to machines.

    ``assignments[m]`` lists the task numbers run on machine ``m``; when more
    than one machine shares the work, tasks are numbered in order of
    decreasing duration. ``report`` is the plan as printable text.
    """

    assignments: list[list[int]]
    loads: list[int]
    total: int
    report: str


def multiple_machine_scheduling(durations: Sequence[int], machines: int) -> MachinePlan:
    """Assign tasks to machines greedily, longest task first, to the least loaded machine.

    This is an approximation; ``total`` is the finishing time of the busiest machine.
    """
    if machines < 1:
        raise ValueError("at least one machine is required")

    if machines == 1:
        total = sum(durations)
        tasks = list(range(len(durations)))
        line = "机器0：" + "".join(f"任务{t}," for t in tasks) + f"耗时： {total}"
        return MachinePlan([tasks], [total], total, line)

    if machines >= len(durations):
        total = max(durations, default=0)
        total = max(total, 0)
        lines = [f"机器 {i} :任务 {i}" for i in range(len(durations))]
        lines.append(f"耗时： {total}")
        return MachinePlan(
            [[i] for i in range(len(durations))],
            list(durations),
            total,
            "\n".join(lines),
        )

    loads = [0] * machines
    assignments: list[list[int]] = [[] for _ in range(machines)]
    for position, duration in enumerate(sorted(durations, reverse=True)):
        machine = min(range(machines), key=loads.__getitem__)
        loads[machine] += duration
        assignments[machine].append(position)

    total = max(loads)
    lines = [
        f"机器{m}：" + "".join(f"任务{t}," for t in tasks) + f"耗时：{load}"
        for m, (tasks, load) in enumerate(zip(assignments, loads))
    ]
    lines.append(f"总耗时： {total}")
    return MachinePlan(assignments, loads, total, "\n".join(lines))


def simple_round_robin_schedule(n: int) -> list[list[int]]:
    """Tournament table for 2**n teams.

    Column 0 holds the team number; column d holds its opponent on day d.
    """
    size = 1 << n
    grid = [[0] * size for _ in range(size)]
    grid[0][0] = 1
    half = 1
    while half < size:
        _mirror(grid, half)
        half *= 2
    return grid


def round_robin_schedule(n: int) -> list[list[int]]:
    """Tournament table for any positive even number of teams, laid out like the simple one."""
    if n <= 0 or n % 2:
        raise ValueError("the number of teams must be a positive even number")
    grid = [[0] * n for _ in range(n)]
    _fill(grid, n)
    return grid


def _mirror(grid: list[list[int]], half: int) -> None:
    """Extend a half by half table in the top-left corner to twice its size."""
    for i in range(half):
        for j in range(half):
            grid[half + i][half + j] = grid[i][j]
            grid[i][half + j] = grid[i][j] + half
            grid[half + i][j] = grid[i][j] + half


def _fill(grid: list[list[int]], n: int) -> None:
    if n == 1:
        grid[0][0] = 1
        return
    half = n // 2
    if half % 2 == 0 or half == 1:
        _fill(grid, half)
        _mirror(grid, half)
        return

    # An odd half cannot be split further: solve for half + 1 teams first.
    _fill(grid, half + 1)
    overflow = [0] * half
    for i in range(half):
        for j in range(half + 1):
            grid[half + i][j] = grid[i][j] + half
            if grid[half + i][j] > n:
                overflow[i] = j
    for i, column in enumerate(overflow):
        grid[half + i][column] = i + 1
        grid[i][column] = i + 1 + half

    upper = [half + 1 + i for i in range(half)] * 2
    for i in range(half):
        for j in range(half + 1, n):
            opponent = upper[j - half + i]
            grid[i][j] = opponent
            grid[opponent - 1][j] = i + 1


def batch_job_scheduling(
    machine1: Sequence[int], machine2: Sequence[int]
) -> tuple[int, list[int]]:
    """Two-machine flow shop minimising the sum of finishing times on machine 2.

    Returns the best sum and the job order, jobs numbered from 1.
    """
    if len(machine1) != len(machine2):
        raise ValueError("both machines need a time for every job")
    times = list(zip(machine1, machine2))
    n = len(times)
    order = list(range(n))
    finish2 = [0] * (n + 1)
    finish1 = 0
    total = 0
    best_total = _BATCH_BOUND
    best_order = [0] * n

    def backtrack(position: int) -> None:
        nonlocal finish1, total, best_total, best_order
        if position == n:
            if total < best_total:
                best_total = total
                best_order = [job + 1 for job in order]
            return
        for j in range(position, n):
            first, second = times[order[j]]
            finish1 += first
            finish2[position + 1] = max(finish2[position], finish1) + second
            total += finish2[position + 1]
            if total < best_total:
                order[position], order[j] = order[j], order[position]
                backtrack(position + 1)
                order[position], order[j] = order[j], order[position]
            total -= finish2[position + 1]
            finish1 -= first

    backtrack(0)
    return best_total, best_order