# algoshelf

A small collection of classic algorithms written in plain Python, with no
runtime dependencies. Everything is a library function; import the module
you need and call it.

## Installation

```
pip install algoshelf
```

## What is inside

| Module | Contents |
| --- | --- |
| `algoshelf.graph` | `AdjacencyMatrix`, `create_adjacency_matrix`, `prim` (minimum spanning tree from node 0), `dijkstra` (single-source shortest distances) |
| `algoshelf.sorting` | `heap_sort`, `merge_sort`, `merge`, `quick_sort`. Every sort returns a new list in descending order |
| `algoshelf.sequences` | `lcs` (longest common subsequence), `lis` (indices and length of a longest strictly increasing subsequence), `knapsack01` (chosen item indices and total value) |
| `algoshelf.scheduling` | `multiple_machine_scheduling` returning a `MachinePlan` (assignments, loads, total and a printable report), `simple_round_robin_schedule` (2**n teams), `round_robin_schedule` (any positive even number of teams), `batch_job_scheduling` (two-machine flow shop) |
| `algoshelf.puzzles` | `n_queens` (number of solutions), `n_queen_solutions` (the solutions themselves), `find_retail` (change in 25, 10, 5 and 1 cent coins), `full_number_arrange` (permutations of 1..n as numbers) |
| `algoshelf.optimization` | `chorus_formation`, `compress_grayscale`, `maximum_contiguous_sum`, `maximum_k_product`, `optimal_search_tree` |
| `algoshelf.linked_list` | `ListNode`, `detect_cycle`, `detect_cycle_two_pointers`, `get_intersection_node`, `get_intersection_node_two_pointers`, `get_intersection_node_by_negation`, `reverse_list` |
| `algoshelf.backtracking` | `combination_sum`, `combination_sum3`, `letter_combinations`, `letter_combinations_backtracking`, `partition_palindromes`, `restore_ip_addresses` |
| `algoshelf.arrays` | `majority_element`, `majority_element_vote`, `min_sub_array_len`, `single_number` |

Functions raise `ValueError` on input they cannot work with, for example an
odd team count in `round_robin_schedule` or an empty list in `lis`.

## Examples

```python
from algoshelf.sorting import merge_sort
from algoshelf.backtracking import letter_combinations
from algoshelf.arrays import min_sub_array_len
from algoshelf.puzzles import find_retail

merge_sort([3, 4, 2, 1, 5, 7, 8, 4, 7])
# [8, 7, 7, 5, 4, 4, 3, 2, 1]

len(letter_combinations("23"))
# 9

min_sub_array_len(7, [2, 3, 1, 2, 4, 3])
# 2

find_retail(123)
# (4, 2, 0, 3)
```

Graph functions work on an adjacency matrix of distances.
`create_adjacency_matrix` fills every entry with zero, and a zero counts as an
edge of weight zero, so set `float("inf")` where two nodes have no edge:

```python
from algoshelf.graph import create_adjacency_matrix, dijkstra

inf = float("inf")
matrix = create_adjacency_matrix(3)
matrix.distances[0][1] = 4
matrix.distances[0][2] = 10
matrix.distances[1][0] = inf
matrix.distances[1][2] = 1
matrix.distances[2][0] = inf
matrix.distances[2][1] = inf
dijkstra(matrix, 0)
# [0.0, 4, 5]
```

## What it does not do

The package has no command-line program and prints nothing; results such as
the multi-machine schedule come back as values (`MachinePlan.report` holds the
text of that plan for you to print).

## Running the tests

```
pip install -e ".[test]"
pytest
```