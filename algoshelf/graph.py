"""Weighted graphs stored as adjacency matrices, with Prim's and Dijkstra's algorithms."""

from __future__ import annotations

import sys
from dataclasses import dataclass

# Largest finite float; it marks "no better distance found yet".
_LIMIT = sys.float_info.max


@dataclass
class AdjacencyMatrix:
    """Square matrix of edge weights: ``distances[i][j]`` is the weight from i to j."""

    distances: list[list[float]]


def create_adjacency_matrix(n: int) -> AdjacencyMatrix:
    """Return an n by n adjacency matrix with every distance set to zero."""
    return AdjacencyMatrix([[0.0] * n for _ in range(n)])


def prim(matrix: AdjacencyMatrix) -> AdjacencyMatrix:
    """Build a minimum spanning tree starting from node 0.

    A distance of zero means "already in the tree", so edges of weight zero
    are never chosen. The tree is returned as a symmetric adjacency matrix
    holding only the chosen edges.
    """
    size = len(matrix.distances[0])
    tree = create_adjacency_matrix(size)
    best = list(matrix.distances[0])
    via = [0] * size

    for _ in range(size - 1):
        shortest, nearest, source = _LIMIT, 0, 0
        for node, distance in enumerate(best[1:], start=1):
            if distance < shortest and distance != 0:
                shortest, nearest, source = distance, node, via[node]

        tree.distances[source][nearest] = shortest
        tree.distances[nearest][source] = shortest

        for node, weight in enumerate(matrix.distances[nearest]):
            if best[node] > weight:
                best[node] = weight
                via[node] = nearest
    return tree


def dijkstra(matrix: AdjacencyMatrix, source: int) -> list[float]:
    """Return the shortest distance from ``source`` to every node."""
    size = len(matrix.distances[0])
    shortest = list(matrix.distances[source])
    # Node 0 is held back from selection until nothing else can be picked.
    settled = {source, 0}

    for _ in range(size - 1):
        node = _closest(shortest, settled)
        settled.add(node)
        for target, weight in enumerate(matrix.distances[node]):
            candidate = weight + shortest[node]
            if shortest[target] > candidate:
                shortest[target] = candidate
    return shortest


def _closest(distances: list[float], settled: set[int]) -> int:
    """Index of the smallest distance outside ``settled``, or 0 if there is none."""
    best, index = _LIMIT, 0
    for node, distance in enumerate(distances):
        if node not in settled and distance < best:
            best, index = distance, node
    return index