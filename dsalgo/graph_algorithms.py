"""Weighted-graph algorithms: Dijkstra, Floyd, Prim, DFS spanning trees, topological sort."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Optional, Union

from dsalgo.graphs import AdjacencyMatrixGraph, GraphError

INF = 100000
"""Weight that marks a missing edge and an unreachable distance."""

Matrix = list[list[int]]
Snapshot = tuple[tuple[int, ...], tuple[bool, ...]]


class CycleError(ValueError):
    """Raised when a topological order does not exist.

    ``order`` holds the vertices that were removed before the cycle blocked
    further progress.
    """

    def __init__(self, order: Sequence[int]) -> None:
        super().__init__("the graph has a cycle")
        self.order = list(order)


def _square(weights: Sequence[Sequence[int]]) -> Matrix:
    rows = [list(row) for row in weights]
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("the weight matrix must be square")
    return rows


def _check_vertex(n: int, v: int) -> None:
    if not 0 <= v < n:
        raise GraphError(f"vertex {v} does not exist")


def _closest(distance: Sequence[int], done: Sequence[bool]) -> Optional[int]:
    """Return the unfinished vertex nearest the start, or None if none is reachable."""
    candidates = [
        (d, v) for v, (d, finished) in enumerate(zip(distance, done))
        if not finished and d < INF
    ]
    return min(candidates)[1] if candidates else None


def _dijkstra(weights: Sequence[Sequence[int]], start: int) -> Iterator[Snapshot]:
    rows = _square(weights)
    _check_vertex(len(rows), start)
    distance = list(rows[start])
    found = [False] * len(rows)
    found[start] = True
    distance[start] = 0
    for _ in rows:
        yield tuple(distance), tuple(found)
        u = _closest(distance, found)
        if u is None:
            return
        found[u] = True
        for k, weight in enumerate(rows[u]):
            if not found[k] and distance[u] + weight < distance[k]:
                distance[k] = distance[u] + weight


def shortest_path_trace(weights: Sequence[Sequence[int]], start: int) -> list[Snapshot]:
    """Return ``(distances, found)`` as they stand before each step of Dijkstra's algorithm."""
    return list(_dijkstra(weights, start))


def shortest_path(weights: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the shortest distance from ``start`` to every vertex; INF if unreachable."""
    distances, _ = shortest_path_trace(weights, start)[-1]
    return list(distances)


def floyd_trace(weights: Sequence[Sequence[int]]) -> list[Matrix]:
    """Return the distance matrix initially and after each intermediate vertex is allowed."""
    table = _square(weights)
    steps = [[list(row) for row in table]]
    for k, via in enumerate(table):
        for row in table:
            to_k = row[k]
            for j, onward in enumerate(via):
                if row[j] > to_k + onward:
                    row[j] = to_k + onward
        steps.append([list(row) for row in table])
    return steps


def floyd(weights: Sequence[Sequence[int]]) -> Matrix:
    """Return the all-pairs shortest distances."""
    return floyd_trace(weights)[-1]


def prim(weights: Sequence[Sequence[int]], start: int = 0) -> list[int]:
    """Return the vertices in the order Prim's algorithm adds them to the spanning tree.

    The walk stops early when the remaining vertices cannot be reached.
    """
    rows = _square(weights)
    _check_vertex(len(rows), start)
    selected = [False] * len(rows)
    selected[start] = True
    distance = list(rows[start])
    order = [start]
    for _ in range(len(rows) - 1):
        u = _closest(distance, selected)
        if u is None:
            break
        selected[u] = True
        order.append(u)
        for j, weight in enumerate(rows[u]):
            if not selected[j] and weight < distance[j]:
                distance[j] = weight
    return order


def spanning_tree_edges(
    graph: Union[AdjacencyMatrixGraph, Sequence[Sequence[int]]], start: int = 0
) -> list[tuple[int, int]]:
    """Return the tree edges found by a recursive depth-first search from ``start``."""
    matrix = graph.matrix if isinstance(graph, AdjacencyMatrixGraph) else _square(graph)
    _check_vertex(len(matrix), start)
    visited = [False] * len(matrix)
    edges: list[tuple[int, int]] = []

    def visit(v: int) -> None:
        visited[v] = True
        for w, linked in enumerate(matrix[v]):
            if linked and not visited[w]:
                edges.append((v, w))
                visit(w)

    visit(start)
    return edges


def topological_sort(successors: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order of a directed graph given as successor lists.

    Each round collects every remaining vertex without incoming edges and
    removes them last-found first. Raises CycleError when a cycle remains.
    """
    adjacency = [list(targets) for targets in successors]
    n = len(adjacency)
    in_degree = [0] * n
    for targets in adjacency:
        for v in targets:
            _check_vertex(n, v)
            in_degree[v] += 1

    removed = [False] * n
    order: list[int] = []
    for _ in range(n):
        ready = [
            v for v, (gone, degree) in enumerate(zip(removed, in_degree))
            if not gone and degree == 0
        ]
        if not ready:
            break
        while ready:
            v = ready.pop()
            order.append(v)
            removed[v] = True
            for w in adjacency[v]:
                in_degree[w] -= 1
    if len(order) < n:
        raise CycleError(order)
    return order