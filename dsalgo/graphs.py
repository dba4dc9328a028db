"""Graphs stored as adjacency matrices and adjacency lists, with DFS and BFS."""

from __future__ import annotations

from collections import deque

MAX_VERTICES = 50


class GraphError(ValueError):
    """Raised for too many vertices or a vertex that does not exist."""


class AdjacencyMatrixGraph:
    """An undirected graph stored as a 0/1 adjacency matrix."""

    def __init__(self, vertices: int = 0, max_vertices: int = MAX_VERTICES) -> None:
        if max_vertices < 1:
            raise ValueError("max_vertices must be positive")
        self.max_vertices = max_vertices
        self._matrix: list[list[int]] = []
        for _ in range(vertices):
            self.insert_vertex()

    @property
    def n(self) -> int:
        return len(self._matrix)

    @property
    def matrix(self) -> list[list[int]]:
        return [list(row) for row in self._matrix]

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise GraphError(f"vertex {v} does not exist")

    def insert_vertex(self) -> int:
        """Add a vertex and return its number."""
        if self.n == self.max_vertices:
            raise GraphError("too many vertices")
        for row in self._matrix:
            row.append(0)
        self._matrix.append([0] * (self.n + 1))
        return self.n - 1

    def insert_edge(self, u: int, v: int) -> None:
        self._check(u)
        self._check(v)
        self._matrix[u][v] = 1
        self._matrix[v][u] = 1

    def dfs(self, start: int) -> list[int]:
        """Return the vertices in recursive depth-first order from ``start``."""
        self._check(start)
        visited = [False] * self.n
        order: list[int] = []

        def visit(v: int) -> None:
            visited[v] = True
            order.append(v)
            for w, linked in enumerate(self._matrix[v]):
                if linked and not visited[w]:
                    visit(w)

        visit(start)
        return order

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = [False] * self.n
        visited[start] = True
        order = [start]
        pending = deque([start])
        while pending:
            v = pending.popleft()
            for w, linked in enumerate(self._matrix[v]):
                if linked and not visited[w]:
                    visited[w] = True
                    order.append(w)
                    pending.append(w)
        return order

    def format(self) -> str:
        """Render the matrix one row per line."""
        return "".join("".join(f"{x} " for x in row) + "\n" for row in self._matrix)


class AdjacencyListGraph:
    """A directed graph stored as adjacency lists; add both directions for undirected edges."""

    def __init__(self, vertices: int = 0, max_vertices: int = MAX_VERTICES) -> None:
        if max_vertices < 1:
            raise ValueError("max_vertices must be positive")
        self.max_vertices = max_vertices
        self._adj: list[list[int]] = []
        for _ in range(vertices):
            self.insert_vertex()

    @property
    def n(self) -> int:
        return len(self._adj)

    def _check(self, v: int) -> None:
        if not 0 <= v < self.n:
            raise GraphError(f"vertex {v} does not exist")

    def insert_vertex(self) -> int:
        """Add a vertex and return its number."""
        if self.n == self.max_vertices:
            raise GraphError("too many vertices")
        self._adj.append([])
        return self.n - 1

    def insert_edge(self, u: int, v: int, append: bool = False) -> None:
        """Add the edge u->v at the front of u's list, or at its end when ``append``."""
        self._check(u)
        self._check(v)
        if append:
            self._adj[u].append(v)
        else:
            self._adj[u].insert(0, v)

    def neighbors(self, v: int) -> list[int]:
        self._check(v)
        return list(self._adj[v])

    def dfs_iterative(self, start: int) -> list[int]:
        """Return the visiting order of a stack-driven search from ``start``.

        A vertex is marked when pushed, and all its unmarked neighbours are
        pushed when it is popped.
        """
        self._check(start)
        visited = [False] * self.n
        visited[start] = True
        stack = [start]
        order: list[int] = []
        while stack:
            v = stack.pop()
            order.append(v)
            for w in self._adj[v]:
                if not visited[w]:
                    visited[w] = True
                    stack.append(w)
        return order

    def bfs(self, start: int) -> list[int]:
        """Return the vertices in breadth-first order from ``start``."""
        self._check(start)
        visited = [False] * self.n
        visited[start] = True
        order = [start]
        pending = deque([start])
        while pending:
            v = pending.popleft()
            for w in self._adj[v]:
                if not visited[w]:
                    visited[w] = True
                    order.append(w)
                    pending.append(w)
        return order

    def format(self) -> str:
        """Render each vertex's adjacency list on its own line."""
        return "".join(
            f"vertex {v} adjacency list" + "".join(f" -> {w}" for w in adj) + "\n"
            for v, adj in enumerate(self._adj)
        )