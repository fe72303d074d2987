"""Graphs stored as adjacency matrices: an unweighted one with traversals and a weighted one."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import Any

DEFAULT_SIZE = 10


def _check_size(size: int) -> None:
    if size < 1:
        raise ValueError("size must be at least 1")


class AdjacencyMatrix:
    """Graph over vertices 0..size-1 kept as a square matrix of edge flags.

    add_edge and remove_edge act on both directions, so graphs built with them
    are undirected; from_rows keeps the matrix exactly as given.
    """

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        _check_size(size)
        self.size = size
        self._rows: list[list[bool]] = [[False] * size for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> AdjacencyMatrix:
        """Build a graph from a square matrix of 0 and 1 entries."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("adjacency matrix must be square")
        graph = cls(size)
        for u, row in enumerate(rows):
            for v, entry in enumerate(row):
                if entry not in (0, 1):
                    raise ValueError(f"matrix entry must be 0 or 1, got {entry!r}")
                graph._rows[u][v] = entry == 1
        return graph

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise IndexError(f"vertex {vertex} out of range 0..{self.size - 1}")

    def _neighbours(self, vertex: int) -> Iterator[int]:
        return (v for v, linked in enumerate(self._rows[vertex]) if linked)

    def add_edge(self, u: int, v: int) -> None:
        """Connect u and v in both directions."""
        self._check(u)
        self._check(v)
        self._rows[u][v] = True
        self._rows[v][u] = True

    def remove_edge(self, u: int, v: int) -> None:
        """Disconnect u and v in both directions."""
        self._check(u)
        self._check(v)
        self._rows[u][v] = False
        self._rows[v][u] = False

    def has_edge(self, u: int, v: int) -> bool:
        """Return True when there is an edge from u to v."""
        self._check(u)
        self._check(v)
        return self._rows[u][v]

    def bfs(self, start: int) -> list[int]:
        """Return vertices in breadth-first order, neighbours taken by ascending index."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            current = pending.popleft()
            order.append(current)
            for nxt in self._neighbours(current):
                if nxt not in visited:
                    visited.add(nxt)
                    pending.append(nxt)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices in depth-first order, descending into the lowest unvisited neighbour first."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [self._neighbours(start)]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(self._neighbours(nxt))
                    break
            else:
                stack.pop()
        return order

    def dfs_iterative(self, start: int) -> list[int]:
        """Return vertices in the order an explicit stack pops them.

        A vertex is marked visited when pushed, and its unvisited neighbours
        are pushed in ascending order, so the highest is explored first.
        """
        self._check(start)
        visited = {start}
        order: list[int] = []
        stack = [start]
        while stack:
            current = stack.pop()
            order.append(current)
            for nxt in self._neighbours(current):
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append(nxt)
        return order

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"


class WeightedGraph:
    """Undirected graph whose edges carry weights, kept as a square matrix."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        _check_size(size)
        self.size = size
        self._weights: list[list[Any]] = [[None] * size for _ in range(size)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.size:
            raise IndexError(f"vertex {vertex} out of range 0..{self.size - 1}")

    def add_edge(self, u: int, v: int, weight: Any) -> None:
        """Connect u and v in both directions with the given weight."""
        self._check(u)
        self._check(v)
        self._weights[u][v] = weight
        self._weights[v][u] = weight

    def weight(self, u: int, v: int) -> Any:
        """Return the weight of the edge u-v, or None when there is no edge."""
        self._check(u)
        self._check(v)
        return self._weights[u][v]

    def render(self) -> str:
        """Return the matrix as text, with INF marking pairs that have no edge."""
        header = "   " + "".join(f"{i:2d} " for i in range(self.size))
        rows = [
            f"{i:2d}: "
            + "".join(" INF " if w is None else f"{w:3d} " for w in row)
            for i, row in enumerate(self._weights)
        ]
        return "\n".join([header, *rows])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size})"