"""A directed graph stored as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

DEFAULT_VERTICES = 5


class AdjacencyList:
    """Directed graph over vertices 0..vertices-1; each vertex keeps its
    successors in the order their edges were added."""

    def __init__(self, vertices: int = DEFAULT_VERTICES) -> None:
        if vertices < 1:
            raise ValueError("vertices must be at least 1")
        self.vertices = vertices
        self._adjacent: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} out of range 0..{self.vertices - 1}")

    def add_edge(self, source: int, destination: int) -> None:
        """Add an edge from source to destination, after source's existing edges."""
        self._check(source)
        self._check(destination)
        self._adjacent[source].append(destination)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the successors of vertex in insertion order."""
        self._check(vertex)
        return list(self._adjacent[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return vertices reachable from start in breadth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        pending = deque([start])
        while pending:
            for nxt in self._adjacent[pending.popleft()]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    pending.append(nxt)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return vertices reachable from start in depth-first order."""
        self._check(start)
        visited = {start}
        order = [start]
        stack: list[Iterator[int]] = [iter(self._adjacent[start])]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(iter(self._adjacent[nxt]))
                    break
            else:
                stack.pop()
        return order

    def render(self) -> str:
        """Return one line per vertex: 'for vertex 0: 1 -> 2 -> NULL'."""
        return "\n".join(
            f"for vertex {vertex}: "
            + "".join(f"{nxt} -> " for nxt in successors)
            + "NULL"
            for vertex, successors in enumerate(self._adjacent)
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={self.vertices})"