from collections import deque
from typing import Dict, List

from ..core.exceptions import IndexOutOfBoundsError, InvalidArgumentError


class Graph:
    """
    🕸️ Directed graph over vertices 0..n-1 🕸️

    Adjacency lists keep edges in insertion order. Duplicate edges and
    self-loops are stored as given.

    Example:
    ┌──────────────────────────────────────┐
    │   0 ──→ 1                            │
    │   ↑     ↓                            │
    │   └──── 2 ──→ 3                      │
    │                                      │
    │ adjacency: {0: [1], 1: [2],          │
    │             2: [0, 3], 3: []}        │
    │ SCCs: [[0, 2, 1], [3]]               │
    └──────────────────────────────────────┘

    Depth-first passes use an explicit stack, so recursion depth never
    depends on the graph; the visit order is the same as the recursive
    formulation.
    """

    def __init__(self, vertices: int):
        if vertices < 0:
            raise InvalidArgumentError(f"Vertex count cannot be negative, got {vertices}")
        self._vertices = vertices
        self._adjacency: Dict[int, List[int]] = {v: [] for v in range(vertices)}

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self._vertices:
            raise IndexOutOfBoundsError(
                f"Vertex {vertex} out of range [0, {self._vertices})")

    def add_edge(self, source: int, target: int) -> None:
        self._check_vertex(source)
        self._check_vertex(target)
        self._adjacency[source].append(target)

    def bfs(self, start: int) -> List[int]:
        """Breadth-first order of the vertices reachable from start."""
        self._check_vertex(start)

        result = []
        visited = [False] * self._vertices
        visited[start] = True
        queue = deque([start])

        while queue:
            vertex = queue.popleft()
            result.append(vertex)
            for neighbor in self._adjacency[vertex]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        return result

    def dfs(self, start: int) -> List[int]:
        """Depth-first preorder of the vertices reachable from start."""
        self._check_vertex(start)

        result: List[int] = []
        self._dfs_collect(start, [False] * self._vertices, result)
        return result

    def _dfs_collect(self, start: int, visited: List[bool], result: List[int]) -> None:
        visited[start] = True
        result.append(start)
        stack = [(start, iter(self._adjacency[start]))]

        while stack:
            _, neighbors = stack[-1]
            for neighbor in neighbors:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    result.append(neighbor)
                    stack.append((neighbor, iter(self._adjacency[neighbor])))
                    break
            else:
                stack.pop()

    def _fill_finish_order(self, start: int, visited: List[bool], finished: List[int]) -> None:
        """Push vertices onto finished in the order their DFS calls complete."""
        visited[start] = True
        stack = [(start, iter(self._adjacency[start]))]

        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append((neighbor, iter(self._adjacency[neighbor])))
                    break
            else:
                stack.pop()
                finished.append(vertex)

    def get_transpose(self) -> 'Graph':
        """A new graph with every edge reversed."""
        transpose = Graph(self._vertices)
        for vertex in range(self._vertices):
            for neighbor in self._adjacency[vertex]:
                transpose._adjacency[neighbor].append(vertex)
        return transpose

    def find_strongly_connected_components(self) -> List[List[int]]:
        """
        🔗 Strongly connected components (Kosaraju) 🔗

        Steps:
        1. 🏁 DFS the whole graph, recording vertices by finish time
        2. 🔄 Reverse every edge
        3. 📤 Take vertices latest-finished first; each DFS on the reversed
           graph from a still-unvisited vertex yields one component

        O(V + E) overall.
        """
        visited = [False] * self._vertices
        finished: List[int] = []

        for vertex in range(self._vertices):
            if not visited[vertex]:
                self._fill_finish_order(vertex, visited, finished)

        transpose = self.get_transpose()
        visited = [False] * self._vertices
        components: List[List[int]] = []

        while finished:
            vertex = finished.pop()
            if not visited[vertex]:
                component: List[int] = []
                transpose._dfs_collect(vertex, visited, component)
                components.append(component)

        return components

    def find_scc(self) -> List[List[int]]:
        return self.find_strongly_connected_components()

    def get_vertices(self) -> int:
        return self._vertices

    def get_adjacency_list(self) -> Dict[int, List[int]]:
        return {vertex: list(neighbors) for vertex, neighbors in self._adjacency.items()}

    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def __repr__(self) -> str:
        return f"Graph(vertices={self._vertices}, edges={self.edge_count()})"
