"""Minimum spanning trees on weighted undirected graphs."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

__all__ = ["Edge", "DisjointSet", "kruskal_mst", "prim_mst"]


@dataclass(frozen=True)
class Edge:
    """A weighted undirected edge."""

    src: int
    dest: int
    weight: int

    def __str__(self) -> str:
        return f"{self.src} -- {self.dest} == {self.weight}"


class DisjointSet:
    """Union-find over 0..size-1 with path compression and union by rank."""

    def __init__(self, size: int):
        self._parent = list(range(size))
        self._rank = [0] * size

    def find(self, item: int) -> int:
        """Return the representative of the set holding item."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return False if they were already one set."""
        x_root, y_root = self.find(x), self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def kruskal_mst(
    vertex_count: int, edges: Iterable[Edge | tuple[int, int, int]]
) -> list[Edge]:
    """Return the edges of a minimum spanning tree (a forest if disconnected)."""
    edge_list = [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]
    for edge in edge_list:
        if not (0 <= edge.src < vertex_count and 0 <= edge.dest < vertex_count):
            raise ValueError(f"edge {edge} refers to a vertex outside 0..{vertex_count - 1}")
    sets = DisjointSet(vertex_count)
    tree: list[Edge] = []
    for edge in sorted(edge_list, key=attrgetter("weight")):
        if len(tree) >= vertex_count - 1:
            break
        if sets.union(edge.src, edge.dest):
            tree.append(edge)
    return tree


def prim_mst(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return MST edges of a graph given as an adjacency matrix, 0 meaning no edge.

    Growth starts at vertex 0. Raises ValueError if the graph is not connected.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return []
    selected = [False] * size
    selected[0] = True
    tree: list[Edge] = []
    for _ in range(size - 1):
        candidates = (
            Edge(i, j, weight)
            for i, row in enumerate(matrix)
            if selected[i]
            for j, weight in enumerate(row)
            if not selected[j] and weight
        )
        best = min(candidates, key=attrgetter("weight"), default=None)
        if best is None:
            raise ValueError("graph is not connected")
        tree.append(best)
        selected[best.dest] = True
    return tree