"""Minimum spanning tree of an adjacency matrix by Prim's algorithm."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """A tree edge from an already reached vertex to a new one."""

    source: int
    target: int
    weight: int

    def __str__(self) -> str:
        return f"{self.source} - {self.target} : {self.weight}"


def minimum_spanning_tree(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Grow a spanning tree from vertex 0 and return its edges in order added.

    A zero entry means there is no edge. Among equally light candidates the
    one met first, scanning reached vertices then neighbours in index order,
    is taken. Raises ValueError if the matrix is not square or the graph is
    not connected.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")

    reached = {0} if size else set()
    edges: list[Edge] = []
    while len(edges) < size - 1:
        best: Edge | None = None
        for source in sorted(reached):
            for target, weight in enumerate(matrix[source]):
                if target in reached or not weight:
                    continue
                if best is None or weight < best.weight:
                    best = Edge(source, target, weight)
        if best is None:
            raise ValueError("graph is not connected")
        edges.append(best)
        reached.add(best.target)
    return edges