"""Shortest paths over the move graph.

Every move costs 1. The search is Dijkstra with a binary heap keyed on
``(distance, node index)``, so among equally distant nodes the one
created first is settled first and the reported path is stable across
runs.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass

from castduet.engine.graphbuilder.builder import Graph
from castduet.models.errors import NotReachable, UnknownNode


@dataclass(frozen=True)
class ShortestPaths:
    """Distances and predecessors from a single source."""

    graph: Graph
    source: str
    distances: tuple[float, ...]
    predecessors: tuple[int | None, ...]

    def distance(self, name: str) -> float:
        return self.distances[self.graph.index_of(name)]

    def predecessor(self, name: str) -> str | None:
        prev = self.predecessors[self.graph.index_of(name)]
        return None if prev is None else self.graph.names[prev]

    def is_reachable(self, name: str) -> bool:
        return self.distance(name) != math.inf


def shortest_paths(graph: Graph, source: str, target: str | None = None) -> ShortestPaths:
    """Run Dijkstra from *source*.

    With *target* given the search stops as soon as the target is
    settled; distances of nodes not settled by then are left as found.
    """
    start = graph.index_of(source)
    stop = graph.index_of(target) if target is not None else None

    dist = [math.inf] * len(graph)
    prev: list[int | None] = [None] * len(graph)
    visited = [False] * len(graph)

    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]

    while heap:
        d, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        if u == stop:
            break

        alt = d + 1
        for v in graph.adjacency[u]:
            if alt < dist[v]:
                dist[v] = alt
                prev[v] = u
                heapq.heappush(heap, (alt, v))

    return ShortestPaths(
        graph=graph,
        source=source,
        distances=tuple(dist),
        predecessors=tuple(prev),
    )


def reconstruct_path(graph: Graph, source: str, target: str) -> list[str]:
    """Return the node names of a shortest path from *source* to *target*.

    Raises ``UnknownNode`` if either name is not in the graph and
    ``NotReachable`` if no path exists.
    """
    if target not in graph:
        raise UnknownNode(target)

    paths = shortest_paths(graph, source, target)
    if not paths.is_reachable(target):
        raise NotReachable(source, target)

    path = [target]
    current = target
    while current != source:
        current = paths.predecessor(current)
        path.append(current)
    path.reverse()
    return path
