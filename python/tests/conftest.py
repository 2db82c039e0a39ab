from __future__ import annotations

from collections import deque

import pytest

from castduet.engine.graphbuilder import Graph, build_graph


@pytest.fixture(scope="session")
def graph() -> Graph:
    return build_graph()


def bfs_distances(graph: Graph, source: str) -> dict[str, int]:
    """Plain breadth-first distances, used as an independent reference."""
    dist = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v in graph.neighbours(u):
            if v not in dist:
                dist[v] = dist[u] + 1
                queue.append(v)
    return dist


def reaches(graph: Graph, target: str) -> set[str]:
    """Every node with a directed path to *target*."""
    reverse: dict[str, list[str]] = {name: [] for name in graph}
    for name in graph:
        for v in graph.neighbours(name):
            reverse[v].append(name)
    seen = {target}
    queue = deque([target])
    while queue:
        u = queue.popleft()
        for v in reverse[u]:
            if v not in seen:
                seen.add(v)
                queue.append(v)
    return seen
