"""Shortest paths and traversals over small integer-labelled graphs."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["Edge", "NegativeCycleError", "bellman_ford", "bfs", "dfs", "dijkstra"]


@dataclass(frozen=True)
class Edge:
    """A weighted edge from vertex ``u`` to vertex ``v``."""

    u: int
    v: int
    weight: int


class NegativeCycleError(ValueError):
    """Raised when a graph holds a cycle of negative total weight."""


EdgeLike = Edge | tuple[int, int, int]


def _as_edge(edge: EdgeLike) -> Edge:
    return edge if isinstance(edge, Edge) else Edge(*edge)


def _check_vertex(vertex: int, low: int, high: int) -> None:
    if not low <= vertex <= high:
        raise ValueError(f"vertex {vertex} is outside the range {low}..{high}")


def bellman_ford(vertex_count: int, edges: Iterable[EdgeLike], source: int) -> list[int | None]:
    """Return distances from ``source`` over directed edges on vertices 0..vertex_count-1.

    Unreachable vertices get None. Raises NegativeCycleError if a negative
    cycle is reachable from ``source``.
    """
    edge_list = [_as_edge(edge) for edge in edges]
    _check_vertex(source, 0, vertex_count - 1)
    for edge in edge_list:
        _check_vertex(edge.u, 0, vertex_count - 1)
        _check_vertex(edge.v, 0, vertex_count - 1)

    distances: list[int | None] = [None] * vertex_count
    distances[source] = 0

    def relaxable(edge: Edge) -> bool:
        start = distances[edge.u]
        end = distances[edge.v]
        return start is not None and (end is None or start + edge.weight < end)

    for _ in range(vertex_count - 1):
        changed = False
        for edge in edge_list:
            if relaxable(edge):
                start = distances[edge.u]
                assert start is not None
                distances[edge.v] = start + edge.weight
                changed = True
        if not changed:
            break

    if any(relaxable(edge) for edge in edge_list):
        raise NegativeCycleError("graph contains a negative weight cycle")
    return distances


def _adjacency(edges: Iterable[Edge | tuple[int, int]]) -> dict[int, list[int]]:
    neighbours: dict[int, list[int]] = defaultdict(list)
    for edge in edges:
        u, v = (edge.u, edge.v) if isinstance(edge, Edge) else edge
        neighbours[u].append(v)
        neighbours[v].append(u)
    return neighbours


def bfs(edges: Iterable[Edge | tuple[int, int]]) -> list[int]:
    """Breadth-first order of an undirected graph, starting at its smallest vertex."""
    neighbours = _adjacency(edges)
    if not neighbours:
        return []
    start = min(neighbours)
    seen = {start}
    queue = deque([start])
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for neighbour in neighbours[vertex]:
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append(neighbour)
    return order


def dfs(edges: Iterable[Edge | tuple[int, int]]) -> list[int]:
    """Stack-based depth-first order of an undirected graph, starting at its smallest vertex.

    A vertex is marked when it is pushed, so each vertex appears once.
    """
    neighbours = _adjacency(edges)
    if not neighbours:
        return []
    start = min(neighbours)
    seen = {start}
    stack = [start]
    order: list[int] = []
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for neighbour in neighbours[vertex]:
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append(neighbour)
    return order


def dijkstra(vertex_count: int, edges: Iterable[EdgeLike], source: int) -> dict[int, int | None]:
    """Return distances from ``source`` over undirected edges on vertices 1..vertex_count.

    Unreachable vertices map to None.
    """
    neighbours: dict[int, list[tuple[int, int]]] = {v: [] for v in range(1, vertex_count + 1)}
    for raw in edges:
        edge = _as_edge(raw)
        _check_vertex(edge.u, 1, vertex_count)
        _check_vertex(edge.v, 1, vertex_count)
        neighbours[edge.u].append((edge.v, edge.weight))
        neighbours[edge.v].append((edge.u, edge.weight))
    _check_vertex(source, 1, vertex_count)

    distances: dict[int, int | None] = {v: None for v in neighbours}
    distances[source] = 0
    unvisited = set(neighbours)
    while unvisited:
        reachable = [v for v in unvisited if distances[v] is not None]
        if not reachable:
            break
        current = min(reachable, key=lambda v: (distances[v], v))
        unvisited.remove(current)
        base = distances[current]
        assert base is not None
        for neighbour, weight in neighbours[current]:
            known = distances[neighbour]
            if neighbour in unvisited and (known is None or base + weight < known):
                distances[neighbour] = base + weight
    return distances