"""Shortest-path computation using Dijkstra's algorithm.

Edge weights are tagged ``Distance`` values: unknown-distance edges
absorb any sum and never compare strictly less than the initial
(unknown) distance of a vertex, so they are never relaxed.
"""

import heapq
import itertools
from typing import Dict, List, Tuple

from ..domain.models import Distance
from ..ports.graph import Graph


def shortest_distances(
    graph: Graph, start: str
) -> Tuple[Dict[str, Distance], Dict[str, str]]:
    """Run single-source Dijkstra from ``start`` over the whole graph.

    The traversal only stops once the queue is empty; there is no early
    exit on reaching a particular target. Ties are broken by the order
    in which vertices were pushed.

    Returns
    -------
    dict[str, Distance], dict[str, str]
        Distance to every vertex and the predecessor of every reached
        vertex.
    """
    distances: Dict[str, Distance] = {vertex: Distance.UNKNOWN for vertex in graph}
    previous: Dict[str, str] = {}
    distances[start] = Distance.ZERO

    counter = itertools.count()
    heap: List[Tuple[int, int, str]] = [(0, next(counter), start)]
    visited = set()

    while heap:
        _, _, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        for v, weight in graph.get(u, {}).items():
            new_distance = distances[u] + weight
            if new_distance < distances.get(v, Distance.UNKNOWN):
                distances[v] = new_distance
                previous[v] = u
                assert new_distance.km is not None
                heapq.heappush(heap, (new_distance.km, next(counter), v))

    return distances, previous


def dijkstra(graph: Graph, start: str, end: str) -> Tuple[List[str], Distance]:
    """Compute the shortest path between two country ids.

    Parameters
    ----------
    graph:
        Border graph as produced by ``GraphBuilder``.
    start:
        Id of the origin country.
    end:
        Id of the destination country.

    Returns
    -------
    list[str], Distance
        The ids from ``start`` to ``end`` (inclusive) and the total
        distance. If either id is missing or ``end`` is unreachable,
        returns ``([], Distance.UNKNOWN)``.
    """
    if start not in graph or end not in graph:
        return [], Distance.UNKNOWN

    distances, previous = shortest_distances(graph, start)

    if not distances[end].is_known:
        return [], Distance.UNKNOWN

    path: List[str] = []
    current = end
    while current in previous or current == start:
        path.append(current)
        if current == start:
            break
        current = previous[current]

    path.reverse()
    return path, distances[end]
