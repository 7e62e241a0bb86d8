"""Graph-related utilities for the border network.

This subpackage builds the directed border graph from the datasets,
runs Dijkstra on top of it and formats the resulting routes.
"""

from .builder import DistanceLoader, GraphBuilder
from .dijkstra import dijkstra, shortest_distances
from .formatting import format_hop, format_hops

__all__ = [
    "GraphBuilder",
    "DistanceLoader",
    "dijkstra",
    "shortest_distances",
    "format_hop",
    "format_hops",
]
