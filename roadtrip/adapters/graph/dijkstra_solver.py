"""Dijkstra Route Solver adapter.

This adapter wraps graph/dijkstra.py and adds:
- Domain model output (RouteResult)
- Typed errors for unknown countries and unreachable destinations
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import CountryNotFoundError, NoRouteFoundError
from ...domain.models import RouteResult
from ...graph.dijkstra import dijkstra
from ...ports.graph import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, origin: str, destination: str) -> RouteResult:
        """Find the shortest path between two country ids.

        Args:
            graph: The border graph.
            origin: Origin country id.
            destination: Destination country id.

        Returns:
            RouteResult with the id path and total distance.

        Raises:
            CountryNotFoundError: If origin or destination is not a vertex.
            NoRouteFoundError: If no path exists.
        """
        self._logger.debug(
            "Solving route",
            extra={"origin": origin, "destination": destination},
        )

        if origin not in graph:
            raise CountryNotFoundError(
                f"Origin country not in graph: {origin}",
                country_name=origin,
            )
        if destination not in graph:
            raise CountryNotFoundError(
                f"Destination country not in graph: {destination}",
                country_name=destination,
            )

        path, distance = dijkstra(graph, origin, destination)

        if not path:
            self._logger.warning(
                "No route found",
                extra={"origin": origin, "destination": destination},
            )
            raise NoRouteFoundError(
                f"No path from {origin} to {destination}",
                origin=origin,
                destination=destination,
            )

        self._logger.info(
            "Route found",
            extra={
                "origin": origin,
                "destination": destination,
                "stops": len(path),
                "distance_km": distance.km,
            },
        )

        return RouteResult(
            origin=origin,
            destination=destination,
            path=tuple(path),
            total_distance=distance,
        )

    def solve_safe(self, graph: Graph, origin: str, destination: str) -> RouteResult:
        """Find the shortest path, returning an empty result on failure.

        Like solve(), but an unknown id or an unreachable destination both
        give an empty RouteResult instead of raising.
        """
        try:
            return self.solve(graph, origin, destination)
        except (CountryNotFoundError, NoRouteFoundError):
            return RouteResult(origin=origin, destination=destination)
